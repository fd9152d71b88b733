"""Source-tree translation key discovery."""

from .key_extractor import (
    KeyCallVisitor,
    KeyExtractor,
    build_call_pattern,
    extract_keys_from_file,
    iter_source_files,
)

__all__ = [
    "KeyCallVisitor",
    "KeyExtractor",
    "build_call_pattern",
    "extract_keys_from_file",
    "iter_source_files",
]
