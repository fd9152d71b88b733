"""
Translation key discovery for source trees.

This module scans source files for calls to translation functions and
returns the keys they reference. Python files are parsed with ``ast``;
JavaScript/TypeScript/Vue files (and Python files that do not parse) are
scanned with a regular expression.

Usage Examples:
    Find keys in a directory:
        >>> extractor = KeyExtractor(FindKeysConfig())
        >>> await extractor.find(Path("src"))
        ['home.title', 'home.subtitle']

    Extract from a single file:
        >>> extract_keys_from_file(Path("app.js"), ["t"])
        ['nav.back']
"""

from __future__ import annotations

import ast
import asyncio
import logging
import os
import re
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path
from typing_extensions import override

from ..config.schema import FindKeysConfig
from ..utils.core.exceptions import DiscoveryError

logger = logging.getLogger(__name__)

# i18next's <Trans i18nKey="..."> component
I18N_KEY_ATTRIBUTE = re.compile(r"""\bi18nKey\s*=\s*\{?\s*(['"`])(?P<key>[^'"`]+?)\1""")


def build_call_pattern(functions: Sequence[str]) -> re.Pattern[str]:
    """
    Build a regex matching ``fn('key')`` for each configured function name.

    Dotted names such as ``i18n.t`` are matched literally; a bare name also
    matches as a method (``this.t('key')``). Template literals with
    ``${...}`` interpolation are dynamic and never match.
    """
    names = "|".join(re.escape(name) for name in sorted(functions, key=len, reverse=True))
    return re.compile(
        rf"""(?<![\w$])(?:{names})\s*\(\s*(['"`])(?P<key>(?:(?!\$\{{).)+?)\1"""
    )


class KeyCallVisitor(ast.NodeVisitor):
    """AST visitor collecting literal first arguments of translation calls."""

    def __init__(self, functions: Iterable[str]) -> None:
        # Attribute calls are matched on their last segment
        self.functions: set[str] = {name.rsplit(".", 1)[-1] for name in functions}
        self.keys: list[str] = []

    @override
    def visit_Call(self, node: ast.Call) -> None:
        func_name = self._get_function_name(node.func)

        if func_name in self.functions and node.args:
            first = node.args[0]
            if isinstance(first, ast.Constant) and isinstance(first.value, str):
                self.keys.append(first.value)

        self.generic_visit(node)

    def _get_function_name(self, func_node: ast.AST) -> str | None:
        if isinstance(func_node, ast.Name):
            return func_node.id
        elif isinstance(func_node, ast.Attribute):
            return func_node.attr
        return None


def _extract_with_regex(content: str, pattern: re.Pattern[str]) -> list[str]:
    # Calls and i18nKey attributes interleaved in source order
    matches = [
        (m.start(), m.group("key"))
        for regex in (pattern, I18N_KEY_ATTRIBUTE)
        for m in regex.finditer(content)
    ]
    return [key for _, key in sorted(matches)]


def extract_keys_from_file(
    filepath: Path,
    functions: Sequence[str],
    pattern: re.Pattern[str] | None = None,
) -> list[str]:
    """
    Extract translation keys from a single file, in source order.

    Args:
        filepath: File to scan
        functions: Translation function names
        pattern: Precompiled call pattern (built from ``functions`` if omitted)

    Returns:
        Keys found in the file, duplicates included

    Raises:
        OSError: If the file cannot be read
    """
    content = filepath.read_text(encoding="utf-8", errors="replace")
    pattern = pattern or build_call_pattern(functions)

    if filepath.suffix == ".py":
        try:
            tree = ast.parse(content, filename=str(filepath))
        except SyntaxError as e:
            logger.warning(f"Syntax error in {filepath}, falling back to pattern scan: {e}")
        else:
            visitor = KeyCallVisitor(functions)
            visitor.visit(tree)
            return visitor.keys

    return _extract_with_regex(content, pattern)


def iter_source_files(
    root: Path, suffixes: Iterable[str], exclude_dirs: Iterable[str]
) -> Iterator[Path]:
    """Yield files under ``root`` with a matching suffix, in sorted path order."""
    suffix_set = set(suffixes)
    excluded = set(exclude_dirs)

    def _raise(error: OSError) -> None:
        raise error

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        # Prune in place so excluded trees are never descended into
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        for filename in sorted(filenames):
            filepath = Path(dirpath) / filename
            if filepath.suffix in suffix_set:
                yield filepath


class KeyExtractor:
    """Finds the translation keys referenced under a source root."""

    def __init__(self, config: FindKeysConfig | None = None) -> None:
        self.config: FindKeysConfig = config or FindKeysConfig()
        self._pattern: re.Pattern[str] = build_call_pattern(self.config.functions)

    def scan(self, root: Path) -> list[str]:
        """
        Scan ``root`` synchronously.

        Raises:
            DiscoveryError: If ``root`` is not a directory or a file is unreadable
        """
        if not root.exists():
            raise DiscoveryError(f"Source directory does not exist: {root}")
        if not root.is_dir():
            raise DiscoveryError(f"Source path is not a directory: {root}")

        keys: list[str] = []
        file_count = 0
        try:
            for filepath in iter_source_files(
                root, self.config.include, self.config.exclude_dirs
            ):
                file_keys = extract_keys_from_file(
                    filepath, self.config.functions, self._pattern
                )
                file_count += 1
                if file_keys:
                    logger.debug(f"Found {len(file_keys)} key(s) in {filepath}")
                keys.extend(file_keys)
        except OSError as e:
            raise DiscoveryError(f"Failed to scan {root}: {e}", context=root) from e

        if self.config.unique:
            keys = list(dict.fromkeys(keys))

        logger.info(f"Scanned {file_count} files, found {len(keys)} translation keys")
        return keys

    async def find(self, root: Path) -> list[str]:
        """Scan ``root`` in a worker thread; see :meth:`scan`."""
        return await asyncio.to_thread(self.scan, root)
