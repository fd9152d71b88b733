"""Translation store clients."""

from .locize_client import LocizeClient, parse_languages

__all__ = ["LocizeClient", "parse_languages"]
