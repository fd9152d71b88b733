"""
Key normalizer: flattens nested resource data into dot-delimited keys.

Example:
    >>> flatten_resources({"home": {"title": "Home", "tabs": ["A", "B"]}})
    {'home.title': 'Home', 'home.tabs.0': 'A', 'home.tabs.1': 'B'}
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence

from .types import Key

logger = logging.getLogger(__name__)

KEY_SEPARATOR = "."


def _is_branch(value: object) -> bool:
    # Strings are sequences too, but they are leaves
    return isinstance(value, Mapping) or (
        isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
    )


def _children(value: object) -> Iterator[tuple[str, object]]:
    if isinstance(value, Mapping):
        for child_key, child_value in value.items():  # pyright: ignore[reportUnknownVariableType]
            yield str(child_key), child_value  # pyright: ignore[reportUnknownArgumentType]
    else:
        for index, child_value in enumerate(value):  # pyright: ignore[reportArgumentType,reportUnknownVariableType]
            yield str(index), child_value  # pyright: ignore[reportUnknownArgumentType]


def _walk(value: object, prefix: str, separator: str) -> Iterator[tuple[Key, object]]:
    for segment, child in _children(value):
        path = f"{prefix}{separator}{segment}" if prefix else segment
        if _is_branch(child):
            # Empty branches carry no leaf and vanish
            yield from _walk(child, path, separator)
        else:
            yield path, child


def flatten_resources(
    data: Mapping[str, object], separator: str = KEY_SEPARATOR
) -> dict[Key, object]:
    """
    Flatten a nested resource mapping into ``path -> leaf value``.

    Nested mapping keys are joined with ``separator``; list items use their
    index as path segment. Keys that already contain the separator are kept
    verbatim, so flattening a flat mapping returns an equal mapping.

    If two leaves flatten to the same key (``{"a.b": 1, "a": {"b": 2}}``)
    the one visited last wins and a warning is logged.

    Args:
        data: Nested resource data as returned by the store
        separator: Path segment separator

    Returns:
        Flat mapping of keys to leaf values, in visit order
    """
    flat: dict[Key, object] = {}
    for key, value in _walk(data, "", separator):
        if key in flat:
            logger.warning(
                f"Resource key '{key}' flattened more than once, keeping the last value"
            )
        flat[key] = value
    return flat
