"""
Key encoding at the resolver boundary.

Some resolvers cannot take ``.`` in a question name (prompt libraries treat it
as a path into the answers object), so keys are handed over with the
separator replaced by an escape character.

The mapping is not invertible for keys that already contain the escape
(``a.b`` and ``a*b`` both encode to ``a*b``), so answers are never decoded
from the name: the collector files each answer under the key it asked about.
"""

from __future__ import annotations

from dataclasses import dataclass

from .normalizer import KEY_SEPARATOR
from .types import Key


@dataclass(frozen=True)
class KeyCodec:
    """Key -> resolver name mapping."""

    separator: str = KEY_SEPARATOR
    escape: str = "*"

    def __post_init__(self) -> None:
        if not self.separator or not self.escape:
            raise ValueError("separator and escape must be non-empty")
        if self.separator == self.escape:
            raise ValueError("separator and escape must differ")

    def encode(self, key: Key) -> str:
        return key.replace(self.separator, self.escape)
