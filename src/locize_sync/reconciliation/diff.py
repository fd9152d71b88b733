"""
Diff engine: which discovered keys lack a usable translation, per language.

A value counts as missing when it is absent or falsy in the JavaScript sense:
``None``, ``""``, ``0``, ``False`` and NaN. A translation whose literal value
is ``0`` is therefore reported as missing.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Mapping, Sequence

from .types import Key, Language, MissingEntry, ResourceBundle


def is_missing(value: object) -> bool:
    """Return True if ``value`` does not count as an existing translation."""
    if isinstance(value, float) and math.isnan(value):
        return True
    return not value


class MissingEntries:
    """
    Lazy, restartable sequence of MissingEntry.

    Entries come key-major, language-minor, in the order of the discovered
    keys and of the language mapping. Duplicate keys are not collapsed.
    Each iteration recomputes from the (read-only) inputs.
    """

    def __init__(
        self,
        keys: Sequence[Key],
        languages: Mapping[str, Language],
        resources: Mapping[str, ResourceBundle],
    ) -> None:
        self.keys: Sequence[Key] = keys
        self.languages: Mapping[str, Language] = languages
        self.resources: Mapping[str, ResourceBundle] = resources

    def __iter__(self) -> Iterator[MissingEntry]:
        for key in self.keys:
            for code, language in self.languages.items():
                bundle = self.resources.get(code, {})
                if is_missing(bundle.get(key)):
                    yield MissingEntry(language, key)

    def by_language(self) -> dict[str, list[Key]]:
        """Group missing keys per language code (every language present)."""
        grouped: dict[str, list[Key]] = {code: [] for code in self.languages}
        for entry in self:
            grouped[entry.language.code].append(entry.key)
        return grouped


def find_missing(
    keys: Sequence[Key],
    languages: Mapping[str, Language],
    resources: Mapping[str, ResourceBundle],
) -> MissingEntries:
    """Build the missing-entry sequence for ``keys`` across ``languages``."""
    return MissingEntries(keys, languages, resources)
