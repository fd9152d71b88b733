"""
Data types and collaborator protocols for the reconciliation engine.

Keys are plain ``str`` dot-delimited paths. Languages, missing entries and
sync results are small immutable records; the collaborators (store client,
resolver) are described structurally so that any object with the right
async methods can be plugged in.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Protocol, TypeAlias

Key: TypeAlias = str
ResourceValue: TypeAlias = object
ResourceBundle: TypeAlias = Mapping[Key, ResourceValue]
ActionSet: TypeAlias = dict[Key, str]


@dataclass(frozen=True)
class Language:
    """A target locale: its code, display name and whatever else the store reports."""

    code: str
    name: str
    metadata: Mapping[str, object] = field(default_factory=dict, compare=False)

    @property
    def is_reference(self) -> bool:
        return bool(self.metadata.get("isReferenceLanguage", False))


class MissingEntry(NamedTuple):
    """A (language, key) pair lacking a usable translation."""

    language: Language
    key: Key


class Question(NamedTuple):
    """What a resolver is asked.

    ``name`` is the key encoded for resolvers that cannot take the separator;
    ``key`` is the untouched key, for resolvers that look answers up by it.
    """

    name: str
    message: str
    language: Language
    key: Key


class Answer(NamedTuple):
    """A resolver's reply; ``value`` of ``None`` or ``""`` means skip."""

    name: str
    value: str | None


class SyncStatus(Enum):
    """Outcome of persisting one language's ActionSet."""

    SYNCED = "synced"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class SyncResult:
    """Per-language outcome of the Sync Applier."""

    language: str
    status: SyncStatus
    count: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is not SyncStatus.FAILED


class TranslationStore(Protocol):
    """Remote translation store used by the engine."""

    async def fetch_available_languages(self) -> dict[str, Language]: ...

    async def fetch_namespace_resources(self, language: str) -> Mapping[str, object]: ...

    async def add_missing_translations(
        self, language: str, translations: Mapping[Key, str]
    ) -> None: ...


class Resolver(Protocol):
    """Supplies a value, or a skip, for a missing translation."""

    async def ask(self, question: Question) -> Answer: ...
