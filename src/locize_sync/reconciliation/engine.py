"""
Reconciliation engine.

Runs one reconciliation pass: discover keys, list languages, load every
language's resources, diff, resolve, and apply. Each stage hands its result
to the next as a return value; nothing is cached between runs.

Usage Example:
    >>> async with LocizeClient(config.locize) as store:
    ...     reconciler = Reconciler(KeyExtractor(config.find_keys), store, PromptResolver())
    ...     report = await reconciler.run(Path("."))
    >>> [r.language for r in report.failed]
    []
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from .applier import apply_actions
from .codec import KeyCodec
from .collector import collect_actions
from .diff import MissingEntries, find_missing
from .loader import load_resources
from .types import (
    ActionSet,
    Key,
    Language,
    Resolver,
    ResourceBundle,
    SyncResult,
    SyncStatus,
    TranslationStore,
)

logger = logging.getLogger(__name__)


class KeySource(Protocol):
    """Discovers the translation keys referenced under a source root."""

    async def find(self, root: Path) -> list[Key]: ...


@dataclass
class ReconciliationReport:
    """Everything one run produced, for reporting by the caller."""

    keys: Sequence[Key]
    languages: Mapping[str, Language]
    missing: int
    actions: Mapping[str, ActionSet] = field(default_factory=dict)
    results: list[SyncResult] = field(default_factory=list)

    @property
    def failed(self) -> list[SyncResult]:
        return [r for r in self.results if r.status is SyncStatus.FAILED]

    @property
    def synced(self) -> list[SyncResult]:
        return [r for r in self.results if r.status is SyncStatus.SYNCED]


class Reconciler:
    """Drives the reconciliation stages in order, one at a time."""

    def __init__(
        self,
        key_source: KeySource,
        store: TranslationStore,
        resolver: Resolver,
        codec: KeyCodec | None = None,
        include_reference_language: bool = True,
    ) -> None:
        self.key_source: KeySource = key_source
        self.store: TranslationStore = store
        self.resolver: Resolver = resolver
        self.codec: KeyCodec = codec or KeyCodec()
        self.include_reference_language: bool = include_reference_language

    async def discover(self, root: Path) -> list[Key]:
        keys = await self.key_source.find(root)
        logger.debug(f"Discovered {len(keys)} key(s) under {root}")
        return keys

    async def fetch_languages(self) -> dict[str, Language]:
        """List the store's languages, dropping the reference one if configured."""
        languages = await self.store.fetch_available_languages()
        if not self.include_reference_language:
            languages = {
                code: lang for code, lang in languages.items() if not lang.is_reference
            }
        logger.debug(f"Languages: {', '.join(languages) or '(none)'}")
        return languages

    async def load(
        self, languages: Mapping[str, Language]
    ) -> dict[str, ResourceBundle]:
        return await load_resources(self.store, languages)

    def plan(
        self,
        keys: Sequence[Key],
        languages: Mapping[str, Language],
        resources: Mapping[str, ResourceBundle],
    ) -> MissingEntries:
        return find_missing(keys, languages, resources)

    async def resolve(
        self, entries: MissingEntries, languages: Mapping[str, Language]
    ) -> dict[str, ActionSet]:
        return await collect_actions(entries, languages, self.resolver, self.codec)

    async def apply(self, actions: Mapping[str, ActionSet]) -> list[SyncResult]:
        return await apply_actions(self.store, actions)

    async def run(self, root: Path) -> ReconciliationReport:
        """
        Run a full reconciliation pass for the source tree at ``root``.

        Args:
            root: Source tree to discover keys in

        Returns:
            ReconciliationReport describing what was found and persisted

        Raises:
            DiscoveryError: If key discovery fails
            StoreError: If the language list cannot be fetched
            ResourceLoadError: If any language's resources cannot be loaded
        """
        keys = await self.discover(root)
        languages = await self.fetch_languages()
        resources = await self.load(languages)
        entries = self.plan(keys, languages, resources)
        missing = sum(1 for _ in entries)
        logger.info(f"{missing} missing translation(s) across {len(languages)} language(s)")

        actions = await self.resolve(entries, languages)
        results = await self.apply(actions)

        return ReconciliationReport(
            keys=keys,
            languages=languages,
            missing=missing,
            actions=actions,
            results=results,
        )
