"""Sync applier: persists ActionSets with per-language fault isolation."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .types import ActionSet, SyncResult, SyncStatus, TranslationStore

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "something went wrong"


async def apply_actions(
    store: TranslationStore, actions: Mapping[str, ActionSet]
) -> list[SyncResult]:
    """
    Write each non-empty ActionSet to the store, one language at a time.

    Empty ActionSets are skipped without calling the store. A failing write
    is logged and recorded, then the next language is attempted; writes are
    never retried.

    Args:
        store: Translation store client
        actions: Mapping of language code to ActionSet, in language order

    Returns:
        One SyncResult per language, in the same order
    """
    results: list[SyncResult] = []

    for code, language_actions in actions.items():
        if not language_actions:
            results.append(SyncResult(code, SyncStatus.SKIPPED))
            continue

        try:
            await store.add_missing_translations(code, dict(language_actions))
        except Exception as e:  # noqa: BLE001
            message = str(e) or FALLBACK_ERROR_MESSAGE
            logger.error(f"Failed to save translations for '{code}': {message}")
            results.append(
                SyncResult(
                    code, SyncStatus.FAILED, count=len(language_actions), error=message
                )
            )
            continue

        logger.info(f"Saved {len(language_actions)} translation(s) for '{code}'")
        results.append(SyncResult(code, SyncStatus.SYNCED, count=len(language_actions)))

    return results
