"""
Reconciliation engine: compares discovered keys with the store's
translations, collects the missing ones and writes them back.
"""

from .applier import apply_actions
from .codec import KeyCodec
from .collector import collect_actions
from .diff import MissingEntries, find_missing, is_missing
from .engine import KeySource, ReconciliationReport, Reconciler
from .loader import load_resources
from .normalizer import flatten_resources
from .types import (
    ActionSet,
    Answer,
    Key,
    Language,
    MissingEntry,
    Question,
    Resolver,
    ResourceBundle,
    SyncResult,
    SyncStatus,
    TranslationStore,
)

__all__ = [
    "ActionSet",
    "Answer",
    "Key",
    "KeyCodec",
    "KeySource",
    "Language",
    "MissingEntries",
    "MissingEntry",
    "Question",
    "ReconciliationReport",
    "Reconciler",
    "Resolver",
    "ResourceBundle",
    "SyncResult",
    "SyncStatus",
    "TranslationStore",
    "apply_actions",
    "collect_actions",
    "find_missing",
    "flatten_resources",
    "is_missing",
    "load_resources",
]
