"""Language resource loader."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from ..utils.core.exceptions import ResourceLoadError
from .normalizer import flatten_resources
from .types import Language, ResourceBundle, TranslationStore

logger = logging.getLogger(__name__)


async def load_resources(
    store: TranslationStore, languages: Mapping[str, Language]
) -> dict[str, ResourceBundle]:
    """
    Fetch and flatten the resources of every language, one after the other.

    Nothing is returned until every language is loaded: diffing against a
    partial set would report existing translations as missing.

    Args:
        store: Translation store client
        languages: Ordered mapping of language code to Language

    Returns:
        Mapping of language code to its flat ResourceBundle, in language order

    Raises:
        ResourceLoadError: If any language's resources cannot be fetched
    """
    resources: dict[str, ResourceBundle] = {}
    for code in languages:
        try:
            raw = await store.fetch_namespace_resources(code)
        except Exception as e:
            raise ResourceLoadError(
                f"Failed to load resources for '{code}': {e}", language=code
            ) from e
        resources[code] = flatten_resources(raw)
        logger.debug(f"Loaded {len(resources[code])} keys for '{code}'")

    return resources
