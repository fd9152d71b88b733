"""Resolution collector: turns missing entries into per-language ActionSets."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from .codec import KeyCodec
from .types import ActionSet, Language, MissingEntry, Question, Resolver

logger = logging.getLogger(__name__)


def build_question(entry: MissingEntry, codec: KeyCodec) -> Question:
    """Build the resolver question for one missing entry."""
    return Question(
        name=codec.encode(entry.key),
        key=entry.key,
        message=(
            f"How would you translate {entry.key} in {entry.language.name}? "
            + "(leave empty to skip)"
        ),
        language=entry.language,
    )


async def collect_actions(
    entries: Iterable[MissingEntry],
    languages: Mapping[str, Language],
    resolver: Resolver,
    codec: KeyCodec | None = None,
) -> dict[str, ActionSet]:
    """
    Ask the resolver about each missing entry, strictly one at a time.

    The next question is only asked once the previous answer arrived. Empty
    answers are skips and leave no trace; non-empty answers are stored under
    the entry's own key, not under the encoded name. If the same key is
    answered twice for a language (the discovered keys contained duplicates)
    the last answer wins.

    Args:
        entries: Missing entries, in the order they should be asked
        languages: Ordered language mapping; each gets an ActionSet
        resolver: Source of translations
        codec: Key encoding used towards the resolver

    Returns:
        Mapping of language code to ActionSet, in language order
    """
    codec = codec or KeyCodec()
    actions: dict[str, ActionSet] = {code: {} for code in languages}

    for entry in entries:
        question = build_question(entry, codec)
        logger.debug(f"Asking resolver: {question.name} ({entry.language.code})")

        answer = await resolver.ask(question)
        if not answer.value:
            logger.debug(f"Skipped {entry.key} for '{entry.language.code}'")
            continue

        key = entry.key
        language_actions = actions.setdefault(entry.language.code, {})
        if key in language_actions:
            logger.warning(
                f"Key '{key}' resolved twice for '{entry.language.code}', keeping the last answer"
            )
        language_actions[key] = answer.value

    logger.debug(
        "Collected actions: "
        + ", ".join(f"{code}={len(keys)}" for code, keys in actions.items())
    )
    return actions
