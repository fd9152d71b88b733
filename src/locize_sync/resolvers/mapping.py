"""Non-interactive resolvers for scripted and report-only runs."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import yaml

from ..reconciliation.diff import is_missing
from ..reconciliation.normalizer import flatten_resources
from ..reconciliation.types import Answer, Question
from ..utils.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class MappingResolver:
    """
    Answer from a prepared ``{language_code: {key: value}}`` mapping.

    Per-language values may be nested; they are flattened to dotted keys
    first. Pairs absent from the mapping, or holding a falsy value such as
    ``false`` or ``0``, are skipped.
    """

    def __init__(self, answers: Mapping[str, Mapping[str, object]]) -> None:
        self.answers: dict[str, dict[str, object]] = {
            code: flatten_resources(values) for code, values in answers.items()
        }

    @classmethod
    def from_file(cls, path: Path) -> MappingResolver:
        """
        Load answers from a YAML (or JSON) file.

        Raises:
            ConfigurationError: If the file is missing or not a mapping of mappings
        """
        if not path.exists():
            raise ConfigurationError(f"Answers file not found: {path}")

        try:
            with path.open("r", encoding="utf-8") as f:
                data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid answers file {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict) or not all(
            isinstance(v, dict) for v in data.values()  # pyright: ignore[reportUnknownVariableType]
        ):
            raise ConfigurationError(
                f"Answers file {path} must map language codes to key/value mappings"
            )

        logger.debug(f"Loaded answers for {len(data)} language(s) from {path}")  # pyright: ignore[reportUnknownArgumentType]
        return cls(data)  # pyright: ignore[reportUnknownArgumentType]

    async def ask(self, question: Question) -> Answer:
        value = self.answers.get(question.language.code, {}).get(question.key)
        if is_missing(value):
            return Answer(question.name, None)
        return Answer(question.name, str(value))


class SkipResolver:
    """Skip every question."""

    async def ask(self, question: Question) -> Answer:
        return Answer(question.name, None)
