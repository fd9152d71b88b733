"""Resolvers supplying translations for missing entries."""

from .mapping import MappingResolver, SkipResolver
from .prompt import PromptResolver

__all__ = ["MappingResolver", "PromptResolver", "SkipResolver"]
