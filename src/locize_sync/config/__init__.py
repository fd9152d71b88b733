"""Configuration loading and validation."""

from .manager import ConfigManager
from .schema import FindKeysConfig, LocizeConfig, LocizeSyncConfig, ResolverConfig

__all__ = [
    "ConfigManager",
    "FindKeysConfig",
    "LocizeConfig",
    "LocizeSyncConfig",
    "ResolverConfig",
]
