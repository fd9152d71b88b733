"""
Global test configuration fixtures for locize-sync tests.

This module provides reusable pytest fixtures for configuration objects,
ordered language mappings and temporary source trees.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from locize_sync.config.schema import (
    FindKeysConfig,
    LocizeConfig,
    LocizeSyncConfig,
    ResolverConfig,
)
from locize_sync.reconciliation.types import Language
from tests.utils.fakes import make_languages


@pytest.fixture
def locize_config() -> LocizeConfig:
    """
    Create a locize configuration pointing at a fake API.

    Returns:
        LocizeConfig: Configuration with an API key and no retries
    """
    return LocizeConfig(
        project_id="proj-123",
        api_key="secret-key",
        version="latest",
        namespace="translation",
        base_url="https://api.locize.test",
        max_retries=0,
    )


@pytest.fixture
def base_config(locize_config: LocizeConfig) -> LocizeSyncConfig:
    """Create a full configuration with default discovery and resolver settings."""
    return LocizeSyncConfig(
        locize=locize_config,
        find_keys=FindKeysConfig(),
        resolver=ResolverConfig(),
    )


@pytest.fixture
def en_de() -> dict[str, Language]:
    """English then German, in that order."""
    return make_languages(("en", "English"), ("de", "German"))


@pytest.fixture
def write_source_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """
    Return a helper writing ``relative path -> content`` files under tmp_path.

    Returns:
        Callable creating the files and returning the tree's root
    """

    def _write(files: dict[str, str]) -> Path:
        root = tmp_path / "project"
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            _ = path.write_text(content, encoding="utf-8")
        root.mkdir(parents=True, exist_ok=True)
        return root

    return _write
