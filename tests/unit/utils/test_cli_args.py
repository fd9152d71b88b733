"""Tests for command-line argument parsing."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from locize_sync.utils.cli.args import (
    PathValidationError,
    parse_arguments,
    validate_config_file_path,
    validate_root_path,
)


class TestParseArguments:
    """Test cases for parse_arguments."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)

        args = parse_arguments([])

        assert args.root == tmp_path.resolve()
        assert args.config_file == (tmp_path / "locize-sync.yml").resolve()
        assert args.debug_level == logging.INFO
        assert args.log_file is None
        assert args.answers is None
        assert args.dry_run is False
        assert args.init is False

    def test_all_options(self, tmp_path: Path) -> None:
        src = tmp_path / "src"
        src.mkdir()

        args = parse_arguments(
            [
                str(src),
                "--config-file",
                str(tmp_path / "custom.yml"),
                "--debug-level",
                "debug",
                "--log-file",
                str(tmp_path / "logs" / "sync.log"),
                "--answers",
                str(tmp_path / "answers.yml"),
                "--dry-run",
            ]
        )

        assert args.root == src.resolve()
        assert args.config_file == (tmp_path / "custom.yml").resolve()
        assert args.debug_level == logging.DEBUG
        assert args.log_file == (tmp_path / "logs" / "sync.log").resolve()
        assert args.answers == (tmp_path / "answers.yml").resolve()
        assert args.dry_run is True

    def test_invalid_debug_level_exits(self) -> None:
        with pytest.raises(SystemExit):
            _ = parse_arguments(["--debug-level", "verbose"])

    def test_missing_root_is_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(PathValidationError, match="not a directory"):
            _ = parse_arguments([str(tmp_path / "nope")])


class TestPathValidation:
    """Test cases for the path validators."""

    def test_config_file_cannot_be_a_directory(self, tmp_path: Path) -> None:
        with pytest.raises(PathValidationError, match="not a file"):
            _ = validate_config_file_path(str(tmp_path))

    def test_config_file_parent_must_exist(self, tmp_path: Path) -> None:
        with pytest.raises(PathValidationError, match="Parent directory"):
            _ = validate_config_file_path(str(tmp_path / "missing" / "c.yml"))

    def test_root_expands_user(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("HOME", str(tmp_path))

        assert validate_root_path("~") == tmp_path.resolve()
