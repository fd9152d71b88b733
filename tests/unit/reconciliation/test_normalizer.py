"""Tests for resource flattening."""

from __future__ import annotations

import logging

import pytest

from locize_sync.reconciliation.normalizer import flatten_resources


class TestFlattenResources:
    """Test cases for flatten_resources."""

    def test_nested_mappings_join_with_dots(self) -> None:
        """Test that nested keys become dot-delimited paths."""
        data = {"home": {"title": "Home", "nav": {"back": "Back"}}, "ok": "OK"}

        assert flatten_resources(data) == {
            "home.title": "Home",
            "home.nav.back": "Back",
            "ok": "OK",
        }

    def test_lists_are_indexed_branches(self) -> None:
        """Test that list items use their index as a path segment."""
        data = {"steps": ["one", {"label": "two"}]}

        assert flatten_resources(data) == {"steps.0": "one", "steps.1.label": "two"}

    def test_empty_branches_are_dropped(self) -> None:
        """Test that empty lists and mappings produce no keys."""
        data = {"empty_list": [], "empty_map": {}, "kept": "yes"}

        assert flatten_resources(data) == {"kept": "yes"}

    def test_scalar_leaves_are_kept_as_is(self) -> None:
        """Test that falsy and non-string leaves survive flattening."""
        data = {"a": 0, "b": False, "c": None, "d": "", "e": 1.5}

        assert flatten_resources(data) == data

    @pytest.mark.parametrize(
        "flat",
        [
            {},
            {"a": "1"},
            {"a.b": "x", "c.d.e": "y", "f": ""},
        ],
    )
    def test_flattening_is_idempotent(self, flat: dict[str, object]) -> None:
        """Test that an already-flat mapping is returned unchanged."""
        once = flatten_resources(flat)

        assert once == flat
        assert flatten_resources(once) == once

    def test_collision_is_last_write_wins_with_warning(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that colliding paths keep the later value and log a warning."""
        data = {"a.b": "first", "a": {"b": "second"}}

        with caplog.at_level(logging.WARNING):
            result = flatten_resources(data)

        assert result == {"a.b": "second"}
        assert "a.b" in caplog.text

    def test_order_follows_visit_order(self) -> None:
        """Test that keys come out depth-first in input order."""
        data = {"z": "1", "a": {"y": "2", "b": "3"}}

        assert list(flatten_resources(data)) == ["z", "a.y", "a.b"]
