"""Tests for the exception hierarchy."""

from __future__ import annotations

from locize_sync.utils.core.exceptions import (
    ConfigurationError,
    DiscoveryError,
    ErrorCategory,
    ErrorSeverity,
    LocizeSyncError,
    ResourceLoadError,
    StoreError,
)


class TestExceptions:
    """Test cases for exception classification."""

    def test_store_error_category_depends_on_status(self) -> None:
        assert StoreError("HTTP 500", 500).category is ErrorCategory.API
        assert StoreError("connection refused").category is ErrorCategory.NETWORK
        assert StoreError("HTTP 500", 500).status_code == 500

    def test_fatal_errors_are_not_recoverable(self) -> None:
        for error in (
            DiscoveryError("x"),
            ResourceLoadError("x", language="de"),
            ConfigurationError("x"),
        ):
            assert isinstance(error, LocizeSyncError)
            assert error.recoverable is False
            assert error.severity is ErrorSeverity.HIGH

    def test_user_message_defaults_to_message(self) -> None:
        assert DiscoveryError("boom").user_message == "boom"
        assert DiscoveryError("boom", user_message="nicer").user_message == "nicer"
