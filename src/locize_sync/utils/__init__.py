"""Shared utilities for locize-sync."""
