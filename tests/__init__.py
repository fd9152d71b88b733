"""Test suite for locize-sync."""
