"""Runners that execute output tests."""
