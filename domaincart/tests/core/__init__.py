"""Unit tests for core domain logic.

Tests use in-memory fakes and have no external dependencies.
"""
