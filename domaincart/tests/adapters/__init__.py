"""Tests for adapter implementations.

Adapters are tested against mocked HTTP clients and captured stdout.
"""
