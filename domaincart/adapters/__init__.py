"""External adapters for the domain cart engine.

This package contains all external dependencies (HTTP registries,
terminal output, etc.) and provides implementations of the core port
interfaces.

Adapter Organization:

- availability/: Adapters for registration lookups (RDAP, static list)
- notification/: Adapters for reporting operation outcomes (stdout)
- cli/: Command handlers that render cart state and forward intents
"""
