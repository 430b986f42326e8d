"""Syntax rules for bare domain names.

This module is the sole gate in front of cart mutation: a raw string
only becomes a cart domain once it passes these checks.
"""

import re

from .models import ValidationResult

ALLOWED_SUFFIXES: tuple[str, ...] = (".com", ".xyz", ".app")

# Labels are 1-63 alphanumerics with interior hyphens only.
_LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
_DOMAIN_PATTERN = re.compile(
    rf"{_LABEL}(?:\.{_LABEL})*\.(?:com|xyz|app)", re.IGNORECASE
)


class DomainValidator:
    """Checks raw user input against the bare-domain rules.

    No external dependencies: pure function over strings.
    All methods are static as the class carries no state.
    """

    @staticmethod
    def validate(raw: str) -> ValidationResult:
        """Validate a raw domain string.

        Rules are applied in order and the first failure wins:
        1. No protocol or path
        2. Ends with an allowed suffix (case-insensitive)
        3. Matches the hostname grammar

        Examples:
        'example.com'         → valid
        'http://example.com'  → not bare
        'example.net'         → wrong suffix
        '-bad.com'            → invalid format
        """
        if "://" in raw or "/" in raw:
            return ValidationResult(
                valid=False,
                reason="Domain should be bare, no protocol or path (e.g., example.com)",
            )

        if not DomainValidator.has_allowed_suffix(raw):
            return ValidationResult(
                valid=False,
                reason=f"Domain must end with one of: {', '.join(ALLOWED_SUFFIXES)}",
            )

        if _DOMAIN_PATTERN.fullmatch(raw) is None:
            return ValidationResult(valid=False, reason="Invalid domain format")

        return ValidationResult(valid=True)

    @staticmethod
    def has_allowed_suffix(raw: str) -> bool:
        """Check the top-level suffix, ignoring case."""
        return raw.lower().endswith(ALLOWED_SUFFIXES)

    @staticmethod
    def normalize(raw: str) -> str:
        """Canonical stored form of a domain."""
        return raw.lower()
