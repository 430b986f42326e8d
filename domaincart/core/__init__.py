"""Core domain logic for the domain cart engine.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .errors import (
    CartError,
    DuplicateDomainError,
    EmptyInputError,
    InvalidFormatError,
    LookupFailure,
    NoActionNeeded,
)
from .models import (
    Availability,
    CartView,
    NotificationKind,
    OperationResult,
    Outcome,
    ProgressBand,
    ValidationResult,
)

__all__ = [
    "Availability",
    "CartError",
    "CartView",
    "DuplicateDomainError",
    "EmptyInputError",
    "InvalidFormatError",
    "LookupFailure",
    "NoActionNeeded",
    "NotificationKind",
    "OperationResult",
    "Outcome",
    "ProgressBand",
    "ValidationResult",
]
