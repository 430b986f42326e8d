"""Domain models for the domain cart engine.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class Availability(Enum):
    """Read-side availability tri-state for a cart domain.

    UNKNOWN is never stored: it is reported for domains whose lookup
    is still in flight (no entry in the availability map).
    """

    UNKNOWN = "unknown"
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"

    @classmethod
    def from_entry(cls, entry: bool | None) -> "Availability":
        """Map a stored availability entry (or its absence) to the tri-state."""
        if entry is None:
            return cls.UNKNOWN
        return cls.AVAILABLE if entry else cls.UNAVAILABLE


class NotificationKind(Enum):
    """Severity of a user-facing notification."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"


class ProgressBand(Enum):
    """Where the cart size sits relative to the required count."""

    UNDER = "under"
    EXACT = "exact"
    OVER = "over"


class Outcome(Enum):
    """How a user intent terminated.

    - SUCCESS: the cart changed (or the stubbed action ran)
    - NO_ACTION: the intent was a correct no-op
    - REJECTED: input was refused and the cart is unchanged
    """

    SUCCESS = "success"
    NO_ACTION = "no_action"
    REJECTED = "rejected"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a raw domain string."""

    valid: bool
    reason: str | None = None

    def __post_init__(self) -> None:
        """Validate result invariants on creation."""
        if self.valid and self.reason is not None:
            raise ValueError("a valid result cannot carry a rejection reason")
        if not self.valid and not self.reason:
            raise ValueError("an invalid result must carry a reason")


@dataclass(frozen=True)
class OperationResult:
    """Summary of a single user intent run against the cart."""

    operation: str
    outcome: Outcome
    title: str
    message: str
    domains: tuple[str, ...] = ()  # domains added or removed by the intent
    error_kind: str | None = None  # taxonomy class name when not SUCCESS
    text: str = ""  # exported domain list, empty for other intents

    @property
    def succeeded(self) -> bool:
        return self.outcome == Outcome.SUCCESS


@dataclass(frozen=True)
class CartView:
    """Read-only view state derived from the cart for rendering.

    WARNING: availability is a snapshot taken when the view is built.
    Lookups that settle afterwards are not reflected until the view
    is rebuilt.
    """

    domains: tuple[str, ...]
    availability: Mapping[str, Availability]  # converted to proxy in __post_init__
    num_required: int
    progress_fraction: float
    progress_band: ProgressBand
    purchase_enabled: bool
    status_message: str

    def __post_init__(self) -> None:
        """Convert availability dict to read-only proxy."""
        if isinstance(self.availability, dict):
            object.__setattr__(
                self, "availability", MappingProxyType(self.availability)
            )

    @property
    def progress_percent(self) -> float:
        return self.progress_fraction * 100
