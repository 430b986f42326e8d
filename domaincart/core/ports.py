"""Port interfaces for the domain cart engine.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - AvailabilityPort: Ask a registry whether a domain can be registered
   - NotificationPort: Tell the user how an operation went

2. **Driving Ports** (adapters/external systems call into core)
   - CartPort: User intents against the cart (add, remove, trim, ...)
"""

from abc import ABC, abstractmethod

from .models import CartView, NotificationKind, OperationResult


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class AvailabilityPort(ABC):
    """Port for checking domain registration availability.

    Adapters implementing this port should query an external registry
    (RDAP, a registrar API, a fixture list, etc.) and reduce the answer
    to a boolean.

    Implementations must handle:
    - Mapping registry responses to available / registered
    - Transport errors (raise, the core treats it as unavailable)
    """

    @abstractmethod
    async def is_domain_available(self, domain: str) -> bool:
        """Check whether a domain can be registered.

        Args:
            domain: Normalized bare domain (e.g. "example.com").

        Returns:
            True if the domain is free to register, False if taken.

        Raises:
            Exception: If the registry cannot answer. The caller converts
                this into an unavailable result; it is never retried.
        """


class NotificationPort(ABC):
    """Port for reporting operation outcomes to the user.

    Fire-and-forget: the core ignores the return value and logs any
    failure without changing cart state.
    """

    @abstractmethod
    async def notify(
        self, kind: NotificationKind, title: str, message: str
    ) -> None:
        """Deliver a notification.

        Args:
            kind: Severity (error, warning, info, success).
            title: Short headline.
            message: Human-readable description.

        Raises:
            Exception: If the channel is unavailable. Caller logs and
                continues.
        """


# ============================================================================
# DRIVING PORTS (Adapters/external systems call into core)
# ============================================================================


class CartPort(ABC):
    """Port for user intents against the cart.

    Driving port: the presentation layer (CLI shell, UI) invokes these
    methods and renders the returned results and view state.

    Every intent runs to completion before returning and reports its
    outcome through the notification port. None of them raise for
    user errors; the result carries the outcome instead.
    """

    @abstractmethod
    async def add_domain(self, raw: str) -> OperationResult:
        """Validate and add a domain, then start its availability lookup.

        The lookup runs in the background; the result is returned as soon
        as the domain is in the cart.
        """

    @abstractmethod
    async def remove_domain(self, domain: str) -> OperationResult:
        """Remove a domain. Absent domains are a no-op."""

    @abstractmethod
    async def clear_cart(self) -> OperationResult:
        """Remove every domain."""

    @abstractmethod
    async def remove_unavailable(self) -> OperationResult:
        """Drop every domain not known to be available."""

    @abstractmethod
    async def keep_best(self) -> OperationResult:
        """Trim the cart to the required number of best-scoring domains."""

    @abstractmethod
    async def export_domains(self) -> OperationResult:
        """Produce the cart as a comma-separated list in result.text."""

    @abstractmethod
    async def purchase(self) -> OperationResult:
        """Start checkout. Stub: notifies only, no transaction."""

    @abstractmethod
    def get_view(self) -> CartView:
        """Build the current read-only view state."""

    @abstractmethod
    async def wait_for_lookups(self) -> None:
        """Wait until every in-flight availability lookup has settled."""
