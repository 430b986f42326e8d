"""Cart service: implements CartPort for user intents.

This is a core service that runs each user intent against the cart
store, starts availability lookups for new domains, and reports every
outcome through the notification port. Cart signals are converted into
results here and never escape to the presentation layer.
"""

import logging
from dataclasses import replace

from .cart import CartStore
from .errors import CartError, DuplicateDomainError
from .models import (
    Availability,
    CartView,
    NotificationKind,
    OperationResult,
    Outcome,
    ProgressBand,
)
from .ports import CartPort, NotificationPort
from .tracker import AvailabilityTracker

logger = logging.getLogger(__name__)


class CartService(CartPort):
    """Core implementation of CartPort.

    Coordinates the cart store, availability tracker and notification
    port. num_required is advisory: adding past it is allowed, only
    purchase is gated on it.
    """

    def __init__(
        self,
        store: CartStore,
        tracker: AvailabilityTracker,
        notification: NotificationPort,
        num_required: int = 5,
    ):
        """Initialize the cart service.

        Args:
            store: CartStore holding the cart state.
            tracker: AvailabilityTracker bound to the same store.
            notification: NotificationPort implementation for user feedback.
            num_required: Target cart size.

        Raises:
            ValueError: If num_required is not positive or the tracker is
                bound to a different store.
        """
        if num_required <= 0:
            raise ValueError(f"num_required must be positive, got {num_required}")
        if tracker.store is not store:
            raise ValueError("tracker must be bound to the same cart store")
        self.store = store
        self.tracker = tracker
        self.notification = notification
        self.num_required = num_required

    async def add_domain(self, raw: str) -> OperationResult:
        try:
            domain, ticket = self.store.add(raw)
        except DuplicateDomainError as e:
            return await self._rejected("add", e, NotificationKind.WARNING)
        except CartError as e:
            return await self._rejected("add", e, NotificationKind.ERROR)

        self.tracker.schedule(domain, ticket)

        logger.info(
            f"Domain {domain} added",
            extra={"domain": domain, "cart_size": len(self.store)},
        )
        return await self._succeeded(
            "add",
            NotificationKind.SUCCESS,
            "Domain Added",
            f"Added {domain} to your cart",
            domains=(domain,),
        )

    async def remove_domain(self, domain: str) -> OperationResult:
        domain = self.store.validator.normalize(domain)
        if not self.store.remove(domain):
            message = f"{domain} is not in your cart"
            await self._notify(NotificationKind.INFO, "Domain Not in Cart", message)
            return OperationResult(
                operation="remove",
                outcome=Outcome.NO_ACTION,
                title="Domain Not in Cart",
                message=message,
            )

        logger.info(f"Domain {domain} removed", extra={"domain": domain})
        return await self._succeeded(
            "remove",
            NotificationKind.INFO,
            "Domain Removed",
            f"Removed {domain} from your cart",
            domains=(domain,),
        )

    async def clear_cart(self) -> OperationResult:
        removed = self.store.clear()
        logger.info("Cart cleared", extra={"removed_count": len(removed)})
        return await self._succeeded(
            "clear",
            NotificationKind.INFO,
            "Cart Cleared",
            "All domains have been removed from your cart",
            domains=removed,
        )

    async def remove_unavailable(self) -> OperationResult:
        try:
            removed = self.store.sweep_unavailable()
        except CartError as e:
            return await self._rejected(
                "sweep", e, NotificationKind.INFO, Outcome.NO_ACTION
            )

        logger.info(
            f"Removed {len(removed)} unavailable domains",
            extra={"removed": list(removed)},
        )
        return await self._succeeded(
            "sweep",
            NotificationKind.SUCCESS,
            "Unavailable Domains Removed",
            f"Removed {len(removed)} unavailable domain(s)",
            domains=removed,
        )

    async def keep_best(self) -> OperationResult:
        try:
            dropped = self.store.keep_best(self.num_required)
        except CartError as e:
            return await self._rejected(
                "keep_best", e, NotificationKind.INFO, Outcome.NO_ACTION
            )

        logger.info(
            f"Kept best {self.num_required} domains",
            extra={"dropped": list(dropped), "kept": list(self.store.domains)},
        )
        return await self._succeeded(
            "keep_best",
            NotificationKind.SUCCESS,
            "Kept Best Domains",
            f"Kept the {self.num_required} best domains based on prioritization",
            domains=dropped,
        )

    async def export_domains(self) -> OperationResult:
        domains = self.store.domains
        if not domains:
            message = "There are no domains to copy"
            await self._notify(NotificationKind.WARNING, "Empty Cart", message)
            return OperationResult(
                operation="export",
                outcome=Outcome.NO_ACTION,
                title="Empty Cart",
                message=message,
            )

        result = await self._succeeded(
            "export",
            NotificationKind.SUCCESS,
            "Domains Exported",
            f"{len(domains)} domains exported",
            domains=domains,
        )
        return replace(result, text=", ".join(domains))

    async def purchase(self) -> OperationResult:
        count = len(self.store)
        if count != self.num_required:
            message = (
                f"Purchase requires exactly {self.num_required} domains, "
                f"your cart has {count}"
            )
            await self._notify(NotificationKind.WARNING, "Purchase Unavailable", message)
            return OperationResult(
                operation="purchase",
                outcome=Outcome.REJECTED,
                title="Purchase Unavailable",
                message=message,
            )

        logger.info(
            "Purchase initiated",
            extra={"domains": list(self.store.domains)},
        )
        return await self._succeeded(
            "purchase",
            NotificationKind.SUCCESS,
            "Purchase Initiated",
            f"Purchase process started for {count} domains",
            domains=self.store.domains,
        )

    def get_view(self) -> CartView:
        domains = self.store.domains
        count = len(domains)

        if count > self.num_required:
            band = ProgressBand.OVER
            status_message = f"Remove {count - self.num_required} domain(s)"
        elif count == self.num_required:
            band = ProgressBand.EXACT
            status_message = "Ready to purchase!"
        else:
            band = ProgressBand.UNDER
            status_message = f"Add {self.num_required - count} more domain(s)"

        availability: dict[str, Availability] = {
            domain: self.store.availability_of(domain) for domain in domains
        }
        return CartView(
            domains=domains,
            availability=availability,
            num_required=self.num_required,
            progress_fraction=count / self.num_required,
            progress_band=band,
            purchase_enabled=count == self.num_required,
            status_message=status_message,
        )

    async def wait_for_lookups(self) -> None:
        await self.tracker.wait_idle()

    async def _succeeded(
        self,
        operation: str,
        kind: NotificationKind,
        title: str,
        message: str,
        domains: tuple[str, ...] = (),
    ) -> OperationResult:
        await self._notify(kind, title, message)
        return OperationResult(
            operation=operation,
            outcome=Outcome.SUCCESS,
            title=title,
            message=message,
            domains=domains,
        )

    async def _rejected(
        self,
        operation: str,
        error: CartError,
        kind: NotificationKind,
        outcome: Outcome = Outcome.REJECTED,
    ) -> OperationResult:
        """Report a cart signal and turn it into a result."""
        logger.debug(
            f"{operation} not applied: {error}",
            extra={"operation": operation, "error_kind": type(error).__name__},
        )
        await self._notify(kind, error.title, str(error))
        return OperationResult(
            operation=operation,
            outcome=outcome,
            title=error.title,
            message=str(error),
            error_kind=type(error).__name__,
        )

    async def _notify(self, kind: NotificationKind, title: str, message: str) -> None:
        # Delivery failure must not affect cart state
        try:
            await self.notification.notify(kind, title, message)
        except Exception as e:
            logger.error(
                f"Failed to deliver notification '{title}': {e}",
                exc_info=True,
            )
