"""Availability tracking for cart domains.

This module runs the background availability lookup started by each
successful add and merges its outcome back into the cart store.
"""

import asyncio
import logging

from .cart import CartStore
from .ports import AvailabilityPort

logger = logging.getLogger(__name__)


class AvailabilityTracker:
    """Schedules one lookup per added domain and records the result.

    Uses ports but contains no adapter-specific logic. Lookups are
    fire-and-forget: no retry, no timeout escalation, and cart
    operations never cancel them. A lookup that settles after its
    domain left the cart is discarded by the store.
    """

    def __init__(self, store: CartStore, lookup: AvailabilityPort):
        self.store = store
        self.lookup = lookup
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def schedule(self, domain: str, ticket: int) -> asyncio.Task[None]:
        """Start the lookup for a freshly added domain.

        Must be called from within a running event loop.

        Args:
            domain: Normalized domain returned by CartStore.add().
            ticket: Lookup ticket returned by CartStore.add().

        Returns:
            The task running the lookup.
        """
        task = asyncio.create_task(
            self.check(domain, ticket), name=f"availability:{domain}"
        )
        # Hold a reference until the task finishes
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def check(self, domain: str, ticket: int) -> bool:
        """Look up a domain and merge the result into the store.

        A failing lookup is logged and recorded as unavailable; it is
        never raised to the caller.

        Returns:
            The availability value that was merged (or discarded).
        """
        try:
            available = await self.lookup.is_domain_available(domain)
        except Exception as e:
            logger.error(
                f"Error checking availability for {domain}: {e}",
                exc_info=True,
                extra={"domain": domain},
            )
            available = False

        stored = self.store.record_availability(domain, bool(available), ticket)
        if stored:
            logger.info(
                f"Availability for {domain}: {'available' if available else 'unavailable'}",
                extra={"domain": domain, "available": available},
            )
        return bool(available)

    async def wait_idle(self) -> None:
        """Wait for every pending lookup, including ones scheduled meanwhile."""
        while True:
            running = [task for task in self._pending if not task.done()]
            if not running:
                return
            await asyncio.gather(*running, return_exceptions=True)

    async def aclose(self) -> None:
        """Cancel outstanding lookups. Used at shutdown only."""
        pending = list(self._pending)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
            logger.info(f"Cancelled {len(pending)} pending availability lookups")
