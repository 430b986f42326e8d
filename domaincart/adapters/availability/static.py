"""Static availability adapter.

Implements AvailabilityPort from a fixed set of taken domains. Every
other domain is reported as available. Useful for demos and for
running the shell without network access.
"""

import asyncio
from collections.abc import Iterable

from domaincart.core.ports import AvailabilityPort


class StaticAvailabilityAdapter(AvailabilityPort):
    """Answers lookups from an in-memory set of registered domains."""

    def __init__(
        self, unavailable: Iterable[str] = (), latency_seconds: float = 0.0
    ):
        """Initialize static adapter.

        Args:
            unavailable: Domains to report as taken (case-insensitive).
            latency_seconds: Delay before each answer, to mimic a remote call.
        """
        if latency_seconds < 0:
            raise ValueError(
                f"latency_seconds must be non-negative, got {latency_seconds}"
            )
        self.unavailable = frozenset(d.lower() for d in unavailable)
        self.latency_seconds = latency_seconds

    async def is_domain_available(self, domain: str) -> bool:
        if self.latency_seconds:
            await asyncio.sleep(self.latency_seconds)
        return domain.lower() not in self.unavailable
