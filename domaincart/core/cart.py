"""Cart store: the owned state of a domain cart.

Holds the ordered, duplicate-free domain list together with the
availability map derived from lookups. Every mutation lives here so
the invariants can be enforced in one place:

- domains are unique under case-insensitive comparison
- every availability entry belongs to a current cart domain
- removing a domain drops its availability entry in the same step
"""

import itertools
import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from .errors import (
    DuplicateDomainError,
    EmptyInputError,
    InvalidFormatError,
    NoActionNeeded,
)
from .models import Availability
from .prioritizer import Prioritizer
from .validator import DomainValidator

logger = logging.getLogger(__name__)


class CartStore:
    """Ordered set of domains staged for purchase.

    All methods are synchronous so that each call is atomic with
    respect to the event loop.
    """

    def __init__(
        self,
        validator: DomainValidator | None = None,
        prioritizer: Prioritizer | None = None,
    ):
        self.validator = validator or DomainValidator()
        self.prioritizer = prioritizer or Prioritizer()
        self._domains: list[str] = []
        self._availability: dict[str, bool] = {}
        # Ticket of the lookup issued by the most recent add of each domain
        self._tickets: dict[str, int] = {}
        self._ticket_counter = itertools.count(1)

    def __len__(self) -> int:
        return len(self._domains)

    def __contains__(self, domain: object) -> bool:
        return isinstance(domain, str) and domain.lower() in self._tickets

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._domains))

    @property
    def domains(self) -> tuple[str, ...]:
        """Cart domains in display order."""
        return tuple(self._domains)

    @property
    def availability(self) -> Mapping[str, bool]:
        """Settled lookup results, keyed by domain (read-only)."""
        return MappingProxyType(self._availability)

    def availability_of(self, domain: str) -> Availability:
        return Availability.from_entry(self._availability.get(domain))

    def add(self, raw: str) -> tuple[str, int]:
        """Validate, normalize and append a domain.

        Args:
            raw: Domain as typed by the user.

        Returns:
            Tuple of (normalized domain, lookup ticket). The ticket must be
            passed back to record_availability() when the lookup settles.

        Raises:
            EmptyInputError: If raw is empty or whitespace.
            InvalidFormatError: If raw fails validation.
            DuplicateDomainError: If the normalized domain is already present.
        """
        if not raw.strip():
            raise EmptyInputError()

        result = self.validator.validate(raw)
        if not result.valid:
            raise InvalidFormatError(result.reason or "Invalid domain format")

        domain = self.validator.normalize(raw)
        if domain in self._tickets:
            raise DuplicateDomainError(domain)

        ticket = next(self._ticket_counter)
        self._domains.append(domain)
        self._tickets[domain] = ticket

        logger.debug(
            f"Added {domain} to cart",
            extra={"domain": domain, "ticket": ticket, "cart_size": len(self._domains)},
        )
        return domain, ticket

    def remove(self, domain: str) -> bool:
        """Remove a domain and its availability entry.

        Returns:
            True if the domain was present, False otherwise (no-op).
        """
        domain = self.validator.normalize(domain)
        if domain not in self._tickets:
            return False

        self._domains.remove(domain)
        self._forget(domain)
        logger.debug(f"Removed {domain} from cart", extra={"domain": domain})
        return True

    def clear(self) -> tuple[str, ...]:
        """Empty the cart and the availability map.

        Returns:
            The domains that were in the cart.
        """
        removed = tuple(self._domains)
        self._domains.clear()
        self._availability.clear()
        self._tickets.clear()
        return removed

    def sweep_unavailable(self) -> tuple[str, ...]:
        """Keep only domains whose lookup settled as available.

        Domains still being checked are dropped along with unavailable ones.

        Returns:
            The removed domains, in cart order.

        Raises:
            NoActionNeeded: If every domain is already known available.
        """
        kept = [d for d in self._domains if self._availability.get(d) is True]
        if len(kept) == len(self._domains):
            raise NoActionNeeded("There are no unavailable domains in your cart")

        removed = tuple(d for d in self._domains if self._availability.get(d) is not True)
        self._replace(kept)
        return removed

    def keep_best(self, n: int) -> tuple[str, ...]:
        """Trim the cart to its n highest-scoring domains.

        The cart is reordered by descending score; ties keep insertion order.

        Returns:
            The dropped domains, in cart order.

        Raises:
            NoActionNeeded: If the cart holds n domains or fewer.
        """
        if len(self._domains) <= n:
            raise NoActionNeeded(
                f"You already have {len(self._domains)} domains which is not "
                f"more than required ({n})"
            )

        best = self.prioritizer.select_best(self._domains, n)
        kept = set(best)
        dropped = tuple(d for d in self._domains if d not in kept)
        self._replace(best)
        return dropped

    def record_availability(self, domain: str, available: bool, ticket: int) -> bool:
        """Merge a settled lookup into the availability map.

        The write is skipped when the domain left the cart after the lookup
        was issued, or was removed and added again (newer ticket).

        Returns:
            True if the result was stored, False if it was discarded as stale.
        """
        if self._tickets.get(domain) != ticket:
            logger.debug(
                f"Discarded stale availability result for {domain}",
                extra={"domain": domain, "ticket": ticket},
            )
            return False

        self._availability[domain] = available
        return True

    def _replace(self, domains: list[str]) -> None:
        """Swap in a new domain list and drop state for everything else."""
        kept = set(domains)
        for domain in self._domains:
            if domain not in kept:
                self._forget(domain)
        self._domains = list(domains)

    def _forget(self, domain: str) -> None:
        self._availability.pop(domain, None)
        self._tickets.pop(domain, None)
