"""RDAP availability adapter.

Implements AvailabilityPort by querying an RDAP service for the
domain's registration record. A registry that has no record for the
domain answers 404, which means the name is free to register.

rdap.org acts as a bootstrap service and redirects to the authoritative
registry server for each TLD.
"""

import logging
from typing import Any

import httpx

from domaincart.core.errors import LookupFailure
from domaincart.core.ports import AvailabilityPort

logger = logging.getLogger(__name__)


class RDAPAvailabilityAdapter(AvailabilityPort):
    """RDAP-backed availability adapter via the /domain endpoint."""

    def __init__(self, base_url: str = "https://rdap.org", timeout: float = 5.0):
        """Initialize RDAP adapter.

        Args:
            base_url: Base URL of the RDAP service (e.g., https://rdap.org)
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            follow_redirects=True,
            headers={"Accept": "application/rdap+json"},
        )

    async def __aenter__(self) -> "RDAPAvailabilityAdapter":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.client.aclose()

    async def close(self) -> None:
        """Close the httpx client and clean up resources."""
        await self.client.aclose()

    async def is_domain_available(self, domain: str) -> bool:
        """Check registration status for a domain.

        Args:
            domain: Normalized bare domain.

        Returns:
            True if the registry has no record (404), False if it has one (200).

        Raises:
            LookupFailure: On transport errors or any other status
                (429 rate limit, 403, 5xx).
        """
        try:
            response = await self.client.get(f"/domain/{domain}")
        except httpx.HTTPError as e:
            raise LookupFailure(domain, f"{type(e).__name__}: {e}") from e

        if response.status_code == 404:
            return True
        if response.status_code == 200:
            return False

        logger.warning(
            f"RDAP returned unexpected status {response.status_code} for {domain}",
            extra={"domain": domain, "status_code": response.status_code},
        )
        raise LookupFailure(
            domain,
            f"unexpected status {response.status_code}: {response.text[:200]}",
        )
