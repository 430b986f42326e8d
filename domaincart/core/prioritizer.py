"""Prioritization rules for cart domains.

This module implements the scoring used when the cart is trimmed down
to the required number of domains.
"""

from collections.abc import Iterable

# Checked in order; a domain gets the first matching tier.
SUFFIX_TIERS: tuple[tuple[str, int], ...] = (
    (".com", 300),
    (".app", 200),
    (".xyz", 100),
)


class Prioritizer:
    """Ranks domains by suffix tier and name length.

    Pure decision logic, no side effects.
    """

    @staticmethod
    def score(domain: str) -> int:
        """Score a domain. Higher score = better pick.

        Weighting:
        - Suffix tier: .com 300, .app 200, .xyz 100, anything else 0
        - Minus the length of the name before the first dot, so shorter
          names win within a tier

        The result may be negative.
        """
        base = 0
        for suffix, tier_score in SUFFIX_TIERS:
            if domain.endswith(suffix):
                base = tier_score
                break

        name = domain.split(".", 1)[0]
        return base - len(name)

    @staticmethod
    def rank(domains: Iterable[str]) -> list[str]:
        """Order domains by descending score.

        sorted() is stable, so among equal scores the earlier domain
        keeps its place ahead of later ones.
        """
        return sorted(domains, key=Prioritizer.score, reverse=True)

    @staticmethod
    def select_best(domains: Iterable[str], n: int) -> list[str]:
        """Return the n highest-scoring domains in rank order."""
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        return Prioritizer.rank(domains)[:n]
