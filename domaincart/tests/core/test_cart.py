"""Unit tests for CartStore state and invariants."""

import pytest

from domaincart.core.cart import CartStore
from domaincart.core.errors import (
    DuplicateDomainError,
    EmptyInputError,
    InvalidFormatError,
    NoActionNeeded,
)
from domaincart.core.models import Availability
from domaincart.core.validator import DomainValidator

# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture
def store() -> CartStore:
    """Create an empty cart store."""
    return CartStore()


def _add_all(store: CartStore, *domains: str) -> dict[str, int]:
    """Add domains and return their lookup tickets."""
    return dict(store.add(d) for d in domains)


def assert_no_orphans(store: CartStore) -> None:
    """Every availability entry belongs to a current cart domain."""
    assert len(store.availability) <= len(store)
    assert set(store.availability) <= set(store.domains)
    assert len(set(store.domains)) == len(store.domains)


# ============================================================================
# add
# ============================================================================


class TestAdd:
    """Validated, normalized, duplicate-free insertion."""

    def test_add_appends_normalized_domain(self, store: CartStore) -> None:
        domain, ticket = store.add("Example.COM")
        assert domain == "example.com"
        assert ticket >= 1
        assert store.domains == ("example.com",)

    def test_add_keeps_insertion_order(self, store: CartStore) -> None:
        _add_all(store, "b.com", "a.app", "c.xyz")
        assert store.domains == ("b.com", "a.app", "c.xyz")

    def test_surrounding_whitespace_is_not_trimmed(self, store: CartStore) -> None:
        with pytest.raises(InvalidFormatError) as exc_info:
            store.add("  spaced.app  ")
        assert exc_info.value.reason == DomainValidator.validate("  spaced.app  ").reason
        assert len(store) == 0

    def test_new_domain_has_unknown_availability(self, store: CartStore) -> None:
        store.add("x.com")
        assert store.availability_of("x.com") == Availability.UNKNOWN
        assert "x.com" not in store.availability

    @pytest.mark.parametrize("raw", ["", "   ", "\t"])
    def test_empty_input_rejected(self, store: CartStore, raw: str) -> None:
        with pytest.raises(EmptyInputError):
            store.add(raw)
        assert len(store) == 0

    def test_invalid_format_rejected_with_reason(self, store: CartStore) -> None:
        with pytest.raises(InvalidFormatError) as exc_info:
            store.add("example.net")
        assert "must end with one of" in exc_info.value.reason
        assert len(store) == 0

    def test_duplicate_in_any_case_rejected(self, store: CartStore) -> None:
        store.add("example.com")
        with pytest.raises(DuplicateDomainError):
            store.add("EXAMPLE.com")
        assert store.domains == ("example.com",)

    def test_duplicate_with_upper_case_suffix_rejected(self, store: CartStore) -> None:
        store.add("example.com")
        with pytest.raises(DuplicateDomainError):
            store.add("EXAMPLE.COM")
        assert store.domains == ("example.com",)

    def test_tickets_are_unique(self, store: CartStore) -> None:
        tickets = _add_all(store, "a.com", "b.com", "c.com")
        assert len(set(tickets.values())) == 3

    def test_add_beyond_target_is_not_blocked(self, store: CartStore) -> None:
        _add_all(store, *(f"d{i}.com" for i in range(12)))
        assert len(store) == 12

    def test_contains_is_case_insensitive(self, store: CartStore) -> None:
        store.add("example.com")
        assert "EXAMPLE.COM" in store
        assert "other.com" not in store
        assert 42 not in store


# ============================================================================
# remove / clear
# ============================================================================


class TestRemoveAndClear:
    """Removal drops availability state in the same step."""

    def test_remove_drops_domain_and_entry(self, store: CartStore) -> None:
        tickets = _add_all(store, "a.com", "b.com")
        store.record_availability("a.com", True, tickets["a.com"])

        assert store.remove("a.com") is True
        assert store.domains == ("b.com",)
        assert "a.com" not in store.availability
        assert_no_orphans(store)

    def test_remove_absent_is_noop(self, store: CartStore) -> None:
        store.add("a.com")
        assert store.remove("missing.com") is False
        assert store.domains == ("a.com",)

    def test_remove_ignores_case(self, store: CartStore) -> None:
        store.add("a.com")
        assert store.remove("A.COM") is True
        assert len(store) == 0

    def test_clear_empties_everything(self, store: CartStore) -> None:
        tickets = _add_all(store, "a.com", "b.app")
        store.record_availability("a.com", False, tickets["a.com"])

        removed = store.clear()

        assert removed == ("a.com", "b.app")
        assert len(store) == 0
        assert len(store.availability) == 0

    def test_clear_on_empty_cart(self, store: CartStore) -> None:
        assert store.clear() == ()

    def test_clear_then_add(self, store: CartStore) -> None:
        _add_all(store, "a.com", "b.com")
        store.clear()
        store.add("x.com")
        assert store.domains == ("x.com",)
        assert store.availability_of("x.com") == Availability.UNKNOWN


# ============================================================================
# sweep_unavailable
# ============================================================================


class TestSweepUnavailable:
    """Only domains known to be available survive."""

    def test_all_available_is_no_action(self, store: CartStore) -> None:
        tickets = _add_all(store, "a.com", "b.com")
        for domain, ticket in tickets.items():
            store.record_availability(domain, True, ticket)

        with pytest.raises(NoActionNeeded):
            store.sweep_unavailable()
        assert store.domains == ("a.com", "b.com")

    def test_drops_unavailable_and_unknown(self, store: CartStore) -> None:
        tickets = _add_all(store, "taken.com", "pending.com", "free.com")
        store.record_availability("taken.com", False, tickets["taken.com"])
        store.record_availability("free.com", True, tickets["free.com"])

        removed = store.sweep_unavailable()

        assert removed == ("taken.com", "pending.com")
        assert len(removed) == 2
        assert store.domains == ("free.com",)
        assert dict(store.availability) == {"free.com": True}
        assert_no_orphans(store)

    def test_empty_cart_is_no_action(self, store: CartStore) -> None:
        with pytest.raises(NoActionNeeded):
            store.sweep_unavailable()

    def test_keeps_insertion_order(self, store: CartStore) -> None:
        tickets = _add_all(store, "z.com", "bad.com", "a.com")
        store.record_availability("z.com", True, tickets["z.com"])
        store.record_availability("a.com", True, tickets["a.com"])
        store.sweep_unavailable()
        assert store.domains == ("z.com", "a.com")


# ============================================================================
# keep_best
# ============================================================================


class TestKeepBest:
    """Score-based trim to the target size."""

    def test_at_or_below_target_is_no_action(self, store: CartStore) -> None:
        _add_all(store, "a.com", "b.com")
        with pytest.raises(NoActionNeeded) as exc_info:
            store.keep_best(2)
        assert "You already have 2 domains" in str(exc_info.value)
        assert store.domains == ("a.com", "b.com")

    def test_keeps_top_five_of_seven(self, store: CartStore) -> None:
        _add_all(
            store,
            "longname.xyz",
            "b.app",
            "abc.com",
            "zz.xyz",
            "a.com",
            "medium.app",
            "qwerty.com",
        )

        dropped = store.keep_best(5)

        assert store.domains == ("a.com", "abc.com", "qwerty.com", "b.app", "medium.app")
        assert dropped == ("longname.xyz", "zz.xyz")
        assert_no_orphans(store)

    def test_ties_keep_earliest_inserted(self, store: CartStore) -> None:
        _add_all(store, "aa.com", "bb.com", "cc.com", "dd.com")
        store.keep_best(2)
        assert store.domains == ("aa.com", "bb.com")

    def test_rebuilds_availability_map(self, store: CartStore) -> None:
        tickets = _add_all(store, "a.com", "loser.xyz", "b.com")
        store.record_availability("loser.xyz", True, tickets["loser.xyz"])
        store.record_availability("a.com", False, tickets["a.com"])

        store.keep_best(2)

        assert dict(store.availability) == {"a.com": False}
        assert store.availability_of("b.com") == Availability.UNKNOWN
        assert_no_orphans(store)


# ============================================================================
# record_availability
# ============================================================================


class TestRecordAvailability:
    """Stale lookup results never reach the map."""

    def test_records_for_current_member(self, store: CartStore) -> None:
        domain, ticket = store.add("x.com")
        assert store.record_availability(domain, True, ticket) is True
        assert store.availability_of(domain) == Availability.AVAILABLE

    def test_discards_result_for_removed_domain(self, store: CartStore) -> None:
        domain, ticket = store.add("x.com")
        store.remove(domain)
        assert store.record_availability(domain, True, ticket) is False
        assert len(store.availability) == 0

    def test_discards_result_after_clear(self, store: CartStore) -> None:
        domain, ticket = store.add("x.com")
        store.clear()
        assert store.record_availability(domain, False, ticket) is False
        assert_no_orphans(store)

    def test_discards_result_from_previous_add(self, store: CartStore) -> None:
        """Removing and re-adding issues a new ticket; the old one is stale."""
        domain, old_ticket = store.add("x.com")
        store.remove(domain)
        _, new_ticket = store.add("x.com")

        assert store.record_availability(domain, False, old_ticket) is False
        assert store.availability_of(domain) == Availability.UNKNOWN
        assert store.record_availability(domain, True, new_ticket) is True
        assert store.availability_of(domain) == Availability.AVAILABLE

    def test_never_for_unknown_domain(self, store: CartStore) -> None:
        assert store.record_availability("never.com", True, 1) is False

    def test_availability_view_is_read_only(self, store: CartStore) -> None:
        domain, ticket = store.add("x.com")
        store.record_availability(domain, True, ticket)
        with pytest.raises(TypeError):
            store.availability["x.com"] = False  # type: ignore[index]
