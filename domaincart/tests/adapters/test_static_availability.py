"""Unit tests for StaticAvailabilityAdapter."""

import asyncio

import pytest

from domaincart.adapters.availability.static import StaticAvailabilityAdapter


@pytest.mark.asyncio
async def test_listed_domains_are_unavailable() -> None:
    adapter = StaticAvailabilityAdapter(unavailable=["Google.com", "taken.app"])

    assert await adapter.is_domain_available("google.com") is False
    assert await adapter.is_domain_available("taken.app") is False
    assert await adapter.is_domain_available("free.xyz") is True


@pytest.mark.asyncio
async def test_empty_list_means_everything_available() -> None:
    adapter = StaticAvailabilityAdapter()
    assert await adapter.is_domain_available("anything.com") is True


@pytest.mark.asyncio
async def test_latency_is_applied() -> None:
    adapter = StaticAvailabilityAdapter(latency_seconds=0.05)

    task = asyncio.create_task(adapter.is_domain_available("slow.com"))
    await asyncio.sleep(0)
    assert not task.done()
    assert await task is True


def test_negative_latency_rejected() -> None:
    with pytest.raises(ValueError):
        StaticAvailabilityAdapter(latency_seconds=-1)
