"""Fake/mock implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeAvailabilityPort: Scripted lookup answers, failures and delays
- FakeNotificationPort: Captured notifications for assertion
"""

from .availability import FakeAvailabilityPort
from .notification import FakeNotificationPort

__all__ = [
    "FakeAvailabilityPort",
    "FakeNotificationPort",
]
