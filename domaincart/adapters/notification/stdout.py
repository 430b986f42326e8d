"""Stdout notification adapter.

Implements NotificationPort by printing operation outcomes to the
terminal with human-readable formatting.
"""

import asyncio
import logging

from domaincart.core.models import NotificationKind
from domaincart.core.ports import NotificationPort

logger = logging.getLogger(__name__)

_MARKERS = {
    NotificationKind.ERROR: "x",
    NotificationKind.WARNING: "!",
    NotificationKind.INFO: "i",
    NotificationKind.SUCCESS: "+",
}


class StdoutNotificationAdapter(NotificationPort):
    """Prints notifications to stdout, one line each."""

    def __init__(self, verbose: bool = False):
        """Initialize stdout notification adapter.

        Args:
            verbose: If True, also log each notification at debug level.
        """
        self.verbose = verbose

    async def notify(
        self, kind: NotificationKind, title: str, message: str
    ) -> None:
        """Print a notification to stdout."""
        line = self._format_notification(kind, title, message)
        await asyncio.to_thread(print, line)

        if self.verbose:
            logger.debug(
                f"Notification delivered: {title}",
                extra={"kind": kind.value, "title": title},
            )

    @staticmethod
    def _format_notification(
        kind: NotificationKind, title: str, message: str
    ) -> str:
        """Format a notification line."""
        marker = _MARKERS.get(kind, "?")
        return f"[{marker}] {kind.value.upper()} {title}: {message}"
