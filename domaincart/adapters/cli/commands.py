"""CLI command implementations for the domain cart.

Provides user intents through a command-line interface.

This adapter maps CLI commands (add, remove, clear, sweep, keep-best,
export, purchase, view) to CartPort operations. It handles CLI-specific
formatting: results become JSON-ready dictionaries and the cart view
can be rendered as text.
"""

import logging
from typing import Any

from domaincart.core.models import (
    Availability,
    CartView,
    OperationResult,
    Outcome,
    ProgressBand,
)
from domaincart.core.ports import CartPort

logger = logging.getLogger(__name__)

_BADGES = {
    Availability.UNKNOWN: "Checking...",
    Availability.AVAILABLE: "Available",
    Availability.UNAVAILABLE: "Unavailable",
}

_PROGRESS_WIDTH = 20


class CLICommandHandler:
    """Handles CLI commands by delegating to CartPort.

    Each command forwards one user intent and returns a dictionary with
    the outcome, suitable for printing as JSON.
    """

    def __init__(self, cart: CartPort):
        """Initialize the CLI command handler.

        Args:
            cart: CartPort implementation to execute commands.
        """
        self.cart = cart

    async def add_domain(self, domain: str) -> dict[str, Any]:
        """Add a domain via CLI."""
        return self._format_result(await self.cart.add_domain(domain))

    async def remove_domain(self, domain: str) -> dict[str, Any]:
        """Remove a domain via CLI."""
        return self._format_result(await self.cart.remove_domain(domain))

    async def clear_cart(self) -> dict[str, Any]:
        """Clear the cart via CLI."""
        return self._format_result(await self.cart.clear_cart())

    async def remove_unavailable(self) -> dict[str, Any]:
        """Remove unavailable and unchecked domains via CLI."""
        return self._format_result(await self.cart.remove_unavailable())

    async def keep_best(self) -> dict[str, Any]:
        """Trim the cart to its best domains via CLI."""
        return self._format_result(await self.cart.keep_best())

    async def export_domains(self) -> dict[str, Any]:
        """Export the cart as a comma-separated list via CLI."""
        result = self._format_result(await self.cart.export_domains())
        if result["status"] == "success":
            result["data"] = result.pop("text")
        return result

    async def purchase(self) -> dict[str, Any]:
        """Start the (stubbed) purchase via CLI."""
        return self._format_result(await self.cart.purchase())

    async def wait_for_lookups(self) -> dict[str, Any]:
        """Block until pending availability lookups have settled."""
        await self.cart.wait_for_lookups()
        return self.get_view(output_format="json")

    def get_view(self, output_format: str = "json") -> dict[str, Any]:
        """Render the current cart view.

        Args:
            output_format: Output format ('json', 'text'). Default 'json'.

        Returns:
            Dictionary with the view or status/message on error.
        """
        view = self.cart.get_view()

        if output_format == "json":
            return {
                "status": "success",
                "operation": "view",
                "data": self._view_as_dict(view),
            }

        elif output_format == "text":
            return {
                "status": "success",
                "operation": "view",
                "data": self._format_view_as_text(view),
            }

        else:
            return {
                "status": "error",
                "operation": "view",
                "message": f"Unsupported format: {output_format}",
            }

    @staticmethod
    def _format_result(result: OperationResult) -> dict[str, Any]:
        """Convert an OperationResult into a CLI response dictionary."""
        status = {
            Outcome.SUCCESS: "success",
            Outcome.NO_ACTION: "no_action",
            Outcome.REJECTED: "error",
        }[result.outcome]

        formatted: dict[str, Any] = {
            "status": status,
            "operation": result.operation,
            "title": result.title,
            "message": result.message,
        }
        if result.domains:
            formatted["domains"] = list(result.domains)
        if result.error_kind:
            formatted["error_kind"] = result.error_kind
        if result.text:
            formatted["text"] = result.text
        return formatted

    @staticmethod
    def _view_as_dict(view: CartView) -> dict[str, Any]:
        return {
            "domains": list(view.domains),
            "availability": {d: a.value for d, a in view.availability.items()},
            "num_required": view.num_required,
            "progress_fraction": view.progress_fraction,
            "progress_band": view.progress_band.value,
            "purchase_enabled": view.purchase_enabled,
            "status_message": view.status_message,
        }

    def _format_view_as_text(self, view: CartView) -> str:
        """Format the cart view as human-readable text.

        Args:
            view: CartView to render.

        Returns:
            Formatted text string.
        """
        lines = []

        # Header
        lines.append(
            f"Domain Cart ({len(view.domains)}/{view.num_required})  {view.status_message}"
        )
        lines.append(self._format_progress(view))
        lines.append("")

        if view.domains:
            width = max(len(d) for d in view.domains)
            for domain in view.domains:
                badge = _BADGES[view.availability.get(domain, Availability.UNKNOWN)]
                lines.append(f"  {domain.ljust(width)}  [{badge}]")
        else:
            lines.append("  Your cart is empty. Add some domains!")
        lines.append("")

        purchase = "enabled" if view.purchase_enabled else "disabled"
        lines.append(f"Purchase: {purchase}")

        return "\n".join(lines)

    @staticmethod
    def _format_progress(view: CartView) -> str:
        """Render the progress bar; it saturates at full width when over."""
        filled = min(round(view.progress_fraction * _PROGRESS_WIDTH), _PROGRESS_WIDTH)
        fill_char = "!" if view.progress_band == ProgressBand.OVER else "#"
        bar = fill_char * filled + "-" * (_PROGRESS_WIDTH - filled)
        return f"[{bar}] {view.progress_percent:.0f}% ({view.progress_band.value})"


async def run_command(
    cart: CartPort,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Entry point for executing CLI commands. Maps command names to handler methods.

    Args:
        cart: CartPort implementation.
        command: Command name ('add', 'remove', 'clear', 'sweep', 'keep-best',
            'export', 'purchase', 'view', 'wait').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If command is not recognized or a required argument is missing.
    """
    handler = CLICommandHandler(cart)

    if command in ("add", "remove"):
        if "domain" not in args:
            raise ValueError("Missing required parameter: domain")
        if command == "add":
            return await handler.add_domain(args["domain"])
        return await handler.remove_domain(args["domain"])

    elif command == "clear":
        return await handler.clear_cart()

    elif command == "sweep":
        return await handler.remove_unavailable()

    elif command == "keep-best":
        return await handler.keep_best()

    elif command == "export":
        return await handler.export_domains()

    elif command == "purchase":
        return await handler.purchase()

    elif command == "view":
        return handler.get_view(args.get("format", "json"))

    elif command == "wait":
        return await handler.wait_for_lookups()

    else:
        raise ValueError(f"Unknown command: {command}")
