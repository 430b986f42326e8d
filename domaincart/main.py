"""Composition root for the domain cart.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Dependency injection
- Interactive shell
"""

import asyncio
import json
import logging
import sys
from typing import Any

from domaincart.adapters.availability.rdap import RDAPAvailabilityAdapter
from domaincart.adapters.availability.static import StaticAvailabilityAdapter
from domaincart.adapters.cli.commands import run_command
from domaincart.adapters.notification.stdout import StdoutNotificationAdapter
from domaincart.config import Settings, load_settings
from domaincart.core.cart import CartStore
from domaincart.core.cart_service import CartService
from domaincart.core.ports import AvailabilityPort
from domaincart.core.tracker import AvailabilityTracker


def parse_command_line(command_line: str) -> tuple[str, dict[str, Any]]:
    """Split a shell line into a command name and its arguments.

    Args:
        command_line: Raw line, e.g. "add example.com" or "view json".

    Returns:
        Tuple of (command, args). add/remove always carry a domain
        argument, empty when none was typed;
        view takes an optional output format (defaults to text).
    """
    parts = command_line.strip().split(maxsplit=1)
    if not parts:
        return "", {}

    command = parts[0].lower()
    argument = parts[1].strip() if len(parts) > 1 else ""

    if command in ("add", "remove"):
        return command, {"domain": argument}
    if command == "view":
        return command, {"format": argument or "text"}
    return command, {}


async def _run_cli_interactive(cart: CartService) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for cart commands.

    Args:
        cart: CartService instance the commands act on.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive shell. Type 'help' for available commands or 'exit' to quit.")

    loop = asyncio.get_running_loop()

    while True:
        try:
            # Read command from stdin in a thread so lookups keep running
            command_line = await loop.run_in_executor(
                None,
                input,
                "cart> "
            )

            command, args = parse_command_line(command_line)

            if not command:
                continue

            if command == "exit":
                logger.info("Exiting shell")
                break

            if command == "help":
                _print_cli_help()
                continue

            try:
                result = await run_command(cart, command, args)
                if command == "view" and args.get("format") == "text":
                    print(result["data"])
                else:
                    print(json.dumps(result, indent=2, default=str))
            except ValueError as e:
                logger.error(f"Command error: {e}")
                print(json.dumps({
                    "status": "error",
                    "message": str(e)
                }, indent=2))

        except EOFError:
            # Ctrl+D to exit
            logger.info("EOF received, exiting shell")
            break
        except KeyboardInterrupt:
            # Ctrl+C
            logger.info("Interrupted by user")
            continue
        except Exception as e:
            logger.error(f"Shell error: {e}", exc_info=True)


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands:

  add <domain>
    Add a bare domain ending in .com, .xyz or .app.
    Example: add example.com

  remove <domain>
    Remove a domain from the cart.
    Example: remove example.com

  clear
    Remove every domain from the cart.

  sweep
    Remove domains that are unavailable or still being checked.

  keep-best
    Keep only the highest-priority domains, up to the required count.

  export
    Print the cart as a comma-separated list.

  purchase
    Start the purchase (only when the cart holds exactly the required count).

  view [text|json]
    Show the cart. Default: text.

  wait
    Wait for pending availability checks, then show the cart.

  help
    Show this help message.

  exit
    Exit the shell.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_availability_adapter(settings: Settings) -> AvailabilityPort:
    """Instantiate the availability adapter selected by configuration.

    Raises:
        ValueError: If the configured backend is unknown.
    """
    if settings.availability_backend == "rdap":
        return RDAPAvailabilityAdapter(
            base_url=settings.rdap_base_url,
            timeout=settings.rdap_timeout_seconds,
        )
    elif settings.availability_backend == "static":
        return StaticAvailabilityAdapter(
            unavailable=settings.static_unavailable,
            latency_seconds=settings.static_latency_seconds,
        )
    raise ValueError(f"Unknown availability backend: {settings.availability_backend}")


def build_cart_service(
    settings: Settings, availability: AvailabilityPort
) -> CartService:
    """Wire the core services around a fresh cart store."""
    if settings.notification_backend == "stdout":
        notification = StdoutNotificationAdapter(verbose=settings.debug)
    else:
        raise ValueError(f"Unknown notification backend: {settings.notification_backend}")

    store = CartStore()
    tracker = AvailabilityTracker(store=store, lookup=availability)
    return CartService(
        store=store,
        tracker=tracker,
        notification=notification,
        num_required=settings.num_required,
    )


async def bootstrap() -> None:
    """Load configuration, wire adapters, and start the application.

    This is the composition root: the single place where all components
    are instantiated and wired together.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate adapters with configuration
    4. Initialize core services
    5. Run the interactive shell

    Raises:
        SystemExit: On fatal errors (configuration, adapter initialization)
    """
    # Step 1: Load configuration
    settings = load_settings()

    # Step 2: Configure logging
    log_level = "DEBUG" if settings.debug else settings.log_level
    configure_logging(log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading domain cart...")

    # Step 3: Instantiate adapters
    try:
        availability = build_availability_adapter(settings)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    logger.info(f"Availability adapter: {settings.availability_backend}")

    # Step 4: Initialize core services
    try:
        cart = build_cart_service(settings, availability)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    logger.info(f"Cart ready, {settings.num_required} domains required")

    # Step 5: Run the shell
    try:
        await _run_cli_interactive(cart)
    finally:
        # Clean up resources
        await cart.tracker.aclose()
        if isinstance(availability, RDAPAvailabilityAdapter):
            await availability.close()


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        asyncio.run(bootstrap())
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
