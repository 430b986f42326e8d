"""Error taxonomy for cart operations.

Every member is recovered by the cart service and surfaced as a
notification; none are fatal.
"""


class CartError(Exception):
    """Base class for all cart signals."""

    title = "Error"


class EmptyInputError(CartError):
    """The user submitted an empty or whitespace-only domain."""

    title = "Error"

    def __init__(self) -> None:
        super().__init__("Please enter a domain")


class InvalidFormatError(CartError):
    """The domain failed validation."""

    title = "Invalid Domain"

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class DuplicateDomainError(CartError):
    """The normalized domain is already in the cart."""

    title = "Domain Already in Cart"

    def __init__(self, domain: str):
        super().__init__("This domain is already in your cart")
        self.domain = domain


class NoActionNeeded(CartError):
    """The requested reduction would not change the cart.

    Informational: the operation is a correct no-op.
    """

    title = "No Action Needed"


class LookupFailure(CartError):
    """An availability lookup could not produce an answer.

    Raised by availability adapters. The tracker converts it to an
    Unavailable entry instead of surfacing it.
    """

    title = "Lookup Failed"

    def __init__(self, domain: str, detail: str):
        super().__init__(f"Availability lookup failed for {domain}: {detail}")
        self.domain = domain
        self.detail = detail
