"""Domain exceptions for proposal validation and routing."""


class ProposalBridgeError(Exception):
    """Base class for all proposal bridge errors."""


class InvalidEntityError(ProposalBridgeError):
    """Raised when a proposal client or budget range breaks a business invariant."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class InvalidArgumentError(ProposalBridgeError, ValueError):
    """Raised when a routing decision is requested without a proposal."""
