"""Integrations module - External service connectors."""

from proposal_bridge.integrations.publisher import (
    ProposalEventPublisher,
    PublishError,
    proposal_event_publisher,
)

__all__ = [
    "ProposalEventPublisher",
    "PublishError",
    "proposal_event_publisher",
]
