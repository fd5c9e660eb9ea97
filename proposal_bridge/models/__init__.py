"""Models package - Wire models for the proposal topics."""

from proposal_bridge.models.events import (
    BudgetRangePayload,
    ProposalClientEvent,
    ProposalEvent,
    PublishedRecord,
)
from proposal_bridge.models.results import ProcessingResult

__all__ = [
    "BudgetRangePayload",
    "ProposalClientEvent",
    "ProposalEvent",
    "PublishedRecord",
    # Results
    "ProcessingResult",
]
