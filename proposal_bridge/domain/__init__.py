"""Domain package - Proposal client model and routing rules."""

from proposal_bridge.domain.enums import CompanySize, BudgetCategory, ReviewTeam
from proposal_bridge.domain.exceptions import (
    ProposalBridgeError,
    InvalidEntityError,
    InvalidArgumentError,
)
from proposal_bridge.domain.models import ProposalClient, BudgetRange
from proposal_bridge.domain.priority import (
    ProposalPriorityService,
    ProposalAssessment,
    priority_service,
)

__all__ = [
    # Enums
    "CompanySize",
    "BudgetCategory",
    "ReviewTeam",
    # Errors
    "ProposalBridgeError",
    "InvalidEntityError",
    "InvalidArgumentError",
    # Model
    "ProposalClient",
    "BudgetRange",
    # Routing
    "ProposalPriorityService",
    "ProposalAssessment",
    "priority_service",
]
