"""Priority and routing rules that build on a single proposal client."""

import logging
from typing import Optional
from pydantic import BaseModel, Field

from proposal_bridge.domain.enums import BudgetCategory, ReviewTeam
from proposal_bridge.domain.exceptions import InvalidArgumentError
from proposal_bridge.domain.models import ProposalClient

logger = logging.getLogger(__name__)


AUTO_APPROVE_BUDGET_CEILING = 10_000
URGENT_BASE_HOURS = 4
ENTERPRISE_BASE_HOURS = 8
DEFAULT_BASE_HOURS = 24
HOURS_PER_PAIN_POINT = 2


class ProposalAssessment(BaseModel):
    """Routing decisions computed for one proposal."""
    review_team: ReviewTeam = Field(..., description="Team assigned to review")
    auto_approve: bool = Field(..., description="Whether human review can be skipped")
    estimated_response_hours: int = Field(..., ge=0, description="Expected response time")
    priority_score: int = Field(..., ge=0, description="Queue ordering score")
    budget_category: BudgetCategory = Field(..., description="Budget reporting bucket")
    urgent: bool = Field(..., description="Whether the proposal needs urgent attention")
    complete: bool = Field(..., description="Whether all required information is present")


def _require(proposal: Optional[ProposalClient]) -> ProposalClient:
    if proposal is None:
        raise InvalidArgumentError("Proposal client is required")
    return proposal


class ProposalPriorityService:
    """
    Stateless routing rules.

    Each rule is an ordered cascade; earlier branches win even when a
    later branch would also match.
    """

    def should_auto_approve(self, proposal: ProposalClient) -> bool:
        """
        Small, complete, non-urgent proposals skip human review.

        Urgency overrides an otherwise qualifying budget.
        """
        proposal = _require(proposal)
        budget_max = proposal.budget_max
        return (
            proposal.is_complete()
            and budget_max is not None
            and budget_max <= AUTO_APPROVE_BUDGET_CEILING
            and not proposal.requires_urgent_attention()
        )

    def assign_review_team(self, proposal: ProposalClient) -> ReviewTeam:
        proposal = _require(proposal)
        if proposal.is_enterprise_client():
            return ReviewTeam.ENTERPRISE_TEAM

        category = proposal.get_budget_category()
        if category == BudgetCategory.PREMIUM:
            return ReviewTeam.SENIOR_TEAM
        if category == BudgetCategory.STANDARD:
            return ReviewTeam.STANDARD_TEAM
        return ReviewTeam.JUNIOR_TEAM

    def calculate_estimated_response_time(self, proposal: ProposalClient) -> int:
        """Estimated response time in hours. Grows with pain points, no upper bound."""
        proposal = _require(proposal)
        if proposal.requires_urgent_attention():
            base_hours = URGENT_BASE_HOURS
        elif proposal.is_enterprise_client():
            base_hours = ENTERPRISE_BASE_HOURS
        else:
            base_hours = DEFAULT_BASE_HOURS

        return base_hours + proposal.pain_point_count * HOURS_PER_PAIN_POINT

    def assess(self, proposal: ProposalClient) -> ProposalAssessment:
        """Run every routing rule and collect the results."""
        proposal = _require(proposal)
        assessment = ProposalAssessment(
            review_team=self.assign_review_team(proposal),
            auto_approve=self.should_auto_approve(proposal),
            estimated_response_hours=self.calculate_estimated_response_time(proposal),
            priority_score=proposal.calculate_priority_score(),
            budget_category=proposal.get_budget_category(),
            urgent=proposal.requires_urgent_attention(),
            complete=proposal.is_complete(),
        )
        logger.debug(
            f"Assessed proposal for {proposal.client_name}: "
            f"team={assessment.review_team.value}, score={assessment.priority_score}"
        )
        return assessment


# Singleton instance
priority_service = ProposalPriorityService()
