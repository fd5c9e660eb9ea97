"""Tests for the proposal priority and routing rules."""

import pytest

from proposal_bridge.domain import (
    InvalidArgumentError,
    ProposalPriorityService,
    ReviewTeam,
)


@pytest.fixture
def service() -> ProposalPriorityService:
    return ProposalPriorityService()


class TestShouldAutoApprove:
    """Tests for should_auto_approve()."""

    def test_small_complete_proposal(self, service, proposal_factory):
        """Complete, small and calm proposals are approved."""
        proposal = proposal_factory(budget_min=1000, budget_max=8000, pain_points=["a"])
        assert service.should_auto_approve(proposal)

    def test_ceiling_is_inclusive(self, service, proposal_factory):
        """A ceiling of exactly 10k still qualifies."""
        assert service.should_auto_approve(proposal_factory(budget_max=10_000, pain_points=["a"]))
        assert not service.should_auto_approve(proposal_factory(budget_max=10_001, pain_points=["a"]))

    def test_incomplete_is_not_approved(self, service, proposal_factory):
        """Empty pain points block approval even on a qualifying budget."""
        proposal = proposal_factory(company_size="SMALL", budget_min=1000, budget_max=8000, pain_points=[])
        assert not proposal.is_complete()
        assert not service.should_auto_approve(proposal)

    def test_urgency_overrides_budget(self, service, proposal_factory):
        """Urgent proposals always go to a human."""
        proposal = proposal_factory(budget_max=1_000, pain_points=["a", "b", "c"])
        assert proposal.requires_urgent_attention()
        assert not service.should_auto_approve(proposal)

    def test_enterprise_low_budget_never_auto_approved(self, service, proposal_factory):
        """Urgent (three pain points) LARGE client with a 1k ceiling is not approved."""
        proposal = proposal_factory(company_size="LARGE", budget_max=1_000, pain_points=["a", "b", "c"])
        assert not service.should_auto_approve(proposal)

    def test_floor_only_budget(self, service, proposal_factory):
        """A budget with no ceiling cannot be auto-approved."""
        assert not service.should_auto_approve(proposal_factory(budget_min=500, pain_points=["a"]))


class TestAssignReviewTeam:
    """Tests for assign_review_team()."""

    def test_enterprise_team(self, service, proposal_factory):
        """Enterprise clients go to the enterprise team."""
        proposal = proposal_factory(company_size="LARGE", budget_max=150_000, pain_points=["a", "b"])
        assert service.assign_review_team(proposal) == "ENTERPRISE_TEAM"

    @pytest.mark.parametrize("budget_max, expected", [
        (200_000, ReviewTeam.JUNIOR_TEAM),
        (75_000, ReviewTeam.SENIOR_TEAM),
        (20_000, ReviewTeam.STANDARD_TEAM),
        (5_000, ReviewTeam.JUNIOR_TEAM),
        (None, ReviewTeam.JUNIOR_TEAM),
    ])
    def test_budget_dispatch(self, service, proposal_factory, budget_max, expected):
        """Non-enterprise proposals are routed by budget category."""
        proposal = proposal_factory(company_size="MEDIUM", budget_max=budget_max)
        assert service.assign_review_team(proposal) is expected

    def test_enterprise_budget_without_large_company(self, service, proposal_factory):
        """ENTERPRISE budget on a non-large company falls through to the junior team."""
        proposal = proposal_factory(company_size="SMALL", budget_max=500_000)
        assert proposal.get_budget_category() == "ENTERPRISE"
        assert service.assign_review_team(proposal) == "JUNIOR_TEAM"


class TestEstimatedResponseTime:
    """Tests for calculate_estimated_response_time()."""

    def test_enterprise_two_pain_points(self, service, proposal_factory):
        """Enterprise clients are urgent, so two pain points give 4 + 4."""
        proposal = proposal_factory(company_size="LARGE", budget_max=150_000, pain_points=["a", "b"])
        assert service.calculate_estimated_response_time(proposal) == 4 + 2 * 2

    def test_enterprise_always_takes_urgent_base(self, service, proposal_factory):
        """Every enterprise client is urgent, so the 8 hour enterprise base never applies."""
        for budget_max in (100_001, 250_000, 10_000_000):
            proposal = proposal_factory(company_size="LARGE", budget_max=budget_max, pain_points=None)
            assert proposal.is_enterprise_client()
            assert proposal.requires_urgent_attention()
            assert service.calculate_estimated_response_time(proposal) == 4

    def test_urgent_base_wins(self, service, proposal_factory):
        """Enterprise client with three pain points: 4 + 6."""
        proposal = proposal_factory(company_size="LARGE", budget_max=150_000, pain_points=["a", "b", "c"])
        assert service.calculate_estimated_response_time(proposal) == 10

    def test_default_with_three_pain_points(self, service, proposal_factory):
        """Urgency from pain points alone: 4 + 6."""
        proposal = proposal_factory(company_size="SMALL", budget_max=1_000, pain_points=["a", "b", "c"])
        assert service.calculate_estimated_response_time(proposal) == 10

    def test_default_base(self, service, proposal_factory):
        """Non-urgent, non-enterprise proposals start at 24 hours."""
        assert service.calculate_estimated_response_time(proposal_factory(budget_max=1_000)) == 24
        proposal = proposal_factory(budget_max=1_000, pain_points=["a", "b"])
        assert service.calculate_estimated_response_time(proposal) == 28

    def test_no_upper_clamp(self, service, proposal_factory):
        """Many pain points produce a large estimate."""
        proposal = proposal_factory(budget_max=1_000, pain_points=[str(i) for i in range(100)])
        assert service.calculate_estimated_response_time(proposal) == 4 + 200


class TestMissingProposal:
    """Tests for the None-argument policy."""

    @pytest.mark.parametrize("method", [
        "should_auto_approve",
        "assign_review_team",
        "calculate_estimated_response_time",
        "assess",
    ])
    def test_none_raises(self, service, method):
        """Every rule rejects a missing proposal."""
        with pytest.raises(InvalidArgumentError):
            getattr(service, method)(None)

    def test_invalid_argument_is_value_error(self, service):
        """Callers catching ValueError also see the policy error."""
        with pytest.raises(ValueError):
            service.assign_review_team(None)


class TestAssess:
    """Tests for assess()."""

    def test_enterprise_assessment(self, service, proposal_factory):
        """Assessment collects every routing decision."""
        proposal = proposal_factory(company_size="LARGE", budget_max=150_000, pain_points=["a", "b"])
        assessment = service.assess(proposal)

        assert assessment.review_team == ReviewTeam.ENTERPRISE_TEAM
        assert assessment.auto_approve is False
        assert assessment.estimated_response_hours == 8
        assert assessment.priority_score == 80
        assert assessment.budget_category == "ENTERPRISE"
        assert assessment.urgent is True
        assert assessment.complete is True

    def test_auto_approved_assessment(self, service, proposal_factory):
        """A small complete proposal is approved and routed to juniors."""
        assessment = service.assess(proposal_factory(budget_max=8_000, pain_points=["a"]))

        assert assessment.auto_approve is True
        assert assessment.review_team == ReviewTeam.JUNIOR_TEAM
        assert assessment.estimated_response_hours == 26
