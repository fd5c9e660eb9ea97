"""Proposal client domain model - business rules live here, not in the adapters."""

from typing import Optional, Tuple
from pydantic import BaseModel, Field

from proposal_bridge.domain.enums import BudgetCategory, CompanySize
from proposal_bridge.domain.exceptions import InvalidEntityError


ENTERPRISE_BUDGET_THRESHOLD = 100_000
PREMIUM_BUDGET_THRESHOLD = 50_000
STANDARD_BUDGET_THRESHOLD = 10_000
URGENT_PAIN_POINT_COUNT = 3
DEFAULT_CURRENCY = "USD"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _halve(value: int) -> int:
    """Integer half, truncated toward zero."""
    half = abs(value) // 2
    return half if value >= 0 else -half


def _is_size(company_size: Optional[str], size: CompanySize) -> bool:
    return company_size is not None and company_size.upper() == size.value


class BudgetRange(BaseModel):
    """
    Monetary range attached to a proposal.

    Either bound may be missing. A missing bound means "unknown",
    never zero.
    """
    min: Optional[int] = Field(None, description="Lower budget bound")
    max: Optional[int] = Field(None, description="Upper budget bound")
    currency: Optional[str] = Field(None, description="ISO currency code")

    class Config:
        frozen = True

    def validate(self) -> None:
        """Raise InvalidEntityError if the bounds are inconsistent or negative."""
        if self.min is not None and self.max is not None and self.min > self.max:
            raise InvalidEntityError("Budget min cannot be greater than max")
        if self.min is not None and self.min < 0:
            raise InvalidEntityError("Budget min cannot be negative")
        if self.max is not None and self.max < 0:
            raise InvalidEntityError("Budget max cannot be negative")

    def is_valid(self) -> bool:
        """Like validate(), but also requires at least one bound."""
        return (
            (self.min is not None or self.max is not None)
            and (self.min is None or self.min >= 0)
            and (self.max is None or self.max >= 0)
            and (self.min is None or self.max is None or self.min <= self.max)
        )

    def get_average(self) -> Optional[int]:
        """
        Midpoint estimate of the budget.

        With only a ceiling known the estimate is half the ceiling;
        with only a floor known it is the floor itself.
        """
        if self.min is not None and self.max is not None:
            return _halve(self.min + self.max)
        if self.max is not None:
            return _halve(self.max)
        if self.min is not None:
            return self.min
        return None

    def format_for_display(self) -> str:
        currency = self.currency or DEFAULT_CURRENCY
        if self.min is not None and self.max is not None:
            return f"{currency} {self.min:,} - {self.max:,}"
        if self.max is not None:
            return f"{currency} up to {self.max:,}"
        if self.min is not None:
            return f"{currency} from {self.min:,}"
        return "Budget not specified"


class ProposalClient(BaseModel):
    """
    Inbound proposal submission.

    Constructed once by the inbound mapper and never mutated. Only
    validate() raises; every derived attribute treats missing fields
    as unknown and returns a default instead.
    """
    client_name: Optional[str] = Field(None, description="Client or company name")
    industry: Optional[str] = Field(None, description="Client industry")
    company_size: Optional[str] = Field(None, description="SMALL, MEDIUM or LARGE")
    context: Optional[str] = Field(None, description="Free-text context")
    pain_points: Optional[Tuple[str, ...]] = Field(None, description="Stated pain points")
    budget_range: Optional[BudgetRange] = Field(None, description="Budget range")
    additional_notes: Optional[str] = Field(None, description="Additional notes")

    class Config:
        frozen = True

    # ===========================================
    # Validation
    # ===========================================

    def validate(self) -> None:
        """
        Check the business invariants before the proposal is processed.

        Raises:
            InvalidEntityError: naming the first invariant that failed
        """
        if _is_blank(self.client_name):
            raise InvalidEntityError("Client name is required")
        if _is_blank(self.industry):
            raise InvalidEntityError("Industry is required")
        if self.budget_range is None:
            raise InvalidEntityError("Budget range is required")
        self.budget_range.validate()

    def is_complete(self) -> bool:
        """Valid and with at least one pain point."""
        return (
            not _is_blank(self.client_name)
            and not _is_blank(self.industry)
            and self.budget_range is not None
            and self.budget_range.is_valid()
            and bool(self.pain_points)
        )

    # ===========================================
    # Derived attributes
    # ===========================================

    @property
    def budget_max(self) -> Optional[int]:
        """Budget ceiling, or None when the range or its ceiling is missing."""
        if self.budget_range is None:
            return None
        return self.budget_range.max

    @property
    def pain_point_count(self) -> int:
        return len(self.pain_points) if self.pain_points else 0

    def is_enterprise_client(self) -> bool:
        """Large company with a budget ceiling above 100k."""
        budget_max = self.budget_max
        return (
            _is_size(self.company_size, CompanySize.LARGE)
            and budget_max is not None
            and budget_max > ENTERPRISE_BUDGET_THRESHOLD
        )

    def requires_urgent_attention(self) -> bool:
        """Enterprise client, or three or more pain points."""
        return (
            self.is_enterprise_client()
            or self.pain_point_count >= URGENT_PAIN_POINT_COUNT
        )

    def calculate_priority_score(self) -> int:
        """
        Additive score used to order the proposal queue.

        A missing budget ceiling contributes nothing to the budget factor.
        """
        score = 0

        budget_max = self.budget_max
        if budget_max is not None:
            if budget_max > ENTERPRISE_BUDGET_THRESHOLD:
                score += 50
            elif budget_max > PREMIUM_BUDGET_THRESHOLD:
                score += 30
            else:
                score += 10

        score += self.pain_point_count * 5

        if _is_size(self.company_size, CompanySize.LARGE):
            score += 20
        elif _is_size(self.company_size, CompanySize.MEDIUM):
            score += 10

        return score

    def get_budget_category(self) -> BudgetCategory:
        budget_max = self.budget_max
        if budget_max is None:
            return BudgetCategory.UNSPECIFIED
        if budget_max > ENTERPRISE_BUDGET_THRESHOLD:
            return BudgetCategory.ENTERPRISE
        if budget_max > PREMIUM_BUDGET_THRESHOLD:
            return BudgetCategory.PREMIUM
        if budget_max > STANDARD_BUDGET_THRESHOLD:
            return BudgetCategory.STANDARD
        return BudgetCategory.BASIC
