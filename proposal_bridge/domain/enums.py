"""Enumeration types for proposal classification and routing."""

from enum import Enum


class CompanySize(str, Enum):
    """Conventional company size labels. Not enforced on input."""
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"


class BudgetCategory(str, Enum):
    """Reporting buckets derived from the budget ceiling."""
    UNSPECIFIED = "UNSPECIFIED"
    ENTERPRISE = "ENTERPRISE"
    PREMIUM = "PREMIUM"
    STANDARD = "STANDARD"
    BASIC = "BASIC"


class ReviewTeam(str, Enum):
    """Teams a proposal can be routed to for review."""
    ENTERPRISE_TEAM = "ENTERPRISE_TEAM"
    SENIOR_TEAM = "SENIOR_TEAM"
    STANDARD_TEAM = "STANDARD_TEAM"
    JUNIOR_TEAM = "JUNIOR_TEAM"
