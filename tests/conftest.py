"""Pytest fixtures and configuration for Proposal Bridge tests."""

import os
import pytest
from typing import Dict, Any, Generator, List, Optional
from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient

# Set test environment variables before importing app
os.environ.setdefault("INBOUND_TOPIC", "proposal-client-events")
os.environ.setdefault("OUTBOUND_TOPIC", "proposal-events")
os.environ.setdefault("PUBLISH_ENABLED", "false")
os.environ.setdefault("DEBUG", "true")

from proposal_bridge.domain import ProposalClient, BudgetRange


# ===========================================
# Domain Builders
# ===========================================

def make_proposal(
    client_name: Optional[str] = "Acme",
    industry: Optional[str] = "Retail",
    company_size: Optional[str] = "SMALL",
    pain_points: Optional[List[str]] = None,
    budget_min: Optional[int] = None,
    budget_max: Optional[int] = None,
    currency: Optional[str] = None,
    with_budget: bool = True,
    **extra
) -> ProposalClient:
    """Build a ProposalClient with sensible defaults for tests."""
    budget_range = None
    if with_budget:
        budget_range = BudgetRange(min=budget_min, max=budget_max, currency=currency)
    return ProposalClient(
        client_name=client_name,
        industry=industry,
        company_size=company_size,
        pain_points=pain_points,
        budget_range=budget_range,
        **extra
    )


@pytest.fixture
def proposal_factory():
    """Expose the proposal builder to tests."""
    return make_proposal


# ===========================================
# Sample Data Fixtures
# ===========================================

@pytest.fixture
def sample_proposal_record() -> Dict[str, Any]:
    """Small, complete proposal record as it arrives on the inbound topic."""
    return {
        "clientName": "Corner Bakery",
        "industry": "Food & Beverage",
        "companySize": "SMALL",
        "context": "Wants an online ordering page",
        "painPoints": ["Phone orders get lost"],
        "budgetRange": {"min": 2000, "max": 8000, "currency": "USD"},
        "additionalNotes": "Prefers email contact"
    }


@pytest.fixture
def sample_enterprise_record() -> Dict[str, Any]:
    """Enterprise proposal record."""
    return {
        "clientName": "Acme",
        "industry": "Retail",
        "companySize": "LARGE",
        "context": "Replatforming the storefront",
        "painPoints": ["Slow checkout", "Inventory drift"],
        "budgetRange": {"min": None, "max": 150000, "currency": "EUR"},
        "additionalNotes": None
    }


@pytest.fixture
def sample_invalid_record() -> Dict[str, Any]:
    """Record whose budget has a negative floor."""
    return {
        "clientName": "Broken Budget Ltd",
        "industry": "Logistics",
        "companySize": "MEDIUM",
        "painPoints": ["Route planning"],
        "budgetRange": {"min": -5, "max": 10}
    }


# ===========================================
# Mock Fixtures
# ===========================================

@pytest.fixture
def mock_gateway():
    """Mock the outbound topic gateway HTTP client."""
    with patch("proposal_bridge.integrations.publisher.httpx.AsyncClient") as mock:
        mock_instance = AsyncMock()
        mock_instance.post.return_value.status_code = 200
        mock_instance.post.return_value.text = "ok"
        mock.return_value.__aenter__.return_value = mock_instance
        mock.return_value.__aexit__.return_value = None
        yield mock_instance


# ===========================================
# Client Fixtures
# ===========================================

@pytest.fixture
def client(mock_gateway) -> Generator[TestClient, None, None]:
    """Test client with the outbound gateway mocked."""
    from proposal_bridge.main import app
    with TestClient(app) as test_client:
        yield test_client

