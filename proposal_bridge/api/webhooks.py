"""Webhook API Routes - Entry point for proposal client records pushed from the inbound topic."""

import logging
from typing import Dict, Any, Optional
from fastapi import APIRouter, BackgroundTasks, HTTPException, Request
from pydantic import BaseModel, ValidationError

from proposal_bridge.core.config import describe_topics
from proposal_bridge.domain import InvalidEntityError, ProposalAssessment, ProposalClient
from proposal_bridge.services.proposal_processor import proposal_processor

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhook", tags=["webhooks"])


class ProposalWebhookResponse(BaseModel):
    """Response for the proposal client webhook."""
    status: str
    message: str
    review_team: str
    priority_score: int
    auto_approve: bool
    estimated_response_hours: int


class TestResponse(BaseModel):
    """Response for test endpoints."""
    status: str
    message: str
    data: Dict[str, Any] = {}


async def _read_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail="Request body is not valid JSON")


def _error_details(error: ValidationError):
    return error.errors(include_url=False, include_context=False)


def _prepare_or_raise(raw_data: Any):
    """Map HTTP-independent pipeline errors onto status codes."""
    try:
        return proposal_processor.prepare(raw_data)
    except ValidationError as e:
        logger.warning(f"Malformed proposal record: {e.error_count()} error(s)")
        raise HTTPException(status_code=400, detail=f"Malformed proposal record: {_error_details(e)}")
    except InvalidEntityError as e:
        logger.warning(f"Invalid proposal record: {e.reason}")
        raise HTTPException(status_code=422, detail=e.reason)


# ===========================================
# Proposal Client Webhook
# ===========================================

@router.post(
    "/proposal-client",
    response_model=ProposalWebhookResponse,
    status_code=202,
    summary="Process Proposal Client Record"
)
async def proposal_client_webhook(
    request: Request,
    background_tasks: BackgroundTasks
) -> ProposalWebhookResponse:
    """
    Handle an incoming proposal client record.

    Validation and routing happen before responding; the outbound
    publish runs in the background.
    """
    try:
        raw_data = await _read_json(request)
        proposal, assessment = _prepare_or_raise(raw_data)

        background_tasks.add_task(_publish_background, proposal, assessment)

        return ProposalWebhookResponse(
            status="accepted",
            message="Proposal accepted - publishing in background",
            review_team=assessment.review_team.value,
            priority_score=assessment.priority_score,
            auto_approve=assessment.auto_approve,
            estimated_response_hours=assessment.estimated_response_hours
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Proposal webhook error: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to process: {str(e)}")


async def _publish_background(
    proposal: ProposalClient,
    assessment: Optional[ProposalAssessment]
):
    """Background task for the outbound publish. Failures are logged and dropped."""
    result = await proposal_processor.deliver(proposal, assessment)
    if not result.success:
        logger.warning(f"Dropped outbound record for client {proposal.client_name}: {result.errors}")


@router.get("/topics", summary="Show Topic Wiring")
async def get_topics() -> Dict[str, str]:
    """Configured inbound and outbound topics."""
    return describe_topics()


# ===========================================
# Test Endpoints
# ===========================================

test_router = APIRouter(prefix="/test", tags=["testing"])


@test_router.post("/assess", response_model=TestResponse)
async def test_assess(request: Request) -> TestResponse:
    """Validate and assess a record without publishing it."""
    raw_data = await _read_json(request)

    try:
        proposal, assessment = proposal_processor.prepare(raw_data)
    except ValidationError as e:
        return TestResponse(
            status="error",
            message="Malformed proposal record",
            data={"errors": _error_details(e)}
        )
    except InvalidEntityError as e:
        return TestResponse(status="invalid", message=e.reason, data={})

    return TestResponse(
        status="success",
        message="Assessment completed",
        data={
            "client_name": proposal.client_name,
            "complete": proposal.is_complete(),
            "budget": proposal.budget_range.format_for_display(),
            "budget_average": proposal.budget_range.get_average(),
            "assessment": assessment.model_dump(mode="json"),
        }
    )


@test_router.get("/health")
async def health_check() -> Dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": "proposal-bridge"}
