"""Outbound topic publisher for transformed proposals."""

import logging
from typing import Optional, Dict
import httpx

from proposal_bridge.core.config import get_settings
from proposal_bridge.domain.exceptions import ProposalBridgeError
from proposal_bridge.domain.models import ProposalClient
from proposal_bridge.domain.priority import ProposalAssessment
from proposal_bridge.models.events import PublishedRecord
from proposal_bridge.services.mappers import proposal_event_mapper

logger = logging.getLogger(__name__)


class PublishError(ProposalBridgeError):
    """Raised when the outbound gateway rejects or does not answer a publish."""


class ProposalEventPublisher:
    """
    Publishes ProposalEvent records to the outbound topic.

    Records are POSTed to an HTTP topic gateway. With publishing
    disabled (or no gateway configured) the record is built and
    logged but not sent.
    """

    def __init__(self):
        """Initialize publisher with settings."""
        self._settings = None

    @property
    def settings(self):
        """Lazy load settings."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def enabled(self) -> bool:
        return self.settings.PUBLISH_ENABLED and bool(self.settings.OUTBOUND_PUBLISH_URL)

    def build_headers(self, assessment: Optional[ProposalAssessment]) -> Dict[str, str]:
        """Routing decisions travel as record headers so the event body keeps its shape."""
        if assessment is None:
            return {}
        return {
            "review-team": assessment.review_team.value,
            "auto-approve": str(assessment.auto_approve).lower(),
            "priority-score": str(assessment.priority_score),
            "budget-category": assessment.budget_category.value,
            "estimated-response-hours": str(assessment.estimated_response_hours),
            "urgent": str(assessment.urgent).lower(),
        }

    def build_record(
        self,
        proposal: ProposalClient,
        assessment: Optional[ProposalAssessment] = None
    ) -> PublishedRecord:
        """Map the proposal to its outbound event and wrap it for the topic."""
        event = proposal_event_mapper.to_dto(proposal)
        return PublishedRecord(
            topic=self.settings.OUTBOUND_TOPIC,
            key=proposal.industry,
            headers=self.build_headers(assessment),
            value=event.to_wire(),
        )

    async def publish(
        self,
        proposal: ProposalClient,
        assessment: Optional[ProposalAssessment] = None
    ) -> PublishedRecord:
        """
        Publish a proposal to the outbound topic.

        Args:
            proposal: Validated proposal client
            assessment: Routing decisions to attach as headers

        Returns:
            The record, with sent=True if it reached the gateway

        Raises:
            PublishError: on timeout or a non-2xx gateway response
        """
        logger.info(f"Publishing proposal to {self.settings.OUTBOUND_TOPIC} for client: {proposal.client_name}")
        record = self.build_record(proposal, assessment)

        if not self.enabled:
            logger.info(f"Publishing disabled - record for {proposal.client_name} not sent")
            logger.debug(f"Unsent record: {record.model_dump()}")
            return record

        headers = {"Content-Type": "application/json"}
        if self.settings.OUTBOUND_API_KEY:
            headers["Authorization"] = f"Bearer {self.settings.OUTBOUND_API_KEY}"

        try:
            async with httpx.AsyncClient(timeout=self.settings.PUBLISH_TIMEOUT_SECONDS) as client:
                response = await client.post(
                    self.settings.OUTBOUND_PUBLISH_URL,
                    json=record.model_dump(exclude={"sent"}),
                    headers=headers
                )
        except httpx.TimeoutException as e:
            logger.error("Outbound gateway timeout")
            raise PublishError("Outbound gateway timeout") from e
        except httpx.HTTPError as e:
            logger.error(f"Outbound gateway error: {e}")
            raise PublishError(f"Outbound gateway error: {e}") from e

        if response.status_code >= 300:
            logger.error(
                f"Outbound gateway error: {response.status_code} - {response.text}"
            )
            raise PublishError(f"Outbound gateway returned {response.status_code}")

        logger.info(f"Proposal published successfully for client: {proposal.client_name}")
        return record.model_copy(update={"sent": True})


# Singleton instance
proposal_event_publisher = ProposalEventPublisher()
