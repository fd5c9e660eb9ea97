"""Proposal Processor Service - Orchestrates validation, routing and publishing."""

import logging
from typing import Dict, Any, Tuple
from pydantic import ValidationError

from proposal_bridge.core.config import unwrap_envelope
from proposal_bridge.domain import (
    ProposalClient,
    ProposalAssessment,
    InvalidEntityError,
    priority_service,
)
from proposal_bridge.integrations.publisher import PublishError, proposal_event_publisher
from proposal_bridge.models import ProposalClientEvent, ProcessingResult
from proposal_bridge.services.mappers import proposal_client_event_mapper

logger = logging.getLogger(__name__)


def _describe_error(error: Dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}" if location else error["msg"]


class ProposalProcessor:
    """
    Main orchestration service for inbound proposal records.

    Flow:
    1. Unwrap and parse the inbound record
    2. Map it to a ProposalClient and validate it
    3. Compute routing decisions
    4. Publish the transformed record to the outbound topic
    """

    def __init__(self):
        """Initialize processor with shared collaborators."""
        self.mapper = proposal_client_event_mapper
        self.priority_service = priority_service
        self.publisher = proposal_event_publisher
        logger.info("Proposal processor initialized")

    def parse_event(self, raw_data: Any) -> ProposalClientEvent:
        """
        Parse a raw inbound record into its wire model.

        Args:
            raw_data: JSON as received, possibly wrapped in an envelope

        Returns:
            ProposalClientEvent

        Raises:
            pydantic.ValidationError: if the record is not a proposal object
        """
        return ProposalClientEvent.model_validate(unwrap_envelope(raw_data))

    def to_domain(self, event: ProposalClientEvent) -> ProposalClient:
        """Map an inbound record to the domain model."""
        return self.mapper.to_domain(event)

    def prepare(self, raw_data: Any) -> Tuple[ProposalClient, ProposalAssessment]:
        """
        Parse, validate and assess a record without publishing it.

        Raises:
            InvalidEntityError: if the proposal breaks a business rule
        """
        event = self.parse_event(raw_data)
        logger.info(f"Received proposal record for client: {event.client_name}")

        proposal = self.to_domain(event)
        proposal.validate()
        logger.info("Proposal validated successfully")

        assessment = self.priority_service.assess(proposal)
        logger.info(
            f"Proposal for {proposal.client_name} routed to {assessment.review_team.value} "
            f"(score={assessment.priority_score}, auto_approve={assessment.auto_approve})"
        )
        return proposal, assessment

    async def publish(
        self,
        proposal: ProposalClient,
        assessment: ProposalAssessment
    ) -> ProcessingResult:
        """
        Publish an already validated proposal.

        Raises:
            PublishError: if the outbound gateway rejects the record
        """
        record = await self.publisher.publish(proposal, assessment)
        return ProcessingResult(
            client_name=proposal.client_name,
            assessment=assessment,
            record=record
        )

    async def deliver(
        self,
        proposal: ProposalClient,
        assessment: ProposalAssessment
    ) -> ProcessingResult:
        """Publish a validated proposal, reporting gateway failures in the result."""
        try:
            result = await self.publish(proposal, assessment)
        except PublishError as e:
            logger.error(f"Error publishing record for client {proposal.client_name}: {e}", exc_info=True)
            return ProcessingResult(
                success=False,
                client_name=proposal.client_name,
                assessment=assessment,
                errors=[str(e)]
            )

        logger.info(f"Successfully processed record for client: {proposal.client_name}")
        return result

    async def process(self, raw_data: Dict[str, Any]) -> ProcessingResult:
        """
        Run the full pipeline for one inbound record.

        Nothing is raised for a bad record: malformed payloads, invalid
        proposals and publish failures come back as a failed result so
        a consumer can log and drop them.
        """
        try:
            proposal, assessment = self.prepare(raw_data)
        except ValidationError as e:
            logger.error(f"Dropping malformed proposal record: {e.error_count()} error(s)", exc_info=True)
            return ProcessingResult(
                success=False,
                errors=[_describe_error(err) for err in e.errors()]
            )
        except InvalidEntityError as e:
            logger.warning(f"Dropping invalid proposal record: {e.reason}")
            return ProcessingResult(success=False, errors=[e.reason])

        return await self.deliver(proposal, assessment)


# Singleton instance
proposal_processor = ProposalProcessor()
