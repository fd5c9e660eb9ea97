"""Mappers between the topic wire models and the domain model."""

from typing import Optional

from proposal_bridge.domain.models import ProposalClient, BudgetRange
from proposal_bridge.models.events import (
    BudgetRangePayload,
    ProposalClientEvent,
    ProposalEvent,
)


class ProposalClientEventMapper:
    """Inbound record -> domain. Absent fields stay None."""

    def to_domain(self, event: Optional[ProposalClientEvent]) -> Optional[ProposalClient]:
        if event is None:
            return None

        budget_range = None
        if event.budget_range is not None:
            budget_range = BudgetRange(
                min=event.budget_range.min,
                max=event.budget_range.max,
                currency=event.budget_range.currency,
            )

        return ProposalClient(
            client_name=event.client_name,
            industry=event.industry,
            company_size=event.company_size,
            context=event.context,
            pain_points=tuple(event.pain_points) if event.pain_points is not None else None,
            budget_range=budget_range,
            additional_notes=event.additional_notes,
        )


class ProposalEventMapper:
    """Domain -> outbound record. The client name is intentionally dropped."""

    def to_dto(self, domain: Optional[ProposalClient]) -> Optional[ProposalEvent]:
        if domain is None:
            return None

        budget_range = None
        if domain.budget_range is not None:
            budget_range = BudgetRangePayload(
                min=domain.budget_range.min,
                max=domain.budget_range.max,
                currency=domain.budget_range.currency,
            )

        return ProposalEvent(
            industry=domain.industry,
            company_size=domain.company_size,
            context=domain.context,
            pain_points=list(domain.pain_points) if domain.pain_points is not None else None,
            budget_range=budget_range,
            additional_notes=domain.additional_notes,
        )


# Singleton instances
proposal_client_event_mapper = ProposalClientEventMapper()
proposal_event_mapper = ProposalEventMapper()
