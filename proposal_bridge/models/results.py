"""Result models for the proposal pipeline."""

from typing import Optional, List
from pydantic import BaseModel, Field

from proposal_bridge.domain.priority import ProposalAssessment
from proposal_bridge.models.events import PublishedRecord


class ProcessingResult(BaseModel):
    """Outcome of running one inbound record through the pipeline."""
    success: bool = Field(True, description="Whether the record was processed")
    client_name: Optional[str] = Field(None, description="Client name from the record")
    assessment: Optional[ProposalAssessment] = Field(
        None,
        description="Routing decisions for the proposal"
    )
    record: Optional[PublishedRecord] = Field(
        None,
        description="Outbound record, if one was built"
    )
    errors: List[str] = Field(
        default_factory=list,
        description="Any errors encountered"
    )
