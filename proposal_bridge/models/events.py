"""Wire models for the inbound and outbound proposal topics."""

from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field


class BudgetRangePayload(BaseModel):
    """Budget sub-object as it appears on the wire."""
    min: Optional[int] = Field(None, description="Lower budget bound")
    max: Optional[int] = Field(None, description="Upper budget bound")
    currency: Optional[str] = Field(None, description="ISO currency code")


class ProposalClientEvent(BaseModel):
    """Inbound proposal client record."""
    client_name: Optional[str] = Field(None, alias="clientName", description="Client name")
    industry: Optional[str] = Field(None, description="Client industry")
    company_size: Optional[str] = Field(None, alias="companySize", description="Company size")
    context: Optional[str] = Field(None, description="Free-text context")
    pain_points: Optional[List[str]] = Field(None, alias="painPoints", description="Pain points")
    budget_range: Optional[BudgetRangePayload] = Field(
        None,
        alias="budgetRange",
        description="Budget range"
    )
    additional_notes: Optional[str] = Field(
        None,
        alias="additionalNotes",
        description="Additional notes"
    )

    class Config:
        populate_by_name = True
        extra = "ignore"


class ProposalEvent(BaseModel):
    """
    Outbound proposal record.

    Carries every inbound field except the client name, which is
    consumed here and not echoed downstream.
    """
    industry: Optional[str] = Field(None, description="Client industry")
    company_size: Optional[str] = Field(None, alias="companySize", description="Company size")
    context: Optional[str] = Field(None, description="Free-text context")
    pain_points: Optional[List[str]] = Field(None, alias="painPoints", description="Pain points")
    budget_range: Optional[BudgetRangePayload] = Field(
        None,
        alias="budgetRange",
        description="Budget range"
    )
    additional_notes: Optional[str] = Field(
        None,
        alias="additionalNotes",
        description="Additional notes"
    )

    class Config:
        populate_by_name = True

    def to_wire(self) -> Dict[str, Any]:
        """Serialize with camelCase field names, keeping explicit nulls."""
        return self.model_dump(by_alias=True)


class PublishedRecord(BaseModel):
    """Record envelope handed to the outbound topic gateway."""
    topic: str = Field(..., description="Destination topic")
    key: Optional[str] = Field(None, description="Partitioning key")
    headers: Dict[str, str] = Field(default_factory=dict, description="Record headers")
    value: Dict[str, Any] = Field(..., description="Serialized ProposalEvent")
    sent: bool = Field(False, description="Whether the record left the process")
