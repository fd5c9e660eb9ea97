"""Configuration management for the Proposal Bridge."""

from functools import lru_cache
from typing import Dict, Any, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ===========================================
    # Inbound Topic Configuration
    # ===========================================
    INBOUND_TOPIC: str = Field(
        default="proposal-client-events",
        description="Topic the proposal client records arrive on"
    )
    CONSUMER_GROUP_ID: str = Field(
        default="proposal-bridge",
        description="Consumer group the push gateway delivers for"
    )

    # ===========================================
    # Outbound Publisher Configuration
    # ===========================================
    OUTBOUND_TOPIC: str = Field(
        default="proposal-events",
        description="Topic transformed proposals are published to"
    )
    OUTBOUND_PUBLISH_URL: str = Field(
        default="",
        description="HTTP endpoint of the outbound topic gateway"
    )
    OUTBOUND_API_KEY: str = Field(default="", description="Bearer token for the gateway")
    PUBLISH_ENABLED: bool = Field(
        default=False,
        description="Send records downstream; when off they are only logged"
    )
    PUBLISH_TIMEOUT_SECONDS: float = Field(
        default=30.0,
        description="Timeout for a single publish request"
    )

    # ===========================================
    # Server Configuration
    # ===========================================
    DEBUG: bool = Field(default=True, description="Debug mode")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# ===========================================
# Inbound Envelope Handling
# ===========================================
# Push gateways wrap the record differently depending on the source

ENVELOPE_KEYS = ("body", "value")


def unwrap_envelope(raw_data: Any) -> Any:
    """
    Strip transport wrappers around an inbound record.

    Args:
        raw_data: Parsed JSON as received

    Returns:
        The innermost record dictionary, or raw_data unchanged
    """
    while isinstance(raw_data, dict):
        for key in ENVELOPE_KEYS:
            if key in raw_data and isinstance(raw_data[key], dict):
                raw_data = raw_data[key]
                break
        else:
            return raw_data
    return raw_data


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()


def describe_topics(settings: Optional[Settings] = None) -> Dict[str, str]:
    """Topic wiring summary for status endpoints and startup logs."""
    settings = settings or get_settings()
    return {
        "inbound_topic": settings.INBOUND_TOPIC,
        "consumer_group": settings.CONSUMER_GROUP_ID,
        "outbound_topic": settings.OUTBOUND_TOPIC,
    }
