"""API request/response schemas."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from lineagegate.models.enums import LineageEventType


# ============================================================================
# Event preview
# ============================================================================


class PreviewEventRequest(BaseModel):
    """Inputs for building a lineage event without publishing it."""

    event_type: LineageEventType
    name: Optional[str] = Field(None, description="Pipeline title")
    user: Optional[str] = Field(None, description="User running the pipeline")
    start_time: int = Field(..., ge=0, description="Pipeline start, epoch milliseconds")
    pipeline_id: Optional[str] = Field(None, description="Locally generated pipeline id")
    collector_id: Optional[str] = Field(None, description="Defaults to the server's collector id")
    permalink: Optional[str] = Field(None, description="Defaults to a link built from pipeline_id")
    stage_name: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = Field(None, description="Locally generated pipeline version")
    metadata: Optional[dict[str, Any]] = Field(None, description="Pipeline metadata")
    parameters: Optional[dict[str, Any]] = Field(None, description="Runtime parameters")
    specific_attributes: dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="Specific attributes set after construction, keyed by label",
    )


class PreviewEventResponse(BaseModel):
    """Built event with its validation result."""

    event: dict[str, Any]
    created_at: datetime
    missing_attributes: list[str]
    publishable: bool
    rendered: str


# ============================================================================
# System schemas
# ============================================================================


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str


class ConfigResponse(BaseModel):
    """Config response."""

    env: str
    collector_id: str
    collector_base_url: str
    sensitive_key_patterns: list[str]
    required_attributes: dict[str, list[str]]
    version: str
