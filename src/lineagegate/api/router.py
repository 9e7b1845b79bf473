"""REST API router."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from lineagegate.api.deps import (
    get_collector_id,
    get_redactor,
    get_registry,
    verify_api_key,
)
from lineagegate.api.schemas import (
    ConfigResponse,
    HealthResponse,
    PreviewEventRequest,
    PreviewEventResponse,
)
from lineagegate.config import settings
from lineagegate.engine import build_event, missing_specific_attributes
from lineagegate.errors import LineageGateError
from lineagegate.models.enums import LineageSpecificAttribute
from lineagegate.models.requirements import RequirementsRegistry
from lineagegate.observability.metrics import metrics
from lineagegate.redaction import Redactor
from lineagegate.utils.links import build_permalink
from lineagegate.utils.time import millis_to_datetime

VERSION = "0.1.0"

logger = logging.getLogger("lineagegate.api")

router = APIRouter(prefix="/v1", dependencies=[Depends(verify_api_key)])


# ============================================================================
# Health & Config
# ============================================================================


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=VERSION)


@router.get("/config", response_model=ConfigResponse)
async def get_config(
    collector_id: str = Depends(get_collector_id),
    registry: RequirementsRegistry = Depends(get_registry),
):
    """Get effective lineage configuration."""
    return ConfigResponse(
        env=settings.env.value,
        collector_id=collector_id,
        collector_base_url=settings.collector_base_url,
        sensitive_key_patterns=settings.sensitive_key_patterns,
        required_attributes=registry.as_labels(),
        version=VERSION,
    )


@router.get("/metrics")
async def get_metrics():
    """Snapshot of in-process lineage counters."""
    return metrics.snapshot()


# ============================================================================
# Events
# ============================================================================


@router.post("/events/preview", response_model=PreviewEventResponse)
async def preview_event(
    request: PreviewEventRequest,
    collector_id: str = Depends(get_collector_id),
    redactor: Redactor = Depends(get_redactor),
    registry: RequirementsRegistry = Depends(get_registry),
):
    """
    Build a lineage event and report whether it could be published.

    Nothing is stored or forwarded; the response shows the event exactly
    as a publisher would receive it, with sensitive parameters masked.
    """
    permalink = request.permalink
    if permalink is None and request.pipeline_id:
        permalink = build_permalink(settings.collector_base_url, request.pipeline_id)

    try:
        event = build_event(
            request.event_type,
            request.name,
            request.user,
            request.start_time,
            request.pipeline_id,
            request.collector_id or collector_id,
            permalink,
            request.stage_name,
            request.description,
            request.version,
            metadata=request.metadata,
            parameters=request.parameters,
            redactor=redactor,
        )
        for label, value in request.specific_attributes.items():
            event.set_specific_attribute(LineageSpecificAttribute(label), value)
        missing = missing_specific_attributes(event, registry)
    except LineageGateError as e:
        raise HTTPException(status_code=422, detail={"code": e.code, "message": e.message})
    except ValueError as e:
        raise HTTPException(status_code=422, detail={"code": "INVALID_REQUEST", "message": str(e)})

    event.freeze()
    logger.info(f"Previewed {event.raw_event_type} event for pipeline {event.pipeline_id}")
    return PreviewEventResponse(
        event=event.to_dict(),
        created_at=millis_to_datetime(event.timestamp),
        missing_attributes=sorted(attr.label for attr in missing),
        publishable=not missing,
        rendered=str(event),
    )
