"""Lineage event construction.

Identity precedence:
- If metadata carries a control plane pipeline id (``dpm.pipeline.id``),
  the control plane id and version (``dpm.pipeline.version``) are used
  together.
- Otherwise the locally generated id and version are used together.

The two sources are never mixed. The resolved version is stored in the
event's properties under the ``pipelineVersion`` label regardless of source.

Everything is computed into local values first and the event is created in
one step, so a failure (e.g. malformed labels) leaves no half-built event.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any, Optional

from lineagegate.models.enums import LineageEventType, LineageSpecificAttribute
from lineagegate.models.event import GeneralAttributes, LineageEvent, PIPELINE_VERSION_PROPERTY
from lineagegate.models.metadata import (
    CONTROL_PLANE_PIPELINE_ID,
    CONTROL_PLANE_PIPELINE_VERSION,
    MetadataInput,
    PipelineMetadata,
    as_pipeline_metadata,
)
from lineagegate.observability.metrics import metrics
from lineagegate.redaction import Redactor, redact_parameters
from lineagegate.utils.time import epoch_millis

logger = logging.getLogger(__name__)


def resolve_identity(
    metadata: PipelineMetadata,
    pipeline_id: Optional[str],
    version: Optional[str],
) -> tuple[Optional[str], Optional[str]]:
    """
    Pick the (pipeline id, version) pair for an event.

    Returns:
        Control plane pair when metadata names a control plane pipeline id,
        otherwise the local pair
    """
    if metadata.has_control_plane_identity:
        return (
            metadata.text(CONTROL_PLANE_PIPELINE_ID),
            metadata.text(CONTROL_PLANE_PIPELINE_VERSION),
        )
    return pipeline_id, version


def build_event(
    event_type: LineageEventType,
    name: Optional[str],
    user: Optional[str],
    start_time: int,
    pipeline_id: Optional[str],
    collector_id: Optional[str],
    permalink: Optional[str],
    stage_name: Optional[str],
    description: Optional[str],
    version: Optional[str],
    metadata: MetadataInput = None,
    parameters: Optional[Mapping[str, Any]] = None,
    *,
    redactor: Optional[Redactor] = None,
    clock: Callable[[], int] = epoch_millis,
) -> LineageEvent:
    """
    Build a lineage event for a pipeline occurrence.

    Args:
        event_type: Milestone or entity access being recorded
        name: Pipeline title
        user: User running the pipeline
        start_time: Pipeline start, epoch milliseconds
        pipeline_id: Locally generated pipeline id
        collector_id: Collector instance id
        permalink: Link to the pipeline in the collector UI
        stage_name: Stage emitting the event
        description: Stored as a specific attribute for START/STOP only
        version: Locally generated pipeline version
        metadata: Pipeline metadata (control plane identity, labels)
        parameters: Runtime parameters copied into properties after redaction
        redactor: Sensitive key policy; defaults to the "password" rule
        clock: Source of the creation timestamp

    Raises:
        UnknownEventTypeError: if event_type names no known type
        MetadataTypeMismatchError: if the labels or control plane entries
            have the wrong shape
    """
    event_type = LineageEventType.parse(event_type)
    pipeline_metadata = as_pipeline_metadata(metadata)

    resolved_id, resolved_version = resolve_identity(pipeline_metadata, pipeline_id, version)
    tags = pipeline_metadata.labels()

    general = GeneralAttributes(
        event_type=event_type.value,
        pipeline_title=name,
        pipeline_user=user,
        pipeline_start_time=str(int(start_time)),
        collector_id=collector_id,
        permalink=permalink,
        stage_name=stage_name,
        time_stamp=str(clock()),
        pipeline_id=resolved_id,
    )

    # Entity events carry their identity in the stage name instead
    specific: dict[LineageSpecificAttribute, Optional[str]] = {}
    if event_type.is_lifecycle():
        specific[LineageSpecificAttribute.DESCRIPTION] = description

    # Version is None when the control plane gives an id without a version
    properties: dict[str, Optional[str]] = {PIPELINE_VERSION_PROPERTY: resolved_version}
    properties.update(redact_parameters(parameters, redactor))

    event = LineageEvent(
        general=general,
        specific_attributes=specific,
        properties=properties,
        tags=tags,
    )

    metrics.inc_counter("lineage.events.built")
    metrics.inc_counter(f"lineage.events.built.{event_type.value.lower()}")
    logger.debug(
        f"Built {event_type.value} lineage event for pipeline {resolved_id} "
        f"(control_plane={pipeline_metadata.has_control_plane_identity}, "
        f"tags={len(tags)}, parameters={len(parameters or {})})"
    )
    return event
