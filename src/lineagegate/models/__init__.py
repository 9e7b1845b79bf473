"""LineageGate data models."""

from lineagegate.models.enums import (
    EndpointType,
    LineageEventType,
    LineageGeneralAttribute,
    LineageSpecificAttribute,
    MetadataKind,
)
from lineagegate.models.event import GeneralAttributes, LineageEvent, PIPELINE_VERSION_PROPERTY
from lineagegate.models.metadata import (
    CONTROL_PLANE_PIPELINE_ID,
    CONTROL_PLANE_PIPELINE_VERSION,
    MetadataValue,
    PipelineMetadata,
)
from lineagegate.models.requirements import DEFAULT_REGISTRY, RequirementsRegistry

__all__ = [
    "CONTROL_PLANE_PIPELINE_ID",
    "CONTROL_PLANE_PIPELINE_VERSION",
    "DEFAULT_REGISTRY",
    "EndpointType",
    "GeneralAttributes",
    "LineageEvent",
    "LineageEventType",
    "LineageGeneralAttribute",
    "LineageSpecificAttribute",
    "MetadataKind",
    "MetadataValue",
    "PIPELINE_VERSION_PROPERTY",
    "PipelineMetadata",
    "RequirementsRegistry",
]
