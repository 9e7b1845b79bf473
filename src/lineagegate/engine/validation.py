"""Required attribute checks for lineage events."""

import logging
from typing import Optional

from lineagegate.errors import LineageValidationError, UnknownEventTypeError
from lineagegate.models.enums import LineageSpecificAttribute
from lineagegate.models.event import LineageEvent
from lineagegate.models.requirements import DEFAULT_REGISTRY, RequirementsRegistry

logger = logging.getLogger(__name__)


def missing_specific_attributes(
    event: LineageEvent,
    registry: Optional[RequirementsRegistry] = None,
) -> set[LineageSpecificAttribute]:
    """
    Compute the required specific attributes an event lacks.

    An attribute is missing when it is absent or its value is None or empty.
    The result is empty if and only if the event may be published.

    Raises:
        LineageValidationError: if the stored event type cannot be resolved
    """
    registry = registry or DEFAULT_REGISTRY
    try:
        event_type = event.event_type
    except UnknownEventTypeError as e:
        raise LineageValidationError(event.raw_event_type) from e

    required = registry.required_for(event_type)
    present = event.specific_attributes

    missing = set(required.difference(present))
    missing.update(attr for attr in required if not present.get(attr))
    return missing


def is_publishable(event: LineageEvent, registry: Optional[RequirementsRegistry] = None) -> bool:
    return not missing_specific_attributes(event, registry)
