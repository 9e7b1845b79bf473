"""Diagnostic text rendering of lineage events.

The output is meant for logs only; it is not parsed back.
"""

from collections.abc import Iterable
from typing import Any

from lineagegate.models.event import GENERAL_FIELDS, LineageEvent


SECTIONS = ("general", "specific", "properties", "tags")


def _pairs(items: Iterable[tuple[Any, Any]]) -> str:
    return "".join(f"{key}: {value} " for key, value in items)


def render_event(event: LineageEvent) -> str:
    """
    Render an event as ``<kind> general: ... specific: ... properties: ... tags: ...``.

    Sections always appear in that order; entries within a section follow
    the event's insertion order.
    """
    general = event.general_attributes
    parts = [
        type(event).__name__,
        " general: ",
        _pairs((attr.name, getattr(general, field)) for attr, field in GENERAL_FIELDS.items()),
        " specific: ",
        _pairs((attr.name, value) for attr, value in event.specific_attributes.items()),
        " properties: ",
        _pairs(event.properties.items()),
        " tags: ",
        "".join(f"{tag} " for tag in event.tags),
    ]
    return "".join(parts)
