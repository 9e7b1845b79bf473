"""Lineage event model - general record plus open attribute maps."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from lineagegate.errors import EventFrozenError, MalformedNumberError
from lineagegate.models.enums import (
    LineageEventType,
    LineageGeneralAttribute,
    LineageSpecificAttribute,
)


# Label of the properties entry holding the resolved pipeline version.
PIPELINE_VERSION_PROPERTY = LineageGeneralAttribute.PIPELINE_VERSION.label


class GeneralAttributes(BaseModel):
    """Mandatory attributes, held in their stored string form."""

    model_config = ConfigDict(frozen=True)

    event_type: str
    pipeline_title: Optional[str]
    pipeline_user: Optional[str]
    pipeline_start_time: str
    collector_id: Optional[str]
    permalink: Optional[str]
    stage_name: Optional[str]
    time_stamp: str
    pipeline_id: Optional[str]

    def as_labels(self) -> dict[str, Optional[str]]:
        """Export fields keyed by their general attribute label."""
        return {attr.label: getattr(self, name) for attr, name in GENERAL_FIELDS.items()}

    @classmethod
    def from_labels(cls, values: Mapping[str, Any]) -> "GeneralAttributes":
        """
        Rebuild the record from a label-keyed mapping (e.g. an exported event).

        Raises:
            pydantic.ValidationError: if a mandatory label is missing
        """
        return cls(
            **{
                name: None if values.get(attr.label) is None else str(values[attr.label])
                for attr, name in GENERAL_FIELDS.items()
                if attr.label in values
            }
        )


GENERAL_FIELDS: Mapping[LineageGeneralAttribute, str] = MappingProxyType(
    {
        LineageGeneralAttribute.EVENT_TYPE: "event_type",
        LineageGeneralAttribute.PIPELINE_TITLE: "pipeline_title",
        LineageGeneralAttribute.PIPELINE_USER: "pipeline_user",
        LineageGeneralAttribute.PIPELINE_START_TIME: "pipeline_start_time",
        LineageGeneralAttribute.COLLECTOR_ID: "collector_id",
        LineageGeneralAttribute.PERMALINK: "permalink",
        LineageGeneralAttribute.STAGE_NAME: "stage_name",
        LineageGeneralAttribute.TIME_STAMP: "time_stamp",
        LineageGeneralAttribute.PIPELINE_ID: "pipeline_id",
    }
)


def _parse_long(attribute: LineageGeneralAttribute, raw: Optional[str]) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise MalformedNumberError(attribute.label, raw) from None


class LineageEvent:
    """
    Record of a pipeline milestone or data-entity access.

    General attributes are fixed at construction. Specific attributes,
    properties and tags may be enriched by the owning thread until
    ``freeze()`` is called; afterwards every setter raises
    ``EventFrozenError``. No locking is done here.
    """

    def __init__(
        self,
        general: GeneralAttributes,
        specific_attributes: Optional[Mapping[LineageSpecificAttribute, Optional[str]]] = None,
        properties: Optional[Mapping[str, Optional[str]]] = None,
        tags: Optional[list[str]] = None,
    ):
        self._general = general
        self._specific: dict[LineageSpecificAttribute, Optional[str]] = dict(
            specific_attributes or {}
        )
        self._properties: dict[str, Optional[str]] = dict(properties or {})
        self._tags: list[str] = list(tags) if tags is not None else []
        self._frozen = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LineageEvent":
        """Rebuild an event from the shape produced by ``to_dict()``."""
        specific = {
            LineageSpecificAttribute(label): value
            for label, value in (data.get("specific") or {}).items()
        }
        return cls(
            general=GeneralAttributes.from_labels(data.get("general") or {}),
            specific_attributes=specific,
            properties=data.get("properties"),
            tags=data.get("tags"),
        )

    # ------------------------------------------------------------------
    # General attribute accessors
    # ------------------------------------------------------------------

    @property
    def general_attributes(self) -> GeneralAttributes:
        return self._general

    @property
    def raw_event_type(self) -> str:
        return self._general.event_type

    @property
    def event_type(self) -> LineageEventType:
        """
        Event type parsed from its stored form.

        Raises:
            UnknownEventTypeError: if the stored value is not a known type
        """
        return LineageEventType.parse(self._general.event_type)

    @property
    def pipeline_id(self) -> Optional[str]:
        return self._general.pipeline_id

    @property
    def pipeline_user(self) -> Optional[str]:
        return self._general.pipeline_user

    @property
    def pipeline_title(self) -> Optional[str]:
        return self._general.pipeline_title

    @property
    def pipeline_start_time(self) -> int:
        return _parse_long(
            LineageGeneralAttribute.PIPELINE_START_TIME, self._general.pipeline_start_time
        )

    @property
    def timestamp(self) -> int:
        """Creation time in epoch milliseconds."""
        return _parse_long(LineageGeneralAttribute.TIME_STAMP, self._general.time_stamp)

    @property
    def collector_id(self) -> Optional[str]:
        return self._general.collector_id

    @property
    def permalink(self) -> Optional[str]:
        return self._general.permalink

    @property
    def stage_name(self) -> Optional[str]:
        return self._general.stage_name

    @property
    def pipeline_version(self) -> Optional[str]:
        return self._properties.get(PIPELINE_VERSION_PROPERTY)

    # ------------------------------------------------------------------
    # Mutable sections
    # ------------------------------------------------------------------

    def get_specific_attribute(self, name: LineageSpecificAttribute) -> Optional[str]:
        return self._specific.get(name)

    def set_specific_attribute(self, name: LineageSpecificAttribute, value: Optional[str]) -> None:
        self._check_mutable("specific attributes")
        self._specific[name] = value

    @property
    def specific_attributes(self) -> Mapping[LineageSpecificAttribute, Optional[str]]:
        return MappingProxyType(self._specific)

    @property
    def tags(self) -> list[str]:
        if self._frozen:
            return list(self._tags)
        return self._tags

    @tags.setter
    def tags(self, tags: Optional[list[str]]) -> None:
        self._check_mutable("tags")
        self._tags = list(tags) if tags is not None else []

    @property
    def properties(self) -> Mapping[str, Optional[str]]:
        if self._frozen:
            return MappingProxyType(self._properties)
        return self._properties

    @properties.setter
    def properties(self, properties: Optional[Mapping[str, Optional[str]]]) -> None:
        self._check_mutable("properties")
        self._properties = dict(properties) if properties is not None else {}

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> "LineageEvent":
        """Make the event immutable before it is handed to a publisher."""
        # Detach containers handed out while the event was still mutable
        self._tags = list(self._tags)
        self._properties = dict(self._properties)
        self._frozen = True
        return self

    def _check_mutable(self, field: str) -> None:
        if self._frozen:
            raise EventFrozenError(field)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "general": self._general.as_labels(),
            "specific": {attr.label: value for attr, value in self._specific.items()},
            "properties": dict(self._properties),
            "tags": list(self._tags),
        }

    def __str__(self) -> str:
        from lineagegate.serialization import render_event

        return render_event(self)

    def __repr__(self) -> str:
        return (
            f"LineageEvent(event_type={self._general.event_type!r}, "
            f"pipeline_id={self._general.pipeline_id!r}, frozen={self._frozen})"
        )
