"""Required specific attributes per lineage event type.

A publisher consults this registry before transmitting an event: every
attribute listed for the event's type must be present with a non-empty
value. The registry is built once and never mutated, so it is shared
across threads without locking.

Default requirements:
- START, STOP → description
- ENTITY_CREATED, ENTITY_READ, ENTITY_WRITE → entityName, endpointType, description
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from lineagegate.models.enums import LineageEventType, LineageSpecificAttribute


_ENTITY_REQUIREMENTS = frozenset(
    {
        LineageSpecificAttribute.ENTITY_NAME,
        LineageSpecificAttribute.ENDPOINT_TYPE,
        LineageSpecificAttribute.DESCRIPTION,
    }
)

DEFAULT_REQUIREMENTS: Mapping[LineageEventType, frozenset[LineageSpecificAttribute]] = MappingProxyType(
    {
        LineageEventType.START: frozenset({LineageSpecificAttribute.DESCRIPTION}),
        LineageEventType.STOP: frozenset({LineageSpecificAttribute.DESCRIPTION}),
        LineageEventType.ENTITY_CREATED: _ENTITY_REQUIREMENTS,
        LineageEventType.ENTITY_READ: _ENTITY_REQUIREMENTS,
        LineageEventType.ENTITY_WRITE: _ENTITY_REQUIREMENTS,
    }
)


class RequirementsRegistry:
    """Read-only lookup from event type to its required specific attributes."""

    __slots__ = ("_rules",)

    def __init__(
        self,
        rules: Mapping[LineageEventType, Iterable[LineageSpecificAttribute]],
    ) -> None:
        self._rules = MappingProxyType(
            {event_type: frozenset(attrs) for event_type, attrs in rules.items()}
        )

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Iterable[str]]) -> "RequirementsRegistry":
        """
        Build a registry from label strings, e.g. parsed JSON configuration.

        Event types not named in ``raw`` keep their default requirements.

        Raises:
            ValueError: if an event type or attribute label is unknown
        """
        rules: dict[LineageEventType, Iterable[LineageSpecificAttribute]] = dict(
            DEFAULT_REQUIREMENTS
        )
        for type_name, labels in raw.items():
            event_type = LineageEventType(type_name)
            rules[event_type] = [LineageSpecificAttribute(label) for label in labels]
        return cls(rules)

    def required_for(
        self, event_type: LineageEventType
    ) -> frozenset[LineageSpecificAttribute]:
        """
        Get the specific attributes an event type must carry.

        Returns:
            Required attributes, empty if the type is not registered
        """
        return self._rules.get(event_type, frozenset())

    def event_types(self) -> list[LineageEventType]:
        return list(self._rules)

    def as_labels(self) -> dict[str, list[str]]:
        """Export rules keyed by label, with attributes sorted for stable output."""
        return {
            event_type.value: sorted(attr.value for attr in attrs)
            for event_type, attrs in self._rules.items()
        }

    def __contains__(self, event_type: object) -> bool:
        return event_type in self._rules

    def __repr__(self) -> str:
        return f"RequirementsRegistry({self.as_labels()!r})"


DEFAULT_REGISTRY = RequirementsRegistry(DEFAULT_REQUIREMENTS)
