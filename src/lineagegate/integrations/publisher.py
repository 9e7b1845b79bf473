"""Hand-off of validated lineage events to a publisher.

The gate is the last point at which an event may change. ``submit()``
checks required attributes, freezes the event, and only then passes it to
the publisher. Events that fail validation are logged and dropped; they are
never retried since the missing data will not appear on its own.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from lineagegate.engine.validation import missing_specific_attributes
from lineagegate.errors import LineageValidationError
from lineagegate.models.event import LineageEvent
from lineagegate.models.requirements import DEFAULT_REGISTRY, RequirementsRegistry
from lineagegate.observability.metrics import metrics

logger = logging.getLogger(__name__)


class LineagePublisher(ABC):
    """Transport that ships frozen events to a lineage catalog."""

    @abstractmethod
    def publish(self, event: LineageEvent) -> None:
        """Transmit a frozen event."""


class LoggingPublisher(LineagePublisher):
    """Publisher that writes the rendered event to the log."""

    def __init__(self, log: Optional[logging.Logger] = None, level: int = logging.INFO):
        self.log = log or logger
        self.level = level
        self.published: int = 0

    def publish(self, event: LineageEvent) -> None:
        self.log.log(self.level, str(event))
        self.published += 1


class PublishGate:
    """Validates and freezes events before handing them to a publisher."""

    def __init__(
        self,
        publisher: LineagePublisher,
        registry: Optional[RequirementsRegistry] = None,
    ):
        self.publisher = publisher
        self.registry = registry or DEFAULT_REGISTRY

    def submit(self, event: LineageEvent) -> bool:
        """
        Publish an event if it carries every required attribute.

        Returns:
            True if the event was handed to the publisher, False if dropped

        Raises:
            Exception: whatever the publisher raises; the event stays frozen
        """
        try:
            missing = missing_specific_attributes(event, self.registry)
        except LineageValidationError as e:
            logger.error(f"Dropping lineage event: {e.message}")
            metrics.inc_counter("lineage.events.invalid")
            return False

        if missing:
            labels = ", ".join(sorted(attr.label for attr in missing))
            logger.error(
                f"Dropping {event.raw_event_type} lineage event for pipeline "
                f"{event.pipeline_id}: missing specific attributes [{labels}]"
            )
            metrics.inc_counter("lineage.events.rejected")
            metrics.observe("lineage.events.missing_attributes", len(missing))
            return False

        event.freeze()
        self.publisher.publish(event)
        metrics.inc_counter("lineage.events.published")
        return True
