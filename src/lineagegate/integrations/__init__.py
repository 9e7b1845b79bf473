"""Publisher integrations."""

from lineagegate.integrations.publisher import LineagePublisher, LoggingPublisher, PublishGate

__all__ = [
    "LineagePublisher",
    "LoggingPublisher",
    "PublishGate",
]
