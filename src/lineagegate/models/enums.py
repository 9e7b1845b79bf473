"""LineageGate enumerations."""

from enum import Enum

from lineagegate.errors import UnknownEventTypeError


class LineageEventType(str, Enum):
    """Pipeline lifecycle milestones and data-entity accesses."""

    START = "START"
    STOP = "STOP"
    ENTITY_CREATED = "ENTITY_CREATED"
    ENTITY_READ = "ENTITY_READ"
    ENTITY_WRITE = "ENTITY_WRITE"

    @classmethod
    def lifecycle_types(cls) -> set["LineageEventType"]:
        """Return event types that mark a pipeline start or stop."""
        return {cls.START, cls.STOP}

    def is_lifecycle(self) -> bool:
        """Check if this event type describes a pipeline start or stop."""
        return self in self.lifecycle_types()

    @classmethod
    def parse(cls, raw: str | None) -> "LineageEventType":
        """
        Parse a stored event type string.

        Raises:
            UnknownEventTypeError: if the string names no known type
        """
        try:
            return cls(raw)
        except ValueError:
            raise UnknownEventTypeError(raw) from None


class LineageGeneralAttribute(str, Enum):
    """Fixed attributes present on every lineage event.

    Values are the stable labels used in exported events and in the
    properties sidecar.
    """

    EVENT_TYPE = "eventType"
    PIPELINE_TITLE = "pipelineTitle"
    PIPELINE_USER = "pipelineUser"
    PIPELINE_START_TIME = "pipelineStartTime"
    COLLECTOR_ID = "sdcId"
    PERMALINK = "permalink"
    STAGE_NAME = "stageName"
    TIME_STAMP = "timeStamp"
    PIPELINE_ID = "pipelineId"
    PIPELINE_VERSION = "pipelineVersion"
    PIPELINE_LABELS = "pipelineLabels"

    @property
    def label(self) -> str:
        return self.value


class LineageSpecificAttribute(str, Enum):
    """Type-dependent attributes; the mandatory subset comes from the registry."""

    ENTITY_NAME = "entityName"
    ENDPOINT_TYPE = "endpointType"
    DESCRIPTION = "description"
    ENTITY_SCHEMA = "entitySchema"
    ENTITY_URL = "entityUrl"

    @property
    def label(self) -> str:
        return self.value


class EndpointType(str, Enum):
    """Kinds of data stores reported as the ENDPOINT_TYPE attribute."""

    HDFS = "HDFS"
    HIVE = "HIVE"
    JDBC = "JDBC"
    JMS = "JMS"
    KAFKA = "KAFKA"
    LOCAL_FS = "LOCAL_FS"
    S3 = "S3"
    HTTP = "HTTP"
    OTHER = "OTHER"


class MetadataKind(str, Enum):
    """Shape of a pipeline metadata entry."""

    TEXT = "text"
    LABELS = "labels"
    OTHER = "other"
