"""Pipeline metadata entries.

Metadata arrives from the pipeline runtime as an untyped mapping. Each
entry is wrapped in a ``MetadataValue`` that records its shape, so that
reading it as text or as a label list either succeeds or fails with a
``MetadataTypeMismatchError`` instead of an unchecked cast.
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

from lineagegate.errors import MetadataTypeMismatchError
from lineagegate.models.enums import LineageGeneralAttribute, MetadataKind


# Control plane linkage keys; stable literals shared with the control plane.
CONTROL_PLANE_PIPELINE_ID = "dpm.pipeline.id"
CONTROL_PLANE_PIPELINE_VERSION = "dpm.pipeline.version"
PIPELINE_LABELS = LineageGeneralAttribute.PIPELINE_LABELS.label


class MetadataValue(BaseModel):
    """A metadata entry tagged with its shape."""

    model_config = ConfigDict(frozen=True)

    kind: MetadataKind
    value: Any = None

    @classmethod
    def wrap(cls, raw: Any) -> "MetadataValue":
        """Tag a raw metadata value by inspecting its shape."""
        if isinstance(raw, MetadataValue):
            return raw
        if isinstance(raw, str):
            return cls(kind=MetadataKind.TEXT, value=raw)
        if isinstance(raw, (list, tuple)) and all(isinstance(item, str) for item in raw):
            return cls(kind=MetadataKind.LABELS, value=tuple(raw))
        return cls(kind=MetadataKind.OTHER, value=raw)

    def as_text(self, key: str) -> Optional[str]:
        """
        Read the entry as a string.

        ``None`` passes through so a key present without a value is tolerated.

        Raises:
            MetadataTypeMismatchError: if the entry is not text
        """
        if self.kind == MetadataKind.TEXT:
            return self.value
        if self.kind == MetadataKind.OTHER and self.value is None:
            return None
        raise MetadataTypeMismatchError(key, "a string", self.value)

    def as_labels(self, key: str) -> list[str]:
        """
        Read the entry as an ordered list of labels.

        Raises:
            MetadataTypeMismatchError: if the entry is not a sequence of strings
        """
        if self.kind != MetadataKind.LABELS:
            raise MetadataTypeMismatchError(key, "a sequence of strings", self.value)
        return list(self.value)


class PipelineMetadata:
    """Tagged view over a pipeline metadata mapping."""

    def __init__(self, entries: Optional[Mapping[str, Any]] = None):
        self._entries: dict[str, MetadataValue] = {
            key: MetadataValue.wrap(value) for key, value in (entries or {}).items()
        }

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> Optional[MetadataValue]:
        return self._entries.get(key)

    def text(self, key: str) -> Optional[str]:
        entry = self._entries.get(key)
        return entry.as_text(key) if entry is not None else None

    def labels(self, key: str = PIPELINE_LABELS) -> list[str]:
        """Labels stored under ``key``; empty when the key is absent."""
        entry = self._entries.get(key)
        if entry is None:
            return []
        return entry.as_labels(key)

    @property
    def has_control_plane_identity(self) -> bool:
        return CONTROL_PLANE_PIPELINE_ID in self._entries


MetadataInput = Union[Mapping[str, Any], PipelineMetadata, None]


def as_pipeline_metadata(metadata: MetadataInput) -> PipelineMetadata:
    if isinstance(metadata, PipelineMetadata):
        return metadata
    return PipelineMetadata(metadata)
