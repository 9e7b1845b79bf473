"""
Tagged metadata tests.
"""

import pytest

from lineagegate.errors import MetadataTypeMismatchError
from lineagegate.models import MetadataKind, MetadataValue, PipelineMetadata


@pytest.mark.parametrize(
    "raw,kind",
    [
        ("text", MetadataKind.TEXT),
        (["a", "b"], MetadataKind.LABELS),
        (("a",), MetadataKind.LABELS),
        ([], MetadataKind.LABELS),
        (["a", 1], MetadataKind.OTHER),
        (None, MetadataKind.OTHER),
        ({"k": "v"}, MetadataKind.OTHER),
    ],
)
def test_wrap_tags_by_shape(raw, kind):
    assert MetadataValue.wrap(raw).kind == kind


def test_wrap_is_idempotent():
    value = MetadataValue.wrap("x")

    assert MetadataValue.wrap(value) is value


def test_labels_are_copied():
    source = ["a", "b"]
    labels = PipelineMetadata({"pipelineLabels": source}).labels()
    source.append("c")

    assert labels == ["a", "b"]


def test_text_extraction():
    metadata = PipelineMetadata({"dpm.pipeline.id": "X", "empty": None})

    assert metadata.text("dpm.pipeline.id") == "X"
    assert metadata.text("empty") is None
    assert metadata.text("absent") is None
    assert metadata.has_control_plane_identity


def test_text_extraction_rejects_labels():
    metadata = PipelineMetadata({"dpm.pipeline.id": ["X"]})

    with pytest.raises(MetadataTypeMismatchError):
        metadata.text("dpm.pipeline.id")


def test_absent_labels_are_empty():
    metadata = PipelineMetadata()

    assert metadata.labels() == []
    assert len(metadata) == 0
    assert not metadata.has_control_plane_identity
