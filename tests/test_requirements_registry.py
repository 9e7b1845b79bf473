"""
Requirements registry tests.
"""

import pytest

from lineagegate.models import (
    DEFAULT_REGISTRY,
    LineageEventType,
    LineageSpecificAttribute,
    RequirementsRegistry,
)


def test_default_requirements():
    assert DEFAULT_REGISTRY.required_for(LineageEventType.START) == {
        LineageSpecificAttribute.DESCRIPTION
    }
    assert DEFAULT_REGISTRY.required_for(LineageEventType.ENTITY_READ) == {
        LineageSpecificAttribute.ENTITY_NAME,
        LineageSpecificAttribute.ENDPOINT_TYPE,
        LineageSpecificAttribute.DESCRIPTION,
    }
    assert set(DEFAULT_REGISTRY.event_types()) == set(LineageEventType)


def test_from_mapping_overrides_only_named_types():
    registry = RequirementsRegistry.from_mapping({"STOP": ["description", "entityUrl"]})

    assert registry.required_for(LineageEventType.STOP) == {
        LineageSpecificAttribute.DESCRIPTION,
        LineageSpecificAttribute.ENTITY_URL,
    }
    assert registry.required_for(LineageEventType.START) == DEFAULT_REGISTRY.required_for(
        LineageEventType.START
    )


@pytest.mark.parametrize("raw", [{"RESTART": ["description"]}, {"START": ["nope"]}])
def test_from_mapping_rejects_unknown_labels(raw):
    with pytest.raises(ValueError):
        RequirementsRegistry.from_mapping(raw)


def test_registry_is_read_only():
    rules = {LineageEventType.START: [LineageSpecificAttribute.DESCRIPTION]}
    registry = RequirementsRegistry(rules)
    rules[LineageEventType.STOP] = [LineageSpecificAttribute.DESCRIPTION]

    assert LineageEventType.STOP not in registry
    assert registry.required_for(LineageEventType.STOP) == frozenset()
    with pytest.raises(TypeError):
        registry._rules[LineageEventType.STOP] = frozenset()


def test_as_labels_is_sorted():
    assert DEFAULT_REGISTRY.as_labels()["ENTITY_WRITE"] == ["description", "endpointType", "entityName"]
