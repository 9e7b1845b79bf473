#!/usr/bin/env python3
"""Golden path demo for LineageGate (one pipeline run, logged publisher)."""

from __future__ import annotations

import logging
import os
import sys
import time

from lineagegate.config import settings
from lineagegate.engine import build_event
from lineagegate.instance import detect_collector_id
from lineagegate.integrations import LoggingPublisher, PublishGate
from lineagegate.models import EndpointType, LineageEventType, LineageSpecificAttribute
from lineagegate.utils.links import build_permalink


def _env(name: str, default: str | None = None) -> str | None:
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    return value


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    pipeline_id = _env("PIPELINE_ID", "orders_to_lake::1")
    collector_id = detect_collector_id(settings.collector_id)
    permalink = build_permalink(settings.collector_base_url, pipeline_id)
    metadata = {"pipelineLabels": ["orders", "nightly"]}
    parameters = {"JDBC_URL": "jdbc:postgresql://db/orders", "JDBC_PASSWORD": _env("JDBC_PASSWORD", "hunter22")}
    started = int(time.time() * 1000)

    gate = PublishGate(LoggingPublisher(), settings.build_registry())
    redactor = settings.build_redactor()

    def event(event_type: LineageEventType, stage: str, description: str = ""):
        return build_event(
            event_type,
            "Orders to lake",
            _env("PIPELINE_USER", "admin"),
            started,
            pipeline_id,
            collector_id,
            permalink,
            stage,
            description,
            "1",
            metadata,
            parameters,
            redactor=redactor,
        )

    ok = gate.submit(event(LineageEventType.START, "pipeline", "Nightly orders export"))

    read = event(LineageEventType.ENTITY_READ, "JDBCQueryConsumer_01")
    read.set_specific_attribute(LineageSpecificAttribute.ENTITY_NAME, "public.orders")
    read.set_specific_attribute(LineageSpecificAttribute.ENDPOINT_TYPE, EndpointType.JDBC.value)
    read.set_specific_attribute(LineageSpecificAttribute.DESCRIPTION, "Orders table")
    ok = gate.submit(read) and ok

    # Missing entity name: the gate drops it
    write = event(LineageEventType.ENTITY_WRITE, "S3Destination_01")
    write.set_specific_attribute(LineageSpecificAttribute.ENDPOINT_TYPE, EndpointType.S3.value)
    gate.submit(write)

    ok = gate.submit(event(LineageEventType.STOP, "pipeline", "Finished")) and ok
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
