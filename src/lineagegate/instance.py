"""Collector instance identity."""

import logging
import os
import socket
from typing import Optional
from uuid import uuid4

logger = logging.getLogger(__name__)


def detect_collector_id(configured: Optional[str] = None) -> str:
    """
    Resolve the collector instance identifier stamped on lineage events.

    Checks in priority order:
    1. Explicitly configured value (LINEAGEGATE_COLLECTOR_ID / SDC_ID)
    2. Kubernetes: HOSTNAME (e.g., "collector-deployment-7d8f9b-xyz12")
    3. Cloud Run: K_REVISION (e.g., "collector-00001-abc")
    4. Fallback: hostname + random suffix

    Returns:
        Collector identifier string
    """
    if configured:
        return configured

    k8s_hostname = os.environ.get("HOSTNAME")
    if k8s_hostname and "-" in k8s_hostname:
        logger.info(f"Detected Kubernetes collector: {k8s_hostname}")
        return k8s_hostname

    cloud_run_revision = os.environ.get("K_REVISION")
    if cloud_run_revision:
        collector_id = f"{cloud_run_revision}-{str(uuid4())[:8]}"
        logger.info(f"Detected Cloud Run collector: {collector_id}")
        return collector_id

    try:
        collector_id = f"{socket.gethostname()}-{str(uuid4())[:8]}"
        logger.warning(f"No deployment environment detected, using fallback: {collector_id}")
        return collector_id
    except OSError as e:
        collector_id = f"collector-{uuid4()}"
        logger.error(f"Failed to detect hostname, using random ID: {collector_id} (error: {e})")
        return collector_id
