"""API dependencies."""

import logging
import secrets
from dataclasses import dataclass
from typing import Literal

from fastapi import Header, HTTPException

from lineagegate.config import Environment, settings
from lineagegate.instance import detect_collector_id
from lineagegate.models.requirements import RequirementsRegistry
from lineagegate.redaction import Redactor

logger = logging.getLogger("lineagegate.api")


@dataclass(frozen=True)
class AuthContext:
    """Authentication context for the current request."""

    auth_type: Literal["api_key", "insecure_dev"]


async def verify_api_key(
    authorization: str | None = Header(None),
    x_api_key: str | None = Header(None, alias="X-API-Key"),
) -> AuthContext:
    """
    Verify the shared API key.

    Fails closed: without a configured key, requests are only accepted in
    explicit insecure dev mode.
    """
    if settings.allow_insecure_dev and settings.env == Environment.DEVELOPMENT:
        return AuthContext(auth_type="insecure_dev")

    api_key = None
    if authorization and authorization.startswith("Bearer "):
        api_key = authorization[7:]
    elif x_api_key:
        api_key = x_api_key

    if not api_key:
        raise HTTPException(
            status_code=401,
            detail="Missing authorization. Use Authorization: Bearer <key> or X-API-Key header",
        )

    if settings.api_key:
        if secrets.compare_digest(api_key, settings.api_key):
            return AuthContext(auth_type="api_key")
        raise HTTPException(status_code=401, detail="Invalid API key")

    logger.error("No LINEAGEGATE_API_KEY configured; rejecting request")
    raise HTTPException(
        status_code=503,
        detail="Server misconfigured: authentication not properly initialized",
    )


def get_redactor() -> Redactor:
    return settings.build_redactor()


def get_registry() -> RequirementsRegistry:
    return settings.build_registry()


def get_collector_id() -> str:
    if not settings.collector_id:
        settings.collector_id = detect_collector_id()
    return settings.collector_id


def validate_auth_config() -> None:
    """
    Validate authentication configuration at startup.

    Raises:
        RuntimeError: If configuration is insecure for the current environment
    """
    if settings.allow_insecure_dev and settings.env != Environment.DEVELOPMENT:
        raise RuntimeError(
            f"SECURITY ERROR: allow_insecure_dev=true is only permitted in development. "
            f"Current environment: {settings.env.value}. "
            f"Set LINEAGEGATE_ALLOW_INSECURE_DEV=false for {settings.env.value}."
        )

    if not settings.allow_insecure_dev and not settings.api_key:
        raise RuntimeError(
            "SECURITY ERROR: LINEAGEGATE_API_KEY must be set unless "
            "LINEAGEGATE_ALLOW_INSECURE_DEV=true in development."
        )

    if settings.allow_insecure_dev:
        logger.warning(
            "Running in INSECURE DEV MODE: authentication is disabled. "
            "Set LINEAGEGATE_ALLOW_INSECURE_DEV=false for any deployment."
        )
    else:
        logger.info(f"Authentication enabled: shared API key for {settings.env.value}")
