"""LineageGate engine - event construction and validation."""

from lineagegate.engine.builder import build_event, resolve_identity
from lineagegate.engine.validation import is_publishable, missing_specific_attributes

__all__ = [
    "build_event",
    "is_publishable",
    "missing_specific_attributes",
    "resolve_identity",
]
