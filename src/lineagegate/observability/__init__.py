"""Observability helpers for LineageGate."""

from lineagegate.observability.metrics import metrics

__all__ = ["metrics"]
