"""HTTP preview API."""

from lineagegate.api.router import router

__all__ = ["router"]
