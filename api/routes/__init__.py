"""
API route modules.
"""

from api.routes.records import router as records_router
from api.routes.health import router as health_router

__all__ = ["records_router", "health_router"]
