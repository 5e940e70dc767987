"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from app.api.routes import health, events, bookings

api_router = APIRouter(prefix="/api")
api_router.include_router(health.router)
api_router.include_router(events.router)
api_router.include_router(bookings.router)
