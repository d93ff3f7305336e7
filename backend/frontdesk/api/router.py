"""
Central API router that aggregates all route modules.
"""

from fastapi import APIRouter
from frontdesk.api.routes import availability, bookings, guests, rooms

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(bookings.router)
api_router.include_router(rooms.router)
api_router.include_router(guests.router)
api_router.include_router(availability.router)
