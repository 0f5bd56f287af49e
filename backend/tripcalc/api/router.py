"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from tripcalc.api.routes import (
    users, trips, sharing, shared, expenses,
    cities, admin_cities, admin_users, packing, geocoding
)

api_router = APIRouter()

# Include all route modules
api_router.include_router(users.router)
api_router.include_router(trips.router)
api_router.include_router(sharing.router)
api_router.include_router(shared.router)
api_router.include_router(expenses.router)
api_router.include_router(cities.router)
api_router.include_router(admin_cities.router)
api_router.include_router(admin_users.router)
api_router.include_router(packing.router)
api_router.include_router(geocoding.router)
