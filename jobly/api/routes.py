"""
Main API router that includes all endpoint routes
"""

from fastapi import APIRouter
from .endpoints import jobs

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(jobs.router, prefix="/jobs", tags=["jobs"])
