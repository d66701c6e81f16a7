from fastapi import APIRouter
from .routes import vehicles_routes

api_router = APIRouter()

api_router.include_router(vehicles_routes.router, prefix="/vehicles", tags=["Vehicles"])
