"""API v1 router aggregation."""

from fastapi import APIRouter

from predictstore.api.v1.predictions import router as predictions_router

api_router = APIRouter()
api_router.include_router(predictions_router)
