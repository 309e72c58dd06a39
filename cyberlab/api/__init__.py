"""API router initialization."""

from fastapi import APIRouter

from cyberlab.api.routes import router as routes_router

router = APIRouter()
router.include_router(routes_router, prefix="/api")
