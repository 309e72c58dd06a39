"""API route modules."""

from fastapi import APIRouter

from cyberlab.api.routes.architectures import router as architectures_router
from cyberlab.api.routes.auth import router as auth_router
from cyberlab.api.routes.deployments import router as deployments_router
from cyberlab.api.routes.protocols import router as protocols_router
from cyberlab.api.routes.scenarios import router as scenarios_router
from cyberlab.api.routes.yaml_config import router as yaml_router

router = APIRouter()

router.include_router(auth_router, prefix="/auth", tags=["Auth"])
router.include_router(protocols_router, prefix="/protocols", tags=["Protocols"])
router.include_router(architectures_router, prefix="/architectures", tags=["Architectures"])
router.include_router(scenarios_router, prefix="/scenarios", tags=["Scenarios"])
router.include_router(deployments_router, prefix="/deployments", tags=["Deployments"])
router.include_router(yaml_router, prefix="/yaml", tags=["YAML"])
