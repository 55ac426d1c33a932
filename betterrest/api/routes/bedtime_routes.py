# betterrest/api/routes/bedtime_routes.py
from functools import lru_cache

from fastapi import APIRouter, Depends

from betterrest.config.config_manager import ConfigManager
from betterrest.core.models.data_models import BedtimeRequest, BedtimeResult, FormOptions
from betterrest.core.services.bedtime_service import BedtimeService


# Dependency. The model is loaded once per process and shared read-only.
@lru_cache(maxsize=1)
def get_bedtime_service():
    return BedtimeService.from_config(ConfigManager())


router = APIRouter(
    prefix="/bedtime",
    tags=["Bedtime"],
    responses={404: {"description": "Not found"}}
)


@router.get("/options", response_model=FormOptions)
async def get_form_options(service: BedtimeService = Depends(get_bedtime_service)):
    """Defaults and allowed values for the bedtime form"""
    return service.get_form_options()


@router.post("/estimate", response_model=BedtimeResult)
async def estimate_bedtime(request: BedtimeRequest, service: BedtimeService = Depends(get_bedtime_service)):
    """Estimate the ideal bedtime. Estimation failures are reported in the body, not as 5xx."""
    return service.estimate(request)
