"""
Public API routes - service health and display settings
"""

from fastapi import APIRouter, Depends

from vowsync.core.config import CURRENCIES, DisplayConfig, get_display_config, settings
from vowsync.utils.responses import success_response

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "app": settings.APP_NAME}


@router.get("/config/display")
async def display_config(config: DisplayConfig = Depends(get_display_config)):
    """Currency, timezone and thresholds the server classifies with"""
    return success_response(
        message="Display configuration",
        data={"config": config, "currencies": list(CURRENCIES.values())}
    )
