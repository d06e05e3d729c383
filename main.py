"""
VowSync - FastAPI Backend
Main application entry point
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from vowsync.core.config import settings
from vowsync.core.exceptions import VowSyncError
from vowsync.api import routes_bar_orders, routes_finance, routes_guests, routes_items, routes_public, routes_vendors
from vowsync.utils.responses import error_response

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Table view-models and status badges for wedding planning",
    version="1.0.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(VowSyncError)
async def vowsync_error_handler(request: Request, exc: VowSyncError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
    return error_response(
        message=exc.message,
        error_code=exc.error_code,
        details=exc.details,
        status_code=422
    )


# Include routers
app.include_router(routes_public.router, tags=["public"])
app.include_router(routes_guests.router, prefix="/guests", tags=["guests"])
app.include_router(routes_items.router, prefix="/items", tags=["items"])
app.include_router(routes_vendors.router, prefix="/vendors", tags=["vendors"])
app.include_router(routes_finance.router, prefix="/finance", tags=["finance"])
app.include_router(routes_bar_orders.router, prefix="/bar-orders", tags=["bar-orders"])

# Note: Run this ASGI app directly with Uvicorn or Hypercorn. For Gunicorn,
# use `uvicorn.workers.UvicornWorker` instead of wrapping the app.

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="127.0.0.1",
        port=8000,
        reload=True
    )
