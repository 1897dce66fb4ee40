"""FastAPI application entry point."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fixed_assets.api.routes import basis, reports, schedules
from fixed_assets.config import settings
from fixed_assets.errors import AssetEngineError

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Fixed Asset Depreciation",
    description="Depreciation schedules and fixed asset reports",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(schedules.router)
app.include_router(reports.router)
app.include_router(basis.router)


@app.exception_handler(AssetEngineError)
async def asset_engine_error_handler(request: Request, exc: AssetEngineError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={
            "detail": exc.message,
            "error": type(exc).__name__,
            "context": exc.context,
        },
    )


@app.get("/health")
async def health():
    return {"status": "ok"}
