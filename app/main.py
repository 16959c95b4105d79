"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from app.api import router as api_router
from app.api.exception_handlers import register_exception_handlers
from app.core.config import get_settings

settings = get_settings()

app = FastAPI(
    title=settings.APP_TITLE,
    description="Loyalty program maturity self-assessment: catalog, scoring and reports",
    version="0.1.0",
)

register_exception_handlers(app)


@app.get("/health")
async def health_check() -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse(content={"status": "ok"}, status_code=200)


# Include quiz API router
app.include_router(api_router, prefix=settings.API_PREFIX)
