from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from weather_tracker.api import routes
from weather_tracker.config import get_settings
from weather_tracker.middleware.request_tracker import RequestTrackerMiddleware
from weather_tracker.schemas.weather import ErrorResponse
from weather_tracker.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Starting Weather Tracker API...",
        extra={"weather_api_url": settings.weather_api_url},
    )

    app.state.http_client = httpx.AsyncClient(timeout=settings.weather_api_timeout)

    yield

    logger.info("Shutting down Weather Tracker API...")

    await app.state.http_client.aclose()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

app.add_middleware(RequestTrackerMiddleware)

Instrumentator().instrument(app).expose(app, endpoint="/prometheus-metrics")

app.include_router(routes.router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report query validation failures as 400 with the common error body."""
    fields = ", ".join(
        ".".join(str(part) for part in err["loc"]) for err in exc.errors()
    )
    logger.warning(
        "Request validation failed",
        extra={"event": "validation_error", "fields": fields, "path": request.url.path},
    )
    body = ErrorResponse(
        error="Invalid request parameters",
        detail=fields,
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(status_code=400, content=body.model_dump())


def run():
    uvicorn.run(
        "weather_tracker.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
