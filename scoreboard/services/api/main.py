"""
FastAPI entry point

1. Router registration
2. Middleware (CORS, trace ID, request timing)
3. Health checks
"""
import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from scoreboard.services.api.dependencies import get_view_model
from scoreboard.services.api.routers import scores
from scoreboard.services.view_model import SportsViewModel
from scoreboard.shared.config import get_settings
from scoreboard.shared.log_config import request_id_ctx, setup_logging

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.service.api.log_level)
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    yield
    logger.info(f"Shutting down {settings.app_name}")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Sports scores API",
    docs_url="/docs" if settings.service.api.enable_docs else None,
    redoc_url="/redoc" if settings.service.api.enable_docs else None,
    lifespan=lifespan,
)


# ============ Middleware ============

@app.middleware("http")
async def trace_id_middleware(request: Request, call_next) -> Response:
    """
    Trace ID middleware

    1. Reuse the client's X-Request-ID or generate one
    2. Expose it through request_id_ctx for logging
    3. Echo it back in the response headers along with the timing
    """
    request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
    token = request_id_ctx.set(request_id)
    start_time = time.time()

    try:
        logger.info(
            f"Request started: {request.method} {request.url.path}",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "client_ip": request.client.host if request.client else "unknown",
            }
        )

        response = await call_next(request)

        duration_ms = int((time.time() - start_time) * 1000)
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time-Ms"] = str(duration_ms)

        logger.info(
            f"Request completed: {response.status_code} in {duration_ms}ms",
            extra={
                "request_id": request_id,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            }
        )

        return response

    except Exception as e:
        duration_ms = int((time.time() - start_time) * 1000)
        logger.error(
            f"Request failed: {str(e)} in {duration_ms}ms",
            extra={
                "request_id": request_id,
                "error": str(e),
                "duration_ms": duration_ms,
            },
            exc_info=True
        )
        raise

    finally:
        request_id_ctx.reset(token)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============ Routes ============

app.include_router(scores.router)


# ============ Health checks ============

@app.get("/health")
async def health_check():
    return {
        "status": "ok",
        "version": settings.app_version,
        "service": "scoreboard-api"
    }


@app.get("/ready")
async def readiness_check(view_model: SportsViewModel = Depends(get_view_model)):
    """Ready once the view model holds data"""
    data_state = "ok" if view_model.has_loaded else "not_loaded"
    if view_model.error_message:
        data_state = "error"

    return {
        "status": "ready" if data_state == "ok" else "not_ready",
        "version": settings.app_version,
        "checks": {
            "api": "ok",
            "data": data_state,
        }
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.service.api.host,
        port=settings.service.api.port
    )
