from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import time
import logging
from cardealer import __version__
from cardealer.api.api_router import api_router
from cardealer.core.config import settings
from cardealer.core.exceptions import ApiError
from cardealer.db.session import init_db

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events"""
    logger.info("Starting %s...", settings.PROJECT_NAME)
    init_db()
    logger.info("%s started", settings.PROJECT_NAME)

    yield

    logger.info("%s shutdown complete", settings.PROJECT_NAME)


async def api_error_handler(request: Request, exc: ApiError):
    logger.warning(f"{request.method} {request.url.path} - {exc.status_code}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail}
    )


async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"}
    )


async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.info(f"{request.method} {request.url.path} - {response.status_code} - {process_time:.4f}s")
    return response


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Vehicle inventory API for the car dealer.",
        version=__version__,
        lifespan=lifespan
    )

    app.middleware("http")(add_process_time_header)
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/", tags=["Root"])
    async def read_root():
        """A simple health check endpoint."""
        return {"status": "ok", "message": f"Welcome to {settings.PROJECT_NAME}!", "version": __version__}

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Detailed health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": time.time(),
            "service": settings.PROJECT_NAME,
            "version": __version__
        }

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("cardealer.main:app", host="0.0.0.0", port=8000)
