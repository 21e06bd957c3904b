import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import uvicorn

from nc_news.api.api import api_router
from nc_news.core.config import settings
from nc_news.core.errors import ApiError
from nc_news.db.base import Base
from nc_news.db.session import engine

def configure_logging(level_name: str) -> None:
    # force: config.py has already called basicConfig at INFO
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(level=level, force=True)


configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application is starting up")
    if settings.ENVIRONMENT != "test":
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created")
    yield
    logger.info("Application is shutting down")


app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url="/api/openapi.json",
    lifespan=lifespan
)

app.include_router(api_router, prefix="/api")
logger.info("API router included")

# CORS middleware
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info("CORS middleware added")


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Invalid request body for {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"message": "Bad request - invalid request body"})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={"message": "Route not found"})
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc.detail)}, headers=exc.headers)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {str(exc)}", exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info(f"Received request: {request.method} {request.url}")
    response = await call_next(request)
    logger.info(f"Response status: {response.status_code}")
    return response


def run_server():
    environment = settings.ENVIRONMENT
    logger.info(f"Running server in {environment} environment")

    if environment == "development":
        uvicorn.run("nc_news.main:app", host="0.0.0.0", port=settings.PORT, reload=True)
    else:
        port = int(os.getenv("PORT", settings.PORT))
        uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    run_server()
