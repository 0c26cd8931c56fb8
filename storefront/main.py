"""
FastAPI Application Entry Point - Storefront API
"""
import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from storefront import __version__
from storefront.config import settings
from storefront.database import init_db
from storefront.exceptions import AppError
from storefront.utils.logging import configure_logging
from storefront.api import auth, orders, products, health, users

logger = structlog.get_logger(__name__)

# Create FastAPI application
app = FastAPI(
    title="Storefront API",
    description="E-commerce backend: product catalog and order lifecycle",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(products.router)
app.include_router(orders.router)

# Prometheus metrics
Instrumentator().instrument(app).expose(app)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Operational errors: send the message with its status"""
    logger.warning(
        "request.failed",
        status_code=exc.status_code,
        message=exc.message,
        path=request.url.path,
        method=request.method
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"status": exc.status, "message": exc.message}
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed ids and bodies are a 400, not FastAPI's default 422"""
    messages = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    message = f"Invalid input data. {'. '.join(messages)}"
    logger.warning("request.invalid", path=request.url.path, method=request.method, errors=messages)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"status": "fail", "message": message}
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Anything else is a 500; details stay out of production responses"""
    logger.exception("request.error", path=request.url.path, method=request.method)
    message = "Something went wrong" if settings.is_production else str(exc) or "Something went wrong"
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"status": "error", "message": message}
    )


@app.on_event("startup")
def startup_event():
    """Configure logging and initialize database on startup"""
    configure_logging(settings.LOG_LEVEL, json_logs=settings.is_production)
    logger.info("service.starting", service=settings.SERVICE_NAME, environment=settings.ENVIRONMENT)
    init_db()
    logger.info("service.ready", service=settings.SERVICE_NAME, port=settings.SERVICE_PORT)


@app.on_event("shutdown")
def shutdown_event():
    """Cleanup on shutdown"""
    logger.info("service.stopping", service=settings.SERVICE_NAME)
