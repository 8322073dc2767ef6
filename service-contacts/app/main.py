"""Contacts service main application."""

import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api.routes import router as api_router
from .runtime.metrics import get_metrics_collector
from libs.common.config import ContactsConfig
from libs.common.logging import configure_logging, log_performance
from libs.contacts.lookup import ContactLookupService
from libs.contacts.store import create_contact_store

logger = structlog.get_logger("contacts_service")

SERVICE_NAME = "contacts-service"
SERVICE_VERSION = "1.0.0"

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    config = ContactsConfig()
    app.state.config = config
    configure_logging(SERVICE_NAME, config.crm_log_level, config.crm_log_format, env=config.crm_env)

    logger.info("Starting contacts service", seed_file=config.crm_seed_file)

    store = create_contact_store(config.crm_seed_file)
    app.state.lookup_service = ContactLookupService(store)
    app.state.metrics_collector = get_metrics_collector(SERVICE_NAME)

    base_url = f"http://localhost:{config.crm_port}"
    logger.info("CRM API server running", url=base_url, contacts=len(store))
    logger.info("API documentation available", url=f"{base_url}{app.docs_url}")
    for contact in store:
        logger.info(
            "Sample contact",
            email=contact.email,
            name=f"{contact.first_name} {contact.last_name}",
            phone_number=contact.phone_number,
        )

    yield

    # Shutdown
    logger.info("Contacts service shutdown complete")


app = FastAPI(
    title="CRM Contact API",
    description="Read-only lookup of CRM contacts by email address",
    version=SERVICE_VERSION,
    docs_url="/api-docs",
    redoc_url=None,
    openapi_url="/openapi.json",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ContactsConfig().cors_origin_list(),
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api")


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Add processing time header to responses."""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    """Collect metrics for HTTP requests and turn unhandled errors into 500s."""
    start_time = time.time()

    try:
        response = await call_next(request)
        status_code = response.status_code
    except Exception:
        logger.exception("Unhandled error", method=request.method, path=request.url.path)
        status_code = 500
        response = JSONResponse(
            status_code=500,
            content={"error": "Internal server error"}
        )

    duration = time.time() - start_time

    if hasattr(app.state, 'metrics_collector'):
        app.state.metrics_collector.record_http_request(
            method=request.method,
            endpoint=request.url.path,
            status=status_code,
            duration=duration
        )
    log_performance("http_request", duration * 1000, path=request.url.path, status=status_code)

    return response


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint."""
    if hasattr(app.state, 'metrics_collector'):
        metrics_data = app.state.metrics_collector.get_metrics()
        return Response(content=metrics_data, media_type="text/plain")
    else:
        return Response(content="# No metrics available\n", media_type="text/plain")


@app.get("/")
async def root(request: Request):
    """Root endpoint."""
    return {
        "message": "CRM Contact API Server",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "endpoints": {
            "GET /api/contacts/by-email": "Get contact by email address",
            "GET /api/contacts": "Get all contacts",
            "GET /api-docs": "Swagger UI documentation",
            "GET /openapi.json": "OpenAPI specification",
            "GET /health": "Health check",
            "GET /metrics": "Prometheus metrics",
        },
        "sampleContacts": request.app.state.lookup_service.store.emails(),
    }


if __name__ == "__main__":
    config = ContactsConfig()
    uvicorn.run(
        "app.main:app",
        host=config.crm_host,
        port=config.crm_port,
        log_level=config.crm_log_level.lower()
    )
