"""
FastAPI Application Entry Point

Integrates:
  - Case intake webhook
  - Health checks
  - Middleware for logging & error handling

Run: uvicorn main:app --reload --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from webhook import case_intake_router
from config import Config
from infra import bootstrap_infrastructure

# Setup logging
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: startup and shutdown handlers.
    """
    # Startup
    logger.info("=" * 60)
    logger.info(f"{Config.SERVICE_NAME} starting up...")
    logger.info(f"Environment: {Config.ENVIRONMENT}")
    logger.info(f"Enrichment Backend: {Config.ENRICHMENT_BACKEND}")
    logger.info(f"Mail Backend: {Config.MAIL_BACKEND}")
    missing = Config.missing()
    if missing:
        logger.warning(f"Missing configuration: {', '.join(missing)}")
    logger.info(f"Infrastructure: {bootstrap_infrastructure()!r}")
    logger.info("=" * 60)

    yield

    # Shutdown
    logger.info(f"{Config.SERVICE_NAME} shutting down...")


# Create FastAPI app
app = FastAPI(
    title="Case Intake API",
    description="Call-center transcript webhook that opens Salesforce cases",
    version="1.0.0",
    lifespan=lifespan,
)


# Middleware for logging
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests."""
    logger.debug(f"{request.method} {request.url.path}")
    try:
        response = await call_next(request)
        return response
    except Exception as e:
        logger.error(f"Request error: {str(e)}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": "Internal server error"},
        )


# Include routers
app.include_router(case_intake_router)


# Health check endpoints
@app.get("/health/live")
async def health_live():
    """Live health check (Kubernetes liveness probe)."""
    return {"status": "alive"}


@app.get("/health/ready")
async def health_ready():
    """Readiness health check (Kubernetes readiness probe)."""
    missing = Config.missing()
    if missing:
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "missing": missing},
        )
    return {"status": "ready"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": Config.SERVICE_NAME,
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "case_webhook": "POST /webhook",
            "health_live": "GET /health/live",
            "health_ready": "GET /health/ready",
            "config_info": "GET /config/info",
        },
    }


@app.get("/config/info")
async def config_info():
    """Get non-sensitive configuration info."""
    return {
        "environment": Config.ENVIRONMENT,
        "enrichment_backend": Config.ENRICHMENT_BACKEND,
        "mail_backend": Config.MAIL_BACKEND,
        "whatsapp_enabled": Config.WHATSAPP_ENABLED,
        "agent_port": Config.AGENT_PORT,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=Config.AGENT_PORT,
        reload=Config.ENVIRONMENT == "development",
    )
