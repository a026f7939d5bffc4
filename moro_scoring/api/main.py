"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from moro_scoring.api.middleware import RequestIDMiddleware, MetricsMiddleware
from moro_scoring.api.v1 import scoring, applications
from moro_scoring.infrastructure.observability.logging import setup_logging
from moro_scoring.config import settings

setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="MORO Financing Scoring",
        description="Financing eligibility scoring and application intake",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Last added = first executed
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(scoring.router, prefix="/v1", tags=["scoring"])
    app.include_router(applications.router, prefix="/v1", tags=["applications"])

    return app


app = create_app()
