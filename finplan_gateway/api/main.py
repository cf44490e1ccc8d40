"""FastAPI application factory"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from finplan_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from finplan_gateway.api.v1 import dashboard, goals, investments, loans
from finplan_gateway.infrastructure.observability.logging import setup_logging
from finplan_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="FinPlan Gateway",
        description="Goal SIP, home loan and investment allocation calculations",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers under the paths the front end calls
    app.include_router(goals.router, prefix="/api", tags=["goals"])
    app.include_router(loans.router, prefix="/api", tags=["home-loan"])
    app.include_router(investments.router, prefix="/api", tags=["investment-plan"])
    app.include_router(dashboard.router, prefix="/api", tags=["dashboard"])

    return app


app = create_app()
