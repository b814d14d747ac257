"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from loan_fee_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from loan_fee_gateway.api.v1 import fees
from loan_fee_gateway.domain.fee_tables import Term
from loan_fee_gateway.infrastructure.observability.logging import setup_logging
from loan_fee_gateway.config import Settings, settings

setup_logging(settings.log_level)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Build the fee service.

    `app_settings` replaces the environment-loaded settings for the /health
    report; the fee calculator itself is provided per request by
    `api.dependencies.get_fee_calculator`.
    """
    config = app_settings or settings

    app = FastAPI(
        title=config.service_name,
        description="Quotes the one-off fee for 12 and 24 month loans",
        version="0.1.0",
    )

    # Last added runs first: request ID is set before metrics observe the call
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {
            "status": "ok",
            "service": config.service_name,
            "terms": [int(term) for term in Term],
            "strict_bounds": config.strict_bounds,
        }

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(fees.router, prefix="/v1", tags=["fees"])

    return app


app = create_app()
