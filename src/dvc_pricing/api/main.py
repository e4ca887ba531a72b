"""FastAPI application for the DVC points and pricing engine.

This package provides REST endpoints for:
- Health checks
- Resort metadata
- Points quotes and guest pricing
- Ready-stay caps and owner payout options
- Payout stages
"""

import os
from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mangum import Mangum

from dvc_pricing import __version__
from dvc_pricing.api.exceptions import register_exception_handlers
from dvc_pricing.api.middleware.correlation import CorrelationIdMiddleware
from dvc_pricing.api.routes import (
    payouts_router,
    points_router,
    ready_stays_router,
    resorts_router,
)
from dvc_pricing.utils.logging import configure_logging, get_logger

configure_logging(os.environ.get("LOG_LEVEL", "INFO"))
logger = get_logger(__name__)

app = FastAPI(
    title="DVC Pricing API",
    description="REST API for DVC points quotes, ready-stay price caps and owner payouts",
    version=__version__,
)

# Configure CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Correlation-ID"],
)
app.add_middleware(CorrelationIdMiddleware)

register_exception_handlers(app)

app.include_router(resorts_router, prefix="/api")
app.include_router(points_router, prefix="/api")
app.include_router(ready_stays_router, prefix="/api")
app.include_router(payouts_router, prefix="/api")


@app.get("/api/ping")
async def ping() -> dict[str, Any]:
    """Root health check endpoint at /api/ping."""
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "service": "dvc-pricing-api",
        "version": __version__,
    }


# Lambda handler - Mangum wraps FastAPI for AWS Lambda + API Gateway
handler = Mangum(app, lifespan="off")


def run_server(host: str = "0.0.0.0", port: int = 8080, reload: bool = True) -> None:
    """Run the FastAPI server.

    Args:
        host: Host to bind to (default: 0.0.0.0)
        port: Port to listen on (default: 8080)
        reload: Enable hot reload for development (default: True)
    """
    import uvicorn

    if reload:
        # Use string reference for reload mode (uvicorn requirement)
        uvicorn.run("dvc_pricing.api.main:app", host=host, port=port, reload=True)
    else:
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
