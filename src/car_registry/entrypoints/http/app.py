from fastapi import FastAPI

from car_registry.entrypoints.http.exception_handlers import register_exception_handlers
from car_registry.entrypoints.http.routes.cars import router as cars_router
from car_registry.entrypoints.http.routes.health import router as health_router
from car_registry.infra.db.config import log_level
from car_registry.infra.logging import setup_logging


def build_app() -> FastAPI:
    setup_logging(log_level())

    app = FastAPI(
        title="Car Registry API",
        description="""
        Storage API for cars keyed by UUID.

        ## Features
        - Create cars (server-assigned id) or create-or-update at a known id
        - Fetch a car by id
        - List cars with pagination and sorting
        - Count and delete cars

        ## Error Handling
        All errors return structured JSON responses with error codes.
        See the error response schemas in the API documentation.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(cars_router, prefix="/v1")

    return app


app = build_app()
