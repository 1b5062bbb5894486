from fastapi import FastAPI

from cafe_finder.entrypoints.http.exception_handlers import register_exception_handlers
from cafe_finder.entrypoints.http.routes.cafes import router as cafes_router
from cafe_finder.entrypoints.http.routes.health import router as health_router
from cafe_finder.infra.config import log_level
from cafe_finder.infra.logging_config import setup_logging


def build_app() -> FastAPI:
    setup_logging(log_level())

    app = FastAPI(
        title="Cafe Finder API",
        description="""
        Read-only lookup of cafés by city.

        ## Features
        - List cafés of a city in catalog order
        - Limit the number of cafés returned
        - Case-insensitive search by café name

        ## Error Handling
        Validation errors return 400 with a plain-text message.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(cafes_router)

    return app


app = build_app()
