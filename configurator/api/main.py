"""FastAPI application factory."""

from __future__ import annotations
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from configurator.config import settings
from configurator.api.exceptions import register_exception_handlers
from configurator.api.routes import router


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="Steel door configurator: width envelope, bill of materials and price",
        version="0.1.0",
    )

    # CORS: the configurator UI runs on its own origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(router, prefix=settings.api_prefix)

    return app


app = create_app()
