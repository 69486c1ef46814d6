"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from configurator.errors import DegenerateGeometryError
from configurator.api.schemas import ErrorResponse


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(DegenerateGeometryError)
    async def degenerate_geometry_handler(
        request: Request, exc: DegenerateGeometryError
    ) -> JSONResponse:
        body = ErrorResponse(
            error="Door leaf too small to manufacture",
            error_type="degenerate_geometry",
            details=[{"message": e} for e in exc.errors],
        )
        return JSONResponse(status_code=422, content=body.model_dump())
