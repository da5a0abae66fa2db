"""Exception handlers for FastAPI integration."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from permission_guard.exceptions import AuthorizationError

__all__ = ["install_error_handlers"]


def install_error_handlers(app: FastAPI) -> None:
    """Install an ``AuthorizationError`` handler on a FastAPI app.

    Denials become JSON responses carrying ``exc.status`` (401 by default)
    and a body of ``{"detail", "code", "data"}``.

    Example::

        app = FastAPI()
        install_error_handlers(app)
    """

    @app.exception_handler(AuthorizationError)
    async def authorization_error_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: AuthorizationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status,
            content={
                "detail": exc.message,
                "code": exc.code,
                "data": jsonable_encoder(exc.data),
            },
        )
