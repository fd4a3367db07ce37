"""
Cross-origin gate for the HTTP application.

Requests without an Origin header are allowed. Requests declaring an origin
must match one of the configured accepted origins exactly, otherwise they
are rejected with 403 before reaching any route. Access-control headers and
preflight answers for accepted origins come from Starlette's CORSMiddleware.
"""

from typing import Awaitable, Callable, Iterable, Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config.settings import settings
from app.utils.logger import get_logger, log_warning

logger = get_logger(__name__)

ALLOWED_METHODS = ["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"]


def is_origin_allowed(origin: Optional[str],
                      allowed_origins: Iterable[str]) -> bool:
    """
    Decide whether a request origin may access the API.

    Args:
        origin: Value of the Origin header, None when absent.
        allowed_origins: Accepted origins, compared as exact strings.

    Returns:
        True for absent origins and listed origins, False otherwise.
    """
    if not origin:
        return True
    return origin in allowed_origins


async def cors_gate(request: Request,
                    call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """
    HTTP middleware rejecting requests from origins outside the allow-list.
    """
    origin = request.headers.get("origin")

    if not is_origin_allowed(origin, settings.accepted_origins):
        log_warning(logger, "Origin rejected by CORS",
                    {"origin": origin, "method": request.method, "path": request.url.path})
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"message": "Not allowed by CORS"},
            headers={"Vary": "Origin"},
        )

    return await call_next(request)


def install_cors(app: FastAPI) -> None:
    """
    Register CORS handling on the application.

    The gate is added last so it wraps CORSMiddleware: rejected preflights
    get the gate's 403 instead of the library's 400.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.accepted_origins,
        allow_methods=ALLOWED_METHODS,
        allow_headers=["*"],
    )
    app.middleware("http")(cors_gate)
