"""
Access log middleware.

Times every request and hands one AccessEvent to the app's access
logger once the response is ready. Method and path are also bound to
structlog contextvars for the duration of the request, so every log
line emitted while handling it carries them.
"""

import time
from typing import Awaitable, Callable

import structlog
from fastapi import Request, Response

from core.access_log import AccessEvent, AccessOutcome


def _outcome_for(request: Request, status_code: int) -> AccessOutcome:
    """Outcome set by an exception handler, else derived from the status."""
    outcome = getattr(request.state, "outcome", None)
    if outcome is not None:
        return outcome
    return AccessOutcome.SUCCESS if status_code < 400 else AccessOutcome.ERROR


def _emit(request: Request, status_code: int, started: float) -> None:
    access_logger = getattr(request.app.state, "access_logger", None)
    if access_logger is None:
        return

    access_logger.emit(
        AccessEvent(
            operation=getattr(request.state, "operation", None),
            record_id=getattr(request.state, "record_id", None),
            outcome=_outcome_for(request, status_code),
            duration_ms=(time.perf_counter() - started) * 1000,
            method=request.method,
            path=request.url.path,
            status_code=status_code,
        )
    )


async def access_log_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """HTTP middleware emitting one access event per request."""
    started = time.perf_counter()
    structlog.contextvars.bind_contextvars(
        method=request.method,
        path=request.url.path,
    )

    try:
        response = await call_next(request)
    except Exception:
        request.state.outcome = AccessOutcome.ERROR
        _emit(request, 500, started)
        raise
    finally:
        structlog.contextvars.unbind_contextvars("method", "path")

    _emit(request, response.status_code, started)
    return response
