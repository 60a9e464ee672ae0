"""
Fallback reply for failed requests.

The chat widget renders whatever `answer` it receives, so an unexpected
server error is turned into a chat-shaped body carrying an apology instead
of a bare error string. Exception details stay in the server log.
"""

from __future__ import annotations

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

logger = logging.getLogger("faq.errors")

ERROR_ANSWER = (
    "Sorry, something went wrong on our end. Please try again in a moment, "
    "or contact the office directly."
)


def error_reply() -> dict:
    """Body returned with every 500 response."""
    return {
        "error": "internal_server_error",
        "answer": ERROR_ANSWER,
        "matched": False,
        "score": None,
    }


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Log the failure and answer with `error_reply()`.

    The chat session id, when the client sent one as a path parameter,
    is included in the log line so the transcript can be found.
    """
    session_id = request.path_params.get("session_id")
    logger.error(
        "FAQ request %s %s failed (session=%s): %s",
        request.method,
        request.url.path,
        session_id or "-",
        type(exc).__name__,
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content=error_reply())
