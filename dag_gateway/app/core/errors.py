"""
Error taxonomy for the gateway.

Services raise the narrow exceptions below; endpoints translate them
into :class:`GatewayError`, which the application renders as
``{"success": false, "error": <message>}`` with the carried status
code.  Memo decoding failures are not represented here because they
never leave the decoder.
"""

from typing import Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class GatewayError(Exception):
    """An error that maps directly onto an HTTP response."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class NotReadyError(GatewayError):
    """The ledger session failed to initialise at startup."""

    def __init__(self, message: str = "Network not ready.") -> None:
        super().__init__(status.HTTP_503_SERVICE_UNAVAILABLE, message)


class LedgerError(Exception):
    """Transport or HTTP failure reported by the ledger client."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UpstreamFetchError(Exception):
    """A transaction page could not be fetched; the whole walk is aborted."""


class InvalidRequestError(ValueError):
    """The caller supplied an unusable request body."""


class InsufficientFundsError(ValueError):
    """The requested transfer exceeds the wallet balance."""


def describe_error(exc: BaseException, default: str = "Unknown error") -> str:
    """Best-effort human readable message for ``exc``."""
    message = str(exc).strip()
    if message:
        return message
    return f"{default} ({type(exc).__name__})"


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.message},
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures in the gateway's error shape."""
    errors = exc.errors()
    message = "Invalid request body."
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        detail = first.get("msg", "invalid value")
        message = f"Invalid request body: {location + ': ' if location else ''}{detail}"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "error": message},
    )
