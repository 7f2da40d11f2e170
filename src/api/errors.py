"""Turn pipeline failures into the API's JSON error envelope."""

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import Request
from fastapi.responses import JSONResponse

from collection.errors import NotFoundError, ValidationError
from common.logger import get_logger

logger = get_logger(__name__)


class ErrorResponse(Exception):
    """An error that is returned to the client as ``{error, details?}``."""

    def __init__(self, status_code: int, error: str, details: str | None = None):
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details

    def to_dict(self) -> dict[str, str]:
        body = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body


@contextmanager
def error_envelope(failure_message: str) -> Iterator[None]:
    """Map exceptions raised inside the block to an ErrorResponse.

    Missing parameters become 400 and absent sub-resources 404, both with
    their own message. Everything else is a 500 carrying
    ``failure_message`` with the underlying message as details.
    """
    try:
        yield
    except (ValidationError, NotFoundError) as e:
        raise ErrorResponse(e.status_code, str(e)) from e
    except Exception as e:
        logger.error(f"{failure_message}: {e}", exc_info=True)
        raise ErrorResponse(500, failure_message, str(e) or "Unknown error") from e


async def error_response_handler(request: Request, exc: ErrorResponse) -> JSONResponse:
    """FastAPI exception handler rendering ErrorResponse as JSON."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
