"""Typed exceptions, API error classification and the CLI error decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class PTCGError(Exception):
    """Base exception for ptcg-cli."""

    exit_code: int = 1


class APIError(PTCGError):
    """Failure reported by the API in an error envelope."""

    label = "API Error"

    def __init__(self, code: int, message: str = "") -> None:
        self.code = code
        self.message = message
        super().__init__(f"{self.label}: {message}")


class BadRequestError(APIError):
    """The request was unacceptable, often due to a bad query parameter."""

    label = "Bad Request"
    exit_code = 2


class RequestFailedError(APIError):
    """The parameters were valid but the request failed."""

    label = "Request Failed"
    exit_code = 3


class ForbiddenError(APIError):
    """The API key does not permit this request."""

    label = "Request Forbidden"
    exit_code = 4


class NotFoundError(APIError):
    """The requested resource doesn't exist."""

    label = "Not Found"
    exit_code = 5


class TooManyRequestsError(APIError):
    """The rate limit has been exceeded."""

    label = "Too Many Requests"
    exit_code = 6


class ServerError(APIError):
    """The API failed on its end (500-504)."""

    label = "Server Error"
    exit_code = 7


class DecodeFailedError(PTCGError):
    """The response body could not be decoded into an envelope."""

    exit_code = 8

    def __init__(self, detail: str = "") -> None:
        msg = "Failed to decode the response body"
        super().__init__(f"{msg}: {detail}" if detail else msg)


class RequestError(PTCGError):
    """Transport failure before any response body was available."""

    exit_code = 9


class ConfigurationError(PTCGError):
    """Missing or invalid configuration."""

    exit_code = 10


_CODE_TO_ERROR: dict[int, type[APIError]] = {
    400: BadRequestError,
    402: RequestFailedError,
    403: ForbiddenError,
    404: NotFoundError,
    429: TooManyRequestsError,
    500: ServerError,
    501: ServerError,
    502: ServerError,
    503: ServerError,
    504: ServerError,
}


def classify_error(code: int, message: str) -> APIError:
    """Map an API error code to its exception; unknown codes are bad requests."""
    return _CODE_TO_ERROR.get(code, BadRequestError)(code, message)


def error_handler(func: F) -> F:
    """Decorator that catches PTCGError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except PTCGError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
