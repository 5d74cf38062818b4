"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from youtube_cli.models.envelope import ErrorPayload

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class YouTubeCLIError(Exception):
    """Base exception for youtube-cli."""

    exit_code: int = 1


class RequestError(YouTubeCLIError):
    """A failed request to the YouTube API.

    ``url`` is the full request URL and ``cause`` is either the structured
    ``error`` object from the response body or the raw response text.
    """

    def __init__(self, url: str, cause: Any = None) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"{url}: {self.reason}")

    @property
    def reason(self) -> str:
        if isinstance(self.cause, dict):
            message = self.cause.get("message")
            code = self.cause.get("code")
            if message and code:
                return f"{code} {message}"
            if message:
                return str(message)
        return str(self.cause)


class RequestConnectionError(RequestError):
    """The request never produced a response."""

    exit_code = 2


class APIError(RequestError):
    """The API answered with a non-2xx status and a JSON error body.

    ``payload`` is the validated error object when the body had one.
    """

    exit_code = 3

    def __init__(self, url: str, cause: Any = None, payload: ErrorPayload | None = None) -> None:
        self.payload = payload
        super().__init__(url, cause)

    @property
    def reason(self) -> str:
        if self.payload is None or not self.payload.message:
            return super().reason
        text = self.payload.message
        if self.payload.code:
            text = f"{self.payload.code} {text}"
        if self.payload.reasons:
            text += " (" + ", ".join(self.payload.reasons) + ")"
        return text


class ResponseParseError(RequestError):
    """The response body was not JSON, or not the expected shape.

    ``cause`` holds the raw text or the decoded body.
    """

    exit_code = 3


class ResourceNotFoundError(RequestError):
    """The lookup succeeded but returned no items."""

    exit_code = 4


class ConfigurationError(YouTubeCLIError):
    """Missing or invalid configuration."""

    exit_code = 6


class InvalidCountError(YouTubeCLIError, ValueError):
    """A paginated fetch was asked for fewer than one item."""

    exit_code = 7

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__("Cannot fetch less than 1.")


class UnknownResourceTypeError(YouTubeCLIError, KeyError):
    """No descriptor is registered for the requested resource type."""

    exit_code = 7

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown resource type: {name}")

    def __str__(self) -> str:
        return f"Unknown resource type: {self.name}"


def error_handler(func: F) -> F:
    """Decorator that catches YouTubeCLIError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except YouTubeCLIError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
