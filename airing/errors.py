"""Exceptions raised by the airing pipeline.

Every failure is terminal for the run. The CLI catches ``AiringError`` once
and prints ``str(error)``.
"""


class AiringError(Exception):
    """Base class: a short context label plus the underlying cause."""

    context = "Error"

    def __init__(self, cause):
        super().__init__(cause)
        self.cause = cause

    def __str__(self):
        return f"{self.context}: {self.cause}"


class RequestBuildError(AiringError):
    """Raised when the request payload cannot be serialized."""

    context = "Error creating request"


class TransportError(AiringError):
    """Raised on DNS, connect, TLS, timeout or HTTP status failures."""

    context = "Error making request"


class ResponseReadError(AiringError):
    """Raised when the response body stream fails mid-read."""

    context = "Error reading response"


class DecodeError(AiringError):
    """Raised when the payload is not the expected JSON envelope."""

    context = "Error parsing response"
