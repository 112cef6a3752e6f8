from typing import Any


class RelayError(Exception):
    """Base error for every failure the relay reports to its caller.

    Carries the HTTP status to answer with and the ``{error, details}``
    body shape shared by both endpoints.
    """

    status_code: int = 500

    def __init__(self, error: str, details: Any = None, status_code: int | None = None):
        super().__init__(error)
        self.error = error
        self.details = details
        if status_code is not None:
            self.status_code = status_code

    def to_body(self) -> dict:
        body = {"error": self.error}
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(RelayError):
    """A required query parameter is missing or blank."""

    status_code = 400


class UpstreamError(RelayError):
    """The YouTube API answered with a non-success status."""

    def __init__(self, status_code: int, details: Any = None):
        super().__init__("YouTube API Error", details=details, status_code=status_code)


class NotFoundError(RelayError):
    """The YouTube API answered successfully but with no items."""

    status_code = 404


class TransportError(RelayError):
    """Network or decode failure while talking to the YouTube API."""

    status_code = 500

    def __init__(self, details: str | None = None):
        super().__init__("Something went wrong", details=details)
