"""Failures raised while fetching from the feed service."""


class FetchError(Exception):
    """Base class for every failed fetch.

    Callers that do not care about the kind catch this class only.
    """

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class TransportFailure(FetchError):
    """Connection, timeout or I/O failure, or a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, path=path)
        self.status_code = status_code


class EmptyResponse(FetchError):
    """The service answered with success but sent no body."""


class DecodeFailure(FetchError):
    """The body is not JSON or does not have the expected shape."""
