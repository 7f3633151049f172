"""Custom exceptions for the news reader."""


class FetchError(Exception):
    """Raised when the latest news cannot be fetched."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NetworkError(FetchError):
    """Raised when the request never got a response (connectivity, DNS, timeout)."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        self.original_error = original_error
        super().__init__(message)


class HttpStatusError(FetchError):
    """Raised when the news API answers with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"News API error: {status_code}")


class DecodeError(FetchError):
    """Raised when the response body is not JSON or not shaped like the news envelope."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        self.original_error = original_error
        super().__init__(message)
