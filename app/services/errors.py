class ExternalServiceError(Exception):
    """GitHub answered with something other than a usable 2xx response."""

    error_label = "GitHub API Error"

    def __init__(self, message: str, *, status_code: int = 502) -> None:
        super().__init__(message)
        self.status_code = status_code


class NetworkError(ExternalServiceError):
    """GitHub could not be reached at all (connect failure, timeout)."""

    error_label = "Network Error"

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=503)
