"""Infrastructure-level errors."""


class HTTPClientError(Exception):
    """Transport failure or non-success HTTP status."""

    def __init__(self, url: str, reason: str, status_code: int | None = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Request to {url} failed: {reason}")
