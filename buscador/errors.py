class ScraperError(Exception):
    """Base exception for all scraper-related errors."""
    pass


class ValidationError(ScraperError):
    """Raised for a bad finder setup: a blank or malformed CSS selector, a base URL that is not http(s) or a non-positive timeout."""
    pass


class NetworkError(ScraperError):
    """Raised for connectivity and timeout issues when making HTTP requests."""
    pass


class HTTPStatusError(ScraperError):
    """Raised when an HTTP request returns an unexpected status code."""

    def __init__(self, status_code: int | None, url: str, message: str | None = None):
        self.status_code = status_code
        self.url = url
        super().__init__(message or f"HTTP error {status_code} for URL: {url}")
