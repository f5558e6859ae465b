from buscador.finder import CourseFinder
from buscador.http_client import HttpClient
from buscador.models import FinderConfig
from buscador.errors import (
    ScraperError,
    ValidationError,
    NetworkError,
    HTTPStatusError
)

__all__ = [
    "CourseFinder",
    "HttpClient",
    "FinderConfig",
    "ScraperError",
    "ValidationError",
    "NetworkError",
    "HTTPStatusError",
]
