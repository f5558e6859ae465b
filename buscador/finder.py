# The CourseFinder fetches a course listing page and pulls the course names out of it.
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
import requests
import soupsieve

from buscador.errors import ValidationError
from buscador.http_client import HttpClient
from buscador.models import FinderConfig, DEFAULT_SELECTOR


class CourseFinder:
    """
    Given a URL, the CourseFinder downloads the page, selects every element matching
    its CSS selector and returns their text, in the order they appear on the page.
    """
    def __init__(self, http_client: HttpClient, selector: str = DEFAULT_SELECTOR, *, check_status: bool = True):
        self.http_client = http_client
        self.selector = selector
        self.check_status = check_status
        # Compiled up front so a bad selector fails here and not after the request
        try:
            self._pattern = soupsieve.compile(selector)
        except soupsieve.SelectorSyntaxError as error:
            raise ValidationError(f"Invalid selector '{selector}': {error}") from error

    @classmethod
    def from_config(cls, config: FinderConfig) -> "CourseFinder":
        http_client = HttpClient(config.base_url, timeout=config.timeout)
        return cls(http_client, config.selector, check_status=config.check_status)

    def __enter__(self) -> "CourseFinder":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.http_client.close()

    def search(self, url: str) -> list[str]:
        """
        1. GETs the page (relative URLs are resolved against the client's base URI).
        2. Parses the body into a fresh soup, nothing is shared between calls.
        3. Returns the full text of every element matching the selector.

        No matches is not an error, it just gives an empty list.
        """
        response = self.http_client.get(url, check_status=self.check_status)
        soup = self._make_soup(response)
        # get_text() with no arguments keeps the raw text, nested tags included
        return [element.get_text() for element in self._pattern.select(soup)]

    def _make_soup(self, response: requests.Response) -> BeautifulSoup:
        # Let BeautifulSoup sniff the encoding unless the server told us
        charset = _charset_from_headers(response)
        try:
            return BeautifulSoup(response.content, "lxml", from_encoding=charset)
        except ParserRejectedMarkup:
            return BeautifulSoup(response.content, "html.parser", from_encoding=charset)


def _charset_from_headers(response: requests.Response) -> str | None:
    content_type = response.headers.get("Content-Type", "")
    for parameter in content_type.split(";")[1:]:
        key, _, value = parameter.partition("=")
        if key.strip().lower() == "charset":
            return value.strip().strip("'\"") or None
    return None
