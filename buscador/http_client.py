from urllib.parse import urljoin

import requests

from buscador.errors import NetworkError, HTTPStatusError

_CLIENT_TIMEOUT = object()


class HttpClient:
    """
        Thin wrapper around a requests.Session that knows an optional base URI,
        so callers can ask for '/cursos-online-programacao/php' and get the full page.
        Failures come back as our own errors, nothing is retried.
    """

    def __init__(self, base_uri: str | None = None, *, timeout: float | None = 15, headers: dict | None = None, session: requests.Session | None = None) -> None:
        self.base_uri = base_uri
        self.timeout = timeout
        # A session keeps the connection to the site open between searches
        self.session = session if session is not None else requests.Session()
        # Merged into every request, never written into the session
        self.headers = dict(headers or {})

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def resolve(self, url: str) -> str:
        """
        Resolves `url` against the base URI the same way a browser resolves a link,
        absolute URLs are returned untouched.
        """
        if not self.base_uri:
            return url
        return urljoin(self.base_uri, url)

    def _request(self, method: str, url: str, *, check_status: bool = True, headers: dict | None = None, timeout=_CLIENT_TIMEOUT, allow_redirects: bool = True, **kwargs) -> requests.Response:
        """
        Internal helper to make HTTP requests with consistent error handling.
        Callers should prefer the `get` wrapper.
        """
        full_url = self.resolve(url)
        if timeout is _CLIENT_TIMEOUT:
            timeout = self.timeout
        request_headers = {**self.headers, **(headers or {})} or None
        try:
            response = self.session.request(method=method, url=full_url, headers=request_headers, timeout=timeout, allow_redirects=allow_redirects, **kwargs)
        except requests.exceptions.Timeout as error:
            raise NetworkError(f"Timeout during {method.upper()} {full_url}") from error
        except requests.exceptions.ConnectionError as error:
            raise NetworkError(f"Connection error during {method.upper()} {full_url}") from error
        # Bad URLs, missing schemas, redirect loops and the like
        except requests.exceptions.RequestException as error:
            raise NetworkError(f"Request failed during {method.upper()} {full_url}: {error}") from error

        if check_status and not 200 <= response.status_code < 300:
            raise HTTPStatusError(status_code=response.status_code, url=full_url)
        return response

    def get(self, url: str, *, check_status: bool = True, headers: dict | None = None, timeout=_CLIENT_TIMEOUT) -> requests.Response:
        return self._request("GET", url, check_status=check_status, headers=headers, timeout=timeout)
