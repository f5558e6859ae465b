import pytest
import requests


@pytest.fixture
def make_response():
    """Builds a real requests.Response without touching the network."""
    def _make(body, status_code: int = 200, content_type: str | None = "text/html; charset=utf-8", url: str = "https://www.alura.com.br/"):
        response = requests.Response()
        response.status_code = status_code
        response._content = body.encode("utf-8") if isinstance(body, str) else body
        if content_type is not None:
            response.headers["Content-Type"] = content_type
        response.url = url
        return response
    return _make


@pytest.fixture
def serve(monkeypatch):
    """
    Replaces client.session.request so it returns the given response (or raises the
    given exception) and records every call it receives.
    """
    def _serve(client, outcome):
        calls = []

        def fake_request(method, url, **kwargs):
            calls.append({"method": method, "url": url, **kwargs})
            if isinstance(outcome, Exception):
                raise outcome
            return outcome

        monkeypatch.setattr(client.session, "request", fake_request)
        return calls
    return _serve
