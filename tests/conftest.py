from unittest.mock import MagicMock

import pytest
import requests
from requests import Response, Session

from solidpod.client import Client, Endpoint
from solidpod.pod import Pod


@pytest.fixture
def pod_base_config():
    """Required parameters for pod configuration"""
    return {
        'POD_URL': 'http://pod.example.com/alice/',
    }


@pytest.fixture
def endpoint(pod_base_config):
    return Endpoint(url=pod_base_config['POD_URL'])


@pytest.fixture
def client(endpoint) -> Client:
    return Client(endpoint=endpoint)


@pytest.fixture
def pod(client) -> Pod:
    return Pod(client=client)


@pytest.fixture
def monkeypatch_request(monkeypatch):
    def _monkeypatch_request(response):
        if isinstance(response, type):
            response = response()
        monkeypatch.setattr(requests.Session, 'request', lambda *args, **kwargs: response)
    return _monkeypatch_request


@pytest.fixture
def mock_responses(client, monkeypatch):
    """Replace the client's session with a mock that answers each request
    from a dictionary keyed by `(method, url)`. Values are `(status, body)`
    or `(status, body, headers)` tuples; unregistered requests get a 404.
    Returns the mock session, so tests can inspect `request.call_args_list`."""
    def _mock_responses(responses: dict):
        def _request(method, url, **kwargs):
            status, body, *rest = responses.get((method, url), (404, 'Not Found'))
            headers = rest[0] if rest else {}
            return MagicMock(
                spec=Response,
                status_code=status,
                reason=None,
                text=body,
                content=body.encode('utf-8'),
                headers=headers,
            )

        mock_session = MagicMock(spec=Session)
        mock_session.request.side_effect = _request
        monkeypatch.setattr(client, 'session', mock_session)
        return mock_session
    return _mock_responses


@pytest.fixture
def requests_made():
    def _requests_made(mock_session, *methods: str) -> list[tuple[str, str, dict]]:
        """List of `(method, url, kwargs)` for each request sent through the
        mock session, optionally limited to the given methods."""
        sent = [(c.args[0], c.args[1], c.kwargs) for c in mock_session.request.call_args_list]
        return [r for r in sent if not methods or r[0] in methods]
    return _requests_made
