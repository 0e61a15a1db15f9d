"""Shared fixtures: a ZendeskAPI wired to an in-memory httpx transport"""

import json

import httpx
import pytest

from services.client import ZendeskAPI

EMAIL = "a@b.com"
TOKEN = "tok123"
HOST = "https://acme.zendesk.com"


def json_response(payload, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(payload).encode())


def echo(request: httpx.Request) -> httpx.Response:
    """Return the request body unchanged"""
    return httpx.Response(200, content=request.content)


@pytest.fixture
def make_api():
    """
    Build a client whose requests go to ``handler``.

    Returns (api, sent) where ``sent`` collects every request issued.
    """
    def _make(handler, error_handler=None, **kwargs):
        sent = []

        def recording(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        api = ZendeskAPI(
            EMAIL,
            TOKEN,
            HOST,
            error_handler,
            transport=httpx.MockTransport(recording),
            **kwargs,
        )
        return api, sent

    return _make
