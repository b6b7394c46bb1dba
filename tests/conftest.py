import json

import pytest
import requests

from apollo import ClientConfig


def make_response(status_code=200, json_data=None, text="", url="https://api.apollo.io/test"):
    """A real requests.Response carrying json_data (or raw text when json_data is None)."""
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    body = json.dumps(json_data) if json_data is not None else text
    response._content = body.encode("utf-8")
    return response


class FakeSession:
    """Records every request and answers with a fixed response or exception."""

    def __init__(self, response=None, error=None):
        self.response = response if response is not None else make_response(json_data={})
        self.error = error
        self.calls = []
        self.closed = False

    def request(self, method, url, headers=None, params=None, json=None, timeout=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": headers,
                "params": params,
                "json": json,
                "timeout": timeout,
            }
        )
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def config():
    return ClientConfig(api_key="test_api_key")


@pytest.fixture
def make_session():
    def _make(json_data=None, status_code=200, text="", error=None):
        if error is not None:
            return FakeSession(error=error)
        return FakeSession(make_response(status_code=status_code, json_data=json_data, text=text))

    return _make
