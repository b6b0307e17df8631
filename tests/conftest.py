import json

import pytest
import urllib3

from slash_command import CommandRequest, ResponseDispatcher

RESPONSE_URL = "https://hooks.slack.com/commands/T0001/1234/abcd"


class FakeResponse:
    def __init__(self, status):
        self.status = status


class FakeHttp:
    """Records POSTs instead of sending them."""

    def __init__(self, status=200, error=None):
        self.status = status
        self.error = error
        self.calls = []

    def request(self, method, url, body=None, headers=None, **kwargs):
        self.calls.append({"method": method, "url": url, "body": body, "headers": headers, **kwargs})
        if self.error is not None:
            raise self.error
        return FakeResponse(self.status)

    @property
    def posted(self):
        return [json.loads(c["body"]) for c in self.calls]


@pytest.fixture
def http():
    return FakeHttp()


@pytest.fixture
def dispatcher(http):
    return ResponseDispatcher(http)


@pytest.fixture
def request_factory():
    def make(**overrides):
        fields = {
            "token": "s1",
            "team_id": "T0001",
            "team_domain": "example",
            "channel_id": "C2147483705",
            "channel_name": "general",
            "user_id": "U2147483697",
            "user_name": "steve",
            "command": "/weather",
            "text": "94070",
            "response_url": RESPONSE_URL,
        }
        fields.update(overrides)
        return CommandRequest(**fields)
    return make


@pytest.fixture
def transport_error():
    return urllib3.exceptions.ProtocolError("Connection aborted.")
