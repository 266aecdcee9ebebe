import pytest
import requests

from jdb_client import connect

ENDPOINT = "http://127.0.0.1:6001"


def make_response(status, body, url=ENDPOINT, content_type="application/json"):
    """Build a requests.Response the way requests' HTTPAdapter does, without the network."""
    r = requests.Response()
    r.status_code = status
    if isinstance(body, bytes):
        r._content = body
    else:
        r._content = body.encode("utf-8") if body is not None else b""
    r.url = url
    if content_type is not None:
        r.headers["Content-Type"] = content_type
    r.encoding = requests.utils.get_encoding_from_headers(r.headers)
    return r


class FakeSession:
    """Stands in for requests: records every GET and answers from a queue."""

    def __init__(self):
        self.calls = []
        self.replies = []

    def reply(self, status, body, **kwargs):
        self.replies.append(make_response(status, body, **kwargs))
        return self

    def fail(self, exc):
        self.replies.append(exc)
        return self

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        reply.url = url
        return reply

    @property
    def last_params(self):
        return self.calls[-1][1]["params"]


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session):
    return connect(ENDPOINT, "n1", session=session)
