# parsing.py
"""
Response decoding and error rewriting.

parse_resp turns a successful HttpResponse into a Decoded value.
parse runs a request and, when the server answers with an error status,
lifts its JSON error body into a RemoteError that carries the HTTP status.
"""

from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable
import json
import logging

from .errors import InvalidJsonResponseError, MissingBodyError, RemoteError, TransportError
from .transport import HttpResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Decoded:
    """A decoded JSON body plus the HTTP status it arrived with. status is not part of value."""

    value: Any
    status: int

    def __getitem__(self, name):
        return self.value[name]

    def get(self, name, default=None):
        if isinstance(self.value, dict):
            return self.value.get(name, default)
        return default


def parse_json(str_or_stream) -> Any:
    """Parse a string, bytes or readable stream as JSON."""
    if hasattr(str_or_stream, "read"):
        return json.load(str_or_stream)
    return json.loads(str_or_stream)


def parse_resp(response: HttpResponse) -> Decoded:
    if response.body is None:
        raise MissingBodyError(response)
    try:
        body = parse_json(response.body)
    except json.JSONDecodeError as e:
        raise InvalidJsonResponseError(response) from e
    return Decoded(value=body, status=response.status)


def _rewrite(e: TransportError) -> RemoteError:
    body = parse_json(e.body)
    if isinstance(body, str):
        return RemoteError(e.status, message=body)
    if isinstance(body, dict):
        return RemoteError(e.status, fields=body)
    return RemoteError(e.status, body=body)


def parse(request: Callable[[], HttpResponse]) -> Decoded:
    """
    Run request and decode its response with parse_resp.
    Error responses with a JSON body are re-raised as RemoteError:
    - JSON string  -> message
    - JSON object  -> fields, merged with status
    - anything else -> body
    If the error body is not JSON the original TransportError is re-raised.
    """
    try:
        response = request()
    except TransportError as e:
        if e.body is None or e.status is None:
            raise
        try:
            rewritten = _rewrite(e)
        except json.JSONDecodeError:
            rewritten = None
        if rewritten is None:
            raise
        logger.debug("rewrote %s error response into %r", e.status, rewritten.to_dict())
        raise rewritten from e
    return parse_resp(response)


def normalized(fn: Callable[..., HttpResponse]) -> Callable[..., Decoded]:
    """Decorator form of parse for functions returning an HttpResponse."""

    @wraps(fn)
    def wrapper(*args, **kwargs):
        return parse(lambda: fn(*args, **kwargs))

    return wrapper
