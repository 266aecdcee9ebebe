# errors.py
"""
Error taxonomy for the jdb client.
Every failure an operation can raise is a JdbError carrying an ErrorKind.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(Enum):
    MISSING_BODY = "missing-body"
    INVALID_JSON_RESPONSE = "invalid-json-response"
    REMOTE = "remote"
    TRANSPORT = "transport"


class JdbError(Exception):
    kind: ErrorKind


class MissingBodyError(JdbError):
    """The server answered without a body."""

    kind = ErrorKind.MISSING_BODY

    def __init__(self, response):
        super().__init__(f"response with status {response.status} has no body")
        self.response = response


class InvalidJsonResponseError(JdbError):
    """The server answered with a body that is not JSON. Keeps the raw response."""

    kind = ErrorKind.INVALID_JSON_RESPONSE

    def __init__(self, response):
        super().__init__(f"response with status {response.status} is not valid JSON: {response.body!r}")
        self.response = response


class TransportError(JdbError):
    """
    The HTTP call itself failed.
    - status/body are set when the server answered with an error status.
    - Both are None for network errors, timeouts and refused connections.
    """

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, status: Optional[int] = None, body: Optional[str] = None, response=None):
        super().__init__(message)
        self.status = status
        self.body = body
        self.response = response


class RemoteError(JdbError):
    """
    The server rejected a request and explained why in its error body.
    Exactly one of message, fields or body describes the error:
    - message: the body was a JSON string
    - fields:  the body was a JSON object, its keys are readable as attributes;
               its own "message" or "body" keys fill those attributes
    - body:    the body was any other JSON value
    """

    kind = ErrorKind.REMOTE

    def __init__(self, status: int, message: Optional[str] = None,
                 fields: Optional[Dict[str, Any]] = None, body: Any = None):
        self.status = status
        self.fields = dict(fields) if fields is not None else None
        if self.fields is not None:
            message = self.fields.get("message") if message is None else message
            body = self.fields.get("body") if body is None else body
        self.message = message
        self.body = body
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.fields is not None:
            return f"[{self.status}] {self.fields}"
        if self.message is not None:
            return f"[{self.status}] {self.message}"
        return f"[{self.status}] {self.body!r}"

    def to_dict(self) -> Dict[str, Any]:
        """The normalized error map; status is always the HTTP status."""
        if self.fields is not None:
            return {**self.fields, "status": self.status}
        if self.message is not None:
            return {"message": self.message, "status": self.status}
        return {"body": self.body, "status": self.status}

    def __getattr__(self, name):
        # only reached for names not set in __init__
        fields = self.__dict__.get("fields") or {}
        if name in fields:
            return fields[name]
        raise AttributeError(name)
