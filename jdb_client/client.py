# client.py
"""
Client for the jdb key-value store.
Deps: requests  ->  pip install requests

Every operation is a single HTTP GET on <endpoint>/<operation> with its
arguments as query params:

    from jdb_client import connect

    db = connect("http://127.0.0.1:6001", "client-1")
    db.put("x", "1")
    db.cas("x", "1", "2")   # True
    db.get("x")             # "2"
"""

from typing import Any, Dict, Optional
from threading import Lock
import logging

import requests

from . import config
from .parsing import Decoded, parse, parse_resp
from .transport import HttpResponse, http_get
from .urls import url

logger = logging.getLogger(__name__)

Options = Optional[Dict[str, Any]]


class Client:
    """
    A handle on one jdb server.
    endpoint, client_id and timeout_ms never change; the request counter is the
    only mutable state and belongs to this handle alone.
    """

    def __init__(self, endpoint: str, client_id: str, timeout_ms: int = config.DEFAULT_TIMEOUT,
                 defaults: Options = None, session: Any = None):
        self.endpoint = endpoint
        self.client_id = client_id
        self.timeout_ms = timeout_ms
        self.defaults = dict(defaults or {})  # extra query params sent with every request
        self.session = session if session is not None else requests
        self._id = 0
        self._id_lock = Lock()

    def __repr__(self):
        return f"Client(endpoint={self.endpoint!r}, client_id={self.client_id!r}, timeout_ms={self.timeout_ms})"

    # ---------------------- Request ids ----------------------
    def next_request_id(self) -> int:
        with self._id_lock:
            self._id += 1
            return self._id

    # ---------------------- Dispatch ----------------------
    def _request(self, op: str, key: str, params: Dict[str, Any], opts: Options) -> HttpResponse:
        # requests silently drops None query params
        missing = sorted(name for name, v in {"key": key, **params}.items() if v is None)
        if missing:
            raise ValueError(f"{op}: {', '.join(missing)} must not be None")
        call_opts = http_opts(self, opts)
        query = dict(call_opts["params"])
        query.update({"client": self.client_id, "id": self.next_request_id(), "key": key})
        query.update(params)
        call_opts["params"] = query
        logger.debug("%s %s id=%s key=%r", op, self.endpoint, query["id"], key)
        return http_get(self.session, url(self, [op]), **call_opts)

    def _decode_field(self, response: HttpResponse, name: str) -> Any:
        return parse_resp(response).get(name)

    # ---------------------- Operations ----------------------
    def get_raw(self, key: str, opts: Options = None) -> Optional[str]:
        """GET /get  returns the undecoded response body."""
        return self._request("get", key, {}, opts).body

    def get(self, key: str, opts: Options = None) -> Any:
        """GET /get  returns the stored value for key, None if the server sent none."""
        return self._decode_field(self._request("get", key, {}, opts), "value")

    def put(self, key: str, value: Any, opts: Options = None) -> Decoded:
        """GET /put  stores value under key."""
        return parse(lambda: self._request("put", key, {"value": value}, opts))

    def delete(self, key: str, opts: Options = None) -> Decoded:
        """GET /delete  removes key from the cluster."""
        return parse(lambda: self._request("delete", key, {}, opts))

    def cas_raw(self, key: str, current: Any, new: Any, opts: Options = None) -> Optional[str]:
        """GET /cas  returns the undecoded response body."""
        return self._request("cas", key, {"current": current, "new": new}, opts).body

    def cas(self, key: str, current: Any, new: Any, opts: Options = None) -> bool:
        """
        GET /cas  the server replaces the value of key with new iff it currently equals current.
        One remote attempt, no retry. Returns whether the swap happened.
        """
        response = self._request("cas", key, {"current": current, "new": new}, opts)
        return bool(self._decode_field(response, "replaced"))

    def append(self, key: str, value: Any, opts: Options = None) -> Decoded:
        """GET /append  appends value to key."""
        return parse(lambda: self._request("append", key, {"value": value}, opts))


def connect(endpoint: Optional[str] = None, client_id: Optional[str] = None,
            opts: Options = None, session: Any = None) -> Client:
    """
    Create a client for the given server. No I/O happens here.

        db = connect("http://127.0.0.1:6001", "client-id")

    Options:
    timeout   How long, in ms, to wait for requests (default config.DEFAULT_TIMEOUT)
    Any other option is sent as a query param with every request.
    """
    opts = dict(opts or {})
    timeout = opts.pop(config.TIMEOUT_OPTION, None) or config.DEFAULT_TIMEOUT
    return Client(
        endpoint or config.DEFAULT_ENDPOINT,
        client_id or config.DEFAULT_CLIENT_ID,
        timeout_ms=int(timeout),
        defaults=opts,
        session=session,
    )


def http_opts(client: Client, opts: Options = None) -> Dict[str, Any]:
    """
    Build requests call options for one call.
    timeout applies to both connect and read; the other options become query params.
    """
    opts = {**client.defaults, **(opts or {})}
    timeout_s = (opts.get(config.TIMEOUT_OPTION) or client.timeout_ms) / 1000.0
    return {
        "timeout": (timeout_s, timeout_s),
        "params": {k: v for k, v in opts.items() if k not in config.RESERVED_OPTIONS},
        "allow_redirects": True,  # the server redirects some side effects
    }


# ---------------------- Module-level operations ----------------------
def next_request_id(client: Client) -> int:
    return client.next_request_id()


def get(client: Client, key: str, opts: Options = None) -> Any:
    return client.get(key, opts)


def get_raw(client: Client, key: str, opts: Options = None) -> Optional[str]:
    return client.get_raw(key, opts)


def put(client: Client, key: str, value: Any, opts: Options = None) -> Decoded:
    return client.put(key, value, opts)


def delete(client: Client, key: str, opts: Options = None) -> Decoded:
    return client.delete(key, opts)


def cas(client: Client, key: str, current: Any, new: Any, opts: Options = None) -> bool:
    return client.cas(key, current, new, opts)


def cas_raw(client: Client, key: str, current: Any, new: Any, opts: Options = None) -> Optional[str]:
    return client.cas_raw(key, current, new, opts)


def append(client: Client, key: str, value: Any, opts: Options = None) -> Decoded:
    return client.append(key, value, opts)
