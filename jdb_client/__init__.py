"""Client library for the jdb key-value store."""

from .client import (
    Client,
    append,
    cas,
    cas_raw,
    connect,
    delete,
    get,
    get_raw,
    http_opts,
    next_request_id,
    put,
)
from .errors import (
    ErrorKind,
    InvalidJsonResponseError,
    JdbError,
    MissingBodyError,
    RemoteError,
    TransportError,
)
from .parsing import Decoded, normalized, parse, parse_json, parse_resp
from .transport import HttpResponse, http_get
from .urls import as_key_seq, base_url, encode_key_seq, url

__version__ = "0.1.0"
