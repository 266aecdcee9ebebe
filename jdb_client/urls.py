# urls.py
from typing import Iterable, List, Union
from urllib.parse import quote

KeySeq = Union[str, Iterable[str]]


def as_key_seq(key: KeySeq) -> List[str]:
    """A flat key is a one-element key sequence."""
    if isinstance(key, str):
        return [key]
    return [str(k) for k in key]


def base_url(client) -> str:
    """Base url for all jdb requests, e.g. "http://127.0.0.1:6001"."""
    return client.endpoint


def encode_key_seq(key_seq: KeySeq) -> str:
    """Percent-encode each segment and join them into a url path."""
    return "/".join(quote(segment, safe="") for segment in as_key_seq(key_seq))


def url(client, key_seq: KeySeq) -> str:
    """
    The url for a key sequence under the client's endpoint.

    url(client, ["key", "foo"])  ->  "http://127.0.0.1:6001/key/foo"
    """
    return f"{base_url(client)}/{encode_key_seq(key_seq)}"
