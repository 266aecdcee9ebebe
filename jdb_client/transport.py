# transport.py
"""
Thin HTTP layer over requests.
Turns a requests response into an HttpResponse and every requests failure into a TransportError.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional
import logging

import requests

from .errors import TransportError

logger = logging.getLogger(__name__)


@dataclass
class HttpResponse:
    status: int
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None  # None when the server sent no payload


def _decode_body(r: requests.Response) -> Optional[str]:
    """Body as text: the charset named in Content-Type, UTF-8 when there is none."""
    if not r.content:
        return None
    content_type = r.headers.get("Content-Type", "")
    encoding = r.encoding if "charset" in content_type.lower() and r.encoding else "utf-8"
    return r.content.decode(encoding, errors="replace")


def _to_response(r: requests.Response) -> HttpResponse:
    return HttpResponse(
        status=r.status_code,
        headers=dict(r.headers),
        body=_decode_body(r),
    )


def http_get(session: Any, url: str, **call_opts) -> HttpResponse:
    """
    GET url with the given call options (params, timeout, allow_redirects).
    Raises TransportError on an error status or on any network failure.
    """
    try:
        r = session.get(url, **call_opts)
        r.raise_for_status()  # Will raise for bad status (4xx or 5xx)
    except requests.HTTPError as e:
        resp = _to_response(e.response)
        raise TransportError(
            f"GET {url} failed with status {resp.status}",
            status=resp.status, body=resp.body, response=resp,
        ) from e
    except requests.RequestException as e:
        logger.debug("GET %s failed: %s", url, e)
        raise TransportError(f"GET {url} failed: {e}") from e
    return _to_response(r)
