"""HTTP request/response envelopes exchanged with the remote end.

Both render to a canonical HTTP/1.1-style block for trace logging:

    POST /session/abc/url HTTP/1.1
    accept: application/json; charset=utf-8

    {"url":"http://example.com"}
"""

import json
from collections.abc import Mapping
from typing import Any

import httpx

ACCEPT_JSON = "application/json; charset=utf-8"


def dump_json(data: Any) -> str:  # noqa: ANN401
    """Serialize a payload the way it goes on the wire."""
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def headers_to_string(headers: httpx.Headers) -> str:
    """Render headers one per line as ``name: value`` with lower-cased names."""
    return "\n".join(f"{name}: {value}" for name, value in headers.multi_items())


class HttpRequest:
    """A partial request: only the path on the server is known, not the full URL."""

    def __init__(self, method: str, path: str, data: Any = None) -> None:  # noqa: ANN401
        """Initialize a request.

        Args:
            method: HTTP method to use.
            path: Path on the server, relative to the server's command root.
            data: Non-serialized JSON payload.

        """
        self.method = method
        self.path = path
        self.data = data
        self.headers = httpx.Headers({"Accept": ACCEPT_JSON})

    def __str__(self) -> str:
        ret = f"{self.method} {self.path} HTTP/1.1\n{headers_to_string(self.headers)}\n\n"
        if self.data is not None:
            ret += dump_json(self.data)
        return ret


class HttpResponse:
    """A response received from the remote end. Header lookups are case-insensitive."""

    def __init__(self, status: int, headers: Mapping[str, str] | httpx.Headers, body: str) -> None:
        self.status = status
        self.headers = httpx.Headers({name.lower(): value for name, value in headers.items()})
        self.body = body

    def __str__(self) -> str:
        ret = f"HTTP/1.1 {self.status}\n{headers_to_string(self.headers)}\n\n"
        if self.body:
            ret += self.body
        return ret
