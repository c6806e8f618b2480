"""Decoding of raw HTTP responses into result envelopes."""

import contextlib
import json
from typing import Any

from wd_remote.errors import ErrorCode
from wd_remote.remote.messages import HttpResponse


def _reject_constant(name: str) -> float:
    msg = f"{name} is not valid JSON"
    raise ValueError(msg)


def parse_http_response(response: HttpResponse) -> Any:  # noqa: ANN401
    """Turn a response into a ``{"status", "value"}`` envelope.

    A body that parses as JSON is the envelope and is returned as-is, whatever
    the HTTP status. Any other body is wrapped in an envelope whose status is
    derived from the HTTP status code.
    """
    with contextlib.suppress(ValueError):
        return json.loads(response.body, parse_constant=_reject_constant)

    status = ErrorCode.SUCCESS
    if response.status >= 400:
        # 404 means the server does not know the command
        status = ErrorCode.UNKNOWN_COMMAND if response.status == 404 else ErrorCode.UNKNOWN_ERROR
    return {"status": status, "value": response.body.replace("\r\n", "\n")}
