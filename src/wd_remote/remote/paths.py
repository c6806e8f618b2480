"""Substitution of command parameters into resource path templates."""

import re
from collections.abc import Mapping
from typing import Any

from wd_remote.errors import InvalidArgumentError

# Key of the id field in a serialized element reference
ELEMENT_KEY = "ELEMENT"

_SEGMENT = re.compile(r"/:(\w+)\b")


def build_path(template: str, parameters: Mapping[str, Any]) -> tuple[str, dict[str, Any]]:
    """Replace each ``/:name`` segment of ``template`` with the parameter of the same name.

    An element reference (a mapping with an ``ELEMENT`` entry) is spliced in as its bare id.
    The input mapping is left untouched.

    Returns:
        The substituted path and the parameters that were not consumed by it.

    Raises:
        InvalidArgumentError: A segment has no matching parameter.

    """
    remaining = dict(parameters)

    def substitute(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in remaining:
            raise InvalidArgumentError(f"Missing required parameter: {key}")
        value = remaining.pop(key)
        if isinstance(value, Mapping) and value.get(ELEMENT_KEY):
            value = value[ELEMENT_KEY]
        return f"/{value}"

    return _SEGMENT.sub(substitute, template), remaining
