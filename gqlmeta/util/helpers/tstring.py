# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 pygaindalf Rui Pinheiro

from string.templatelib import Interpolation, Template
from typing import Literal


def _convert(value: object, conversion: Literal["a", "r", "s"] | None) -> object:
    match conversion:
        case "a":
            return ascii(value)
        case "r":
            return repr(value)
        case "s":
            return str(value)
        case _:
            return value


def tstring_as_fstring(template: Template) -> str:
    """Render a t-string the way the equivalent f-string would have been rendered.

    >>> name = "Post"
    >>> tstring_as_fstring(t"Processing {name!r}")
    "Processing 'Post'"
    """
    parts: list[str] = []
    for item in template:
        match item:
            case str() as s:
                parts.append(s)
            case Interpolation(value, _, conversion, format_spec):
                parts.append(format(_convert(value, conversion), format_spec))
    return "".join(parts)
