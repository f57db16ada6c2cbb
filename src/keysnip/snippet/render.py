"""Write parsed parts back out in snippet syntax."""
import re
import typing

from ..keys import key_name
from .types import Arg, Delay, KeyCombo, Line, LinePart, Text

# `$@` and `$!` in text are written as their escapes `$@$` and `$!$`, in a single pass
ESCAPED_OPENER = re.compile(r"\$[@!]")


def render_part(part: LinePart, defaults: typing.Optional[typing.Mapping[str, str]] = None) -> str:
    match part:
        case Text(text=text):
            if "$'" in text or "$[" in text:
                raise ValueError(f"{text!r} cannot be written as snippet text")
            return ESCAPED_OPENER.sub(r"\g<0>$", text)
        case Delay(milliseconds=milliseconds):
            return f"$'{milliseconds}$"
        case Arg(name=name):
            if not name or "$" in name or "::" in name:
                raise ValueError(f"{name!r} cannot be written as an argument name")
            if defaults is None or name not in defaults:
                return f"$@{name}$"
            default = defaults[name]
            if name.endswith(":") or "$" in default:
                raise ValueError(f"{name!r} cannot be written with default {default!r}")
            return f"$@{name}::{default}$"
        case KeyCombo(keys=keys):
            return "$!" + "+".join(key_name(key) for key in keys) + "$"
    raise TypeError(f"Unexpected line part {part!r}")


def render_line(line: Line, defaults: typing.Optional[typing.Mapping[str, str]] = None) -> str:
    return "".join(render_part(part, defaults) for part in line)
