from __future__ import annotations

import dataclasses
import typing

import msgspec

from ..commontypes import KeysnipError
from ..device.hwtypes import Key
from .defaults import DefaultRegistry
from .diagnostics import Diagnostics


class Text(msgspec.Struct, frozen=True):
    text: str


class Delay(msgspec.Struct, frozen=True):
    milliseconds: int


class Arg(msgspec.Struct, frozen=True):
    name: str


class KeyCombo(msgspec.Struct, frozen=True):
    keys: tuple[Key, ...]


LinePart = Text | Delay | Arg | KeyCombo
Line = list[LinePart]


@dataclasses.dataclass(kw_only=True)
class Snippet:
    lines: list[Line]
    defaults: DefaultRegistry
    diagnostics: Diagnostics

    @property
    def argument_names(self) -> list[str]:
        seen = {}
        for line in self.lines:
            for part in line:
                if isinstance(part, Arg):
                    seen.setdefault(part.name, None)
        return list(seen)


def is_comment(line: Line) -> bool:
    # only literal text can start a comment; a line opening with an argument never is one
    return bool(line) and isinstance(line[0], Text) and line[0].text.startswith("##")


class SnippetError(KeysnipError):
    def __init__(self, message: str, line: typing.Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class MalformedDelay(SnippetError):
    def __init__(self, body: str, line: typing.Optional[int] = None):
        self.body = body
        super().__init__(f"Delay `$'{body}$` must be a whole number of milliseconds", line)


class UnknownKeyToken(SnippetError):
    def __init__(self, token: str, line: typing.Optional[int] = None):
        self.token = token
        super().__init__(f"Unknown key `{token}` in key combo", line)


class UnsupportedArglist(SnippetError):
    def __init__(self, line: typing.Optional[int] = None):
        super().__init__("Argument lists (`$[`) are not supported", line)


class UndecodableSnippet(SnippetError):
    def __init__(self, reason: str, line: typing.Optional[int] = None):
        self.reason = reason
        super().__init__(f"Snippet is not valid UTF-8: {reason}", line)
