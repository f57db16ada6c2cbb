# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""Tokenizer for the snippet language.

Each logical line is read one character at a time, with one character of lookahead.
The tokenizer is always in exactly one state, which owns the buffers of the part
being accumulated:

    Text      ``$'`` opens Delay, ``$@`` opens Arg, ``$!`` opens KeyCombo
    Delay     digits until ``$``
    Arg       name, then optionally ``::`` and a default, until ``$``
    KeyCombo  ``+`` or space separated key names until ``$``

``$@$`` and ``$!$`` are escapes for the literal text ``$@`` and ``$!``.
"""
from __future__ import annotations

import collections.abc
import dataclasses
import logging
import typing

from ..device.hwtypes import Key
from ..keys import lookup_key
from .defaults import DefaultRegistry
from .diagnostics import DiagnosticKind, Diagnostics
from .lines import logical_lines, physical_lines
from .types import (
    Arg,
    Delay,
    KeyCombo,
    Line,
    LinePart,
    MalformedDelay,
    Snippet,
    Text,
    UndecodableSnippet,
    UnknownKeyToken,
    UnsupportedArglist,
)

logger = logging.getLogger(__name__)

KeyLookup = collections.abc.Callable[[str], Key]

COMBO_SEPARATORS = ("+", " ")


@dataclasses.dataclass
class TextState:
    text: str = ""


@dataclasses.dataclass
class DelayState:
    body: str = ""


@dataclasses.dataclass
class ArgState:
    name: str = ""
    default: typing.Optional[str] = None


@dataclasses.dataclass
class ComboState:
    tokens: list[str] = dataclasses.field(default_factory=lambda: [""])


ParseState = TextState | DelayState | ArgState | ComboState


class LineParser:
    parts: list[LinePart]
    state: ParseState

    def __init__(self, defaults: DefaultRegistry, diagnostics: Diagnostics, lookup: KeyLookup, line_number: int = 1):
        self.defaults = defaults
        self.diagnostics = diagnostics
        self.lookup = lookup
        self.line_number = line_number
        self.parts = []
        self.state = TextState()

    def parse(self, line: str) -> Line:
        pos = 0
        while pos < len(line):
            lookahead = line[pos + 1] if pos + 1 < len(line) else None
            pos += self.step(line[pos], lookahead)
        self.finish()
        return self.parts

    def step(self, ch: str, lookahead: typing.Optional[str]) -> int:
        """Handle one character, returning how many characters were consumed."""
        state = self.state
        match state, ch:
            case TextState(), "$" if lookahead == "'":
                self.begin(DelayState())
                return 2
            case TextState(), "$" if lookahead == "@":
                self.begin(ArgState())
                return 2
            case TextState(), "$" if lookahead == "[":
                raise UnsupportedArglist(self.line_number)
            case TextState(), "$" if lookahead == "!":
                self.begin(ComboState())
                return 2
            case TextState(), _:
                state.text += ch

            case DelayState(), "$":
                self.close_delay(state)
            case DelayState(), _:
                state.body += ch

            case ArgState(name=""), "$":
                # `$@$`; any default typed in between is dropped
                self.reopen_text("$@")
            case ArgState(), "$":
                self.close_arg(state)
            case ArgState(default=None), ":" if lookahead == ":":
                state.default = ""
                return 2
            case ArgState(default=None), _:
                state.name += ch
            case ArgState(), _:
                state.default += ch

            case ComboState(), _ if ch in COMBO_SEPARATORS:
                if state.tokens[-1]:
                    state.tokens.append("")
            case ComboState(), "$":
                self.close_combo(state)
            case ComboState(), _:
                state.tokens[-1] += ch
        return 1

    def begin(self, state: ParseState):
        assert isinstance(self.state, TextState)
        self.flush_text()
        self.state = state

    def flush_text(self):
        text = self.state.text
        if not text:
            return
        if self.parts and isinstance(self.parts[-1], Text):
            text = self.parts.pop().text + text
        self.parts.append(Text(text))

    def reopen_text(self, literal: str = ""):
        text = ""
        if self.parts and isinstance(self.parts[-1], Text):
            text = self.parts.pop().text
        self.state = TextState(text + literal)

    def close_delay(self, state: DelayState):
        if not (state.body.isascii() and state.body.isdigit()):
            raise MalformedDelay(state.body, self.line_number)
        self.parts.append(Delay(int(state.body)))
        self.reopen_text()

    def close_arg(self, state: ArgState):
        if state.default is not None:
            previous = self.defaults.set(state.name, state.default)
            if previous is not None:
                self.diagnostics.record(
                    DiagnosticKind.DUPLICATE_DEFAULT,
                    self.line_number,
                    f"Duplicate default value for argument `{state.name}`. "
                    f"Previous value `{previous}` will be ignored.",
                )
        self.parts.append(Arg(state.name))
        self.reopen_text()

    def close_combo(self, state: ComboState):
        tokens = [token for token in state.tokens if token]
        if not tokens:
            self.reopen_text("$!")
            return
        keys = []
        for token in tokens:
            try:
                keys.append(self.lookup(token))
            except KeyError as e:
                raise UnknownKeyToken(token, self.line_number) from e
        self.parts.append(KeyCombo(tuple(keys)))
        self.reopen_text()

    def finish(self):
        state = self.state
        match state:
            case ArgState(name=""):
                self.diagnostics.record(
                    DiagnosticKind.INCOMPLETE_ARG,
                    self.line_number,
                    "Argument `$@` is incomplete, you might've wanted to complete it or escape it with `$@$`. "
                    'Autocompleting as `$@$` (text "$@").',
                )
                self.reopen_text("$@")
            case ArgState():
                written = state.name if state.default is None else f"{state.name}::{state.default}"
                self.diagnostics.record(
                    DiagnosticKind.INCOMPLETE_ARG,
                    self.line_number,
                    f"Argument `$@{written}` is incomplete, you might've wanted to complete it or escape it with `$@$`. "
                    f"Autocompleting as `$@{written}$` (arg).",
                )
                self.close_arg(state)
            case ComboState():
                tokens = [token for token in state.tokens if token]
                combo = "+".join(f"`{token}`" for token in tokens)
                result = "key combo" if tokens else 'text "$!"'
                self.diagnostics.record(
                    DiagnosticKind.INCOMPLETE_COMBO,
                    self.line_number,
                    f"Key combo `$!{combo}` is incomplete, you might've wanted to complete it or escape it with `$!$`. "
                    f"Autocompleting as `$!{combo}$` ({result}).",
                )
                self.close_combo(state)
            case DelayState():
                self.close_delay(state)
        self.flush_text()
        self.state = TextState()


def parse_line(
    line: str,
    lines: list[Line],
    defaults: DefaultRegistry,
    diagnostics: Diagnostics,
    *,
    line_number: int = 1,
    lookup: KeyLookup = lookup_key,
) -> Line:
    """Tokenize one logical line and append it to ``lines``.

    Default values declared in the line are registered into ``defaults``.
    """
    parsed = LineParser(defaults, diagnostics, lookup, line_number).parse(line)
    lines.append(parsed)
    return parsed


def parse_text(text: str, *, lookup: KeyLookup = lookup_key) -> Snippet:
    lines: list[Line] = []
    defaults = DefaultRegistry()
    diagnostics = Diagnostics()
    for line_number, logical_line in logical_lines(physical_lines(text), diagnostics):
        parse_line(logical_line, lines, defaults, diagnostics, line_number=line_number, lookup=lookup)
    logger.debug("Parsed %d lines declaring %d defaults", len(lines), len(defaults))
    return Snippet(lines=lines, defaults=defaults, diagnostics=diagnostics)


def parse_snippet(stream: typing.BinaryIO, *, lookup: KeyLookup = lookup_key) -> Snippet:
    data = stream.read()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise UndecodableSnippet(e.reason, data[: e.start].count(b"\n") + 1) from e
    return parse_text(text, lookup=lookup)
