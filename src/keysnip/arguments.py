# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import logging
import typing

from .commontypes import OddArgumentSupply, PromptFailed
from .snippet.types import Arg, Line

logger = logging.getLogger(__name__)

Ask = collections.abc.Callable[[str], str]


def ask(question: str) -> str:
    try:
        answer = input(f"{question}: ")
    except EOFError as e:
        raise PromptFailed(question) from e
    return answer.strip()


def pair_arguments(tokens: collections.abc.Sequence[str]) -> dict[str, str]:
    """Turn ``[name, value, name, value, ...]`` into a mapping; later pairs win."""
    if len(tokens) % 2:
        raise OddArgumentSupply(tokens)
    return dict(zip(tokens[::2], tokens[1::2]))


def missing_argument(line: Line, values: collections.abc.Mapping[str, str]) -> typing.Optional[str]:
    for part in line:
        if isinstance(part, Arg) and part.name not in values:
            return part.name
    return None


def ask_argument(name: str, defaults: collections.abc.Mapping[str, str], ask: Ask) -> str:
    default = defaults.get(name)
    question = name if default is None else f"{name} (Default: `{default}`)"
    answer = ask(question)
    if answer:
        return answer
    return default if default is not None else ""


def resolve_arguments(
    lines: collections.abc.Sequence[Line],
    defaults: collections.abc.Mapping[str, str],
    supplied: typing.Optional[collections.abc.Mapping[str, str]] = None,
    ask: Ask = ask,
) -> dict[str, str]:
    values = dict(supplied or {})
    for line in lines:
        while (name := missing_argument(line, values)) is not None:
            values[name] = ask_argument(name, defaults, ask)
            logger.debug("Argument %s resolved to %r", name, values[name])
    return values
