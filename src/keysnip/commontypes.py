# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import typing


class KeysnipError(Exception):
    pass


class TargetError(KeysnipError):
    pass


class SettingsError(KeysnipError):
    pass


class ArgumentError(KeysnipError):
    pass


class OddArgumentSupply(ArgumentError):
    def __init__(self, tokens: typing.Sequence[str]):
        self.tokens = tuple(tokens)
        super().__init__(
            f"Arguments must be given as name/value pairs, got {len(self.tokens)} values: {' '.join(self.tokens)}"
        )


class PromptFailed(ArgumentError):
    def __init__(self, question: str):
        self.question = question
        super().__init__(
            f"Input ended before {question!r} was answered; end of input is not taken as an empty answer"
        )


class UnresolvedArgument(ArgumentError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Argument `{name}` has no value")
