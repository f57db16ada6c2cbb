# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import typing

from .hwtypes import Key


class Keyboard(typing.Protocol):
    def press(self, key: Key) -> None:
        ...

    def release(self, key: Key) -> None:
        ...

    def click(self, key: Key) -> None:
        ...

    def type_character(self, character: str) -> None:
        ...

    def focus_cycle(self) -> None:
        """Switch to the previously focused window, away from our own terminal."""
        ...
