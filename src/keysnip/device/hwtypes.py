from __future__ import annotations

import enum
import typing

import msgspec

from ..commontypes import KeysnipError
from .keyboard_consts import KeyCode


class HardwareError(KeysnipError):
    pass


class UnsupportedKeyError(HardwareError):
    def __init__(self, key: Key):
        self.key = key
        super().__init__(f"The keyboard backend cannot send {key!r}")


class KeyPress(enum.IntEnum):
    RELEASED = 0
    PRESSED = 1


class CharKey(msgspec.Struct, frozen=True):
    """A key identified by the character it types, such as ``a`` or ``/``."""

    char: str


Key = typing.Union[KeyCode, CharKey]


class KeyEvent(msgspec.Struct, frozen=True):
    key: Key
    press: KeyPress

    @classmethod
    def pressed(cls, key: Key):
        return cls(key=key, press=KeyPress.PRESSED)

    @classmethod
    def released(cls, key: Key):
        return cls(key=key, press=KeyPress.RELEASED)
