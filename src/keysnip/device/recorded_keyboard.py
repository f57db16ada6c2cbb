# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import logging
import pathlib
import time
import typing

import msgspec

from .hwtypes import CharKey, Key, KeyEvent, KeyPress
from .keyboard_consts import KeyCode
from .types import Keyboard

logger = logging.getLogger(__name__)


class RecordedEvent(msgspec.Struct, frozen=True):
    offset: float
    event: KeyEvent


class Recorder:
    """Keyboard which records every event, optionally passing them on to a real keyboard.

    Without a wrapped keyboard this is a dry run; with ``echo`` each event is printed.
    """

    def __init__(self, wrapped: typing.Optional[Keyboard] = None, echo: bool = False):
        self.wrapped = wrapped
        self.echo = echo
        self.zero_time = None
        self.events: list[RecordedEvent] = []

    @property
    def key_events(self) -> list[KeyEvent]:
        return [recorded.event for recorded in self.events]

    def save_events(self, path: pathlib.Path):
        path.write_bytes(msgspec.json.encode(self.events))

    def _record(self, event: KeyEvent):
        now = time.monotonic()
        if self.zero_time is None:
            self.zero_time = now
        self.events.append(RecordedEvent(offset=now - self.zero_time, event=event))
        if self.echo:
            print(describe_event(event))

    def press(self, key: Key):
        self._record(KeyEvent.pressed(key))
        if self.wrapped is not None:
            self.wrapped.press(key)

    def release(self, key: Key):
        self._record(KeyEvent.released(key))
        if self.wrapped is not None:
            self.wrapped.release(key)

    def click(self, key: Key):
        self.press(key)
        self.release(key)

    def type_character(self, character: str):
        self._record(KeyEvent.pressed(CharKey(char=character)))
        self._record(KeyEvent.released(CharKey(char=character)))
        if self.wrapped is not None:
            self.wrapped.type_character(character)

    def focus_cycle(self):
        if self.wrapped is not None:
            self.wrapped.focus_cycle()
        else:
            logger.info("Dry run; not switching windows")


def describe_event(event: KeyEvent) -> str:
    action = "press" if event.press is KeyPress.PRESSED else "release"
    if isinstance(event.key, KeyCode):
        return f"{action} {event.key.name}"
    return f"{action} {event.key.char!r}"
