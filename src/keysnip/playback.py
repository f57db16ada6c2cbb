# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import collections.abc
import datetime
import logging
import time
import typing

from .chords import ChordTracker
from .commontypes import UnresolvedArgument
from .device.hwtypes import HardwareError, Key, KeyEvent, KeyPress
from .snippet.types import Arg, Delay, KeyCombo, LinePart, Snippet, Text, is_comment

if typing.TYPE_CHECKING:
    from .device.types import Keyboard
    from .settings import Settings

logger = logging.getLogger(__name__)


class Player:
    """Replays a parsed snippet through a keyboard.

    Any keys a key combo is still holding are released if playback stops early,
    including on KeyboardInterrupt, so no key is left stuck down.
    """

    def __init__(
        self,
        keyboard: Keyboard,
        settings: Settings,
        sleep: collections.abc.Callable[[float], None] = time.sleep,
    ):
        self.keyboard = keyboard
        self.settings = settings
        self.sleep = sleep
        self.tracker = ChordTracker()

    def pause(self, delay: datetime.timedelta):
        if delay > datetime.timedelta():
            self.sleep(delay.total_seconds())

    def play(self, snippet: Snippet, values: collections.abc.Mapping[str, str]):
        if self.settings.focus_cycle:
            self.keyboard.focus_cycle()
        try:
            for number, line in enumerate(snippet.lines, start=1):
                self.pause(self.settings.line_delay)
                if is_comment(line):
                    logger.debug("Skipping comment line %d", number)
                    continue
                for part in line:
                    self.play_part(part, values)
                self.commit()
        finally:
            self.release_held()

    def play_part(self, part: LinePart, values: collections.abc.Mapping[str, str]):
        match part:
            case Text(text=text):
                self.type_text(text)
            case Arg(name=name):
                if name not in values:
                    raise UnresolvedArgument(name)
                self.type_text(values[name])
            case KeyCombo(keys=keys):
                self.key_combo(keys)
            case Delay(milliseconds=milliseconds):
                if self.settings.honor_delays:
                    self.pause(datetime.timedelta(milliseconds=milliseconds))

    def type_text(self, text: str):
        for ch in text:
            self.keyboard.type_character(ch)
            self.pause(self.settings.char_delay)

    def key_combo(self, keys: collections.abc.Iterable[Key]):
        for key in keys:
            event = self.tracker.next_event(key)
            self.send(event)
            self.tracker.record(event)
        self.release_held()

    def release_held(self):
        """Release every held key, last pressed first.

        A key the keyboard fails to release does not stop the others from being
        released; the first failure is raised once every key has been tried.
        """
        failure = None
        while self.tracker.held:
            event = self.tracker.release_last()
            try:
                self.send(event)
            except HardwareError as e:
                logger.warning("Could not release %r: %s", event.key, e)
                if failure is None:
                    failure = e
        if failure is not None:
            raise failure

    def send(self, event: KeyEvent):
        if event.press is KeyPress.PRESSED:
            self.keyboard.press(event.key)
        else:
            self.keyboard.release(event.key)

    def commit(self):
        self.keyboard.click(self.settings.commit)
