# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
import collections.abc

from .device.hwtypes import Key, KeyEvent, KeyPress


class ChordTracker:
    """Toggle-based key holding for key combos.

    Naming a key which is not held presses it; naming it again while it is held
    releases it. So ``ctrl+c+ctrl+v`` holds ctrl for the c only. Whatever is still held
    at the end of the combo is released last-pressed-first.

    ``next_event`` and ``record`` are separate so a caller sending events to a device
    only records an event once the device has accepted it.
    """

    held: list[Key]

    def __init__(self):
        self.held = []

    def next_event(self, key: Key) -> KeyEvent:
        if key in self.held:
            return KeyEvent.released(key)
        return KeyEvent.pressed(key)

    def record(self, event: KeyEvent):
        if event.press is KeyPress.PRESSED:
            self.held.append(event.key)
        else:
            self.held.remove(event.key)

    def toggle(self, key: Key) -> KeyEvent:
        event = self.next_event(key)
        self.record(event)
        return event

    def release_last(self) -> KeyEvent:
        return KeyEvent.released(self.held.pop())

    def release_all(self) -> list[KeyEvent]:
        events = []
        while self.held:
            events.append(self.release_last())
        return events


def chord_events(keys: collections.abc.Iterable[Key]) -> list[KeyEvent]:
    tracker = ChordTracker()
    events = [tracker.toggle(key) for key in keys]
    events.extend(tracker.release_all())
    return events
