# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import logging
import sys

from pynput.keyboard import Controller
from pynput.keyboard import Key as PynputKey

from .hwtypes import CharKey, Key, UnsupportedKeyError
from .keyboard_consts import KeyCode

logger = logging.getLogger(__name__)

# Attribute names on pynput's Key; some only exist on some platforms.
PYNPUT_KEY_NAMES = {
    KeyCode.KEY_ESC: "esc",
    KeyCode.KEY_BACKSPACE: "backspace",
    KeyCode.KEY_TAB: "tab",
    KeyCode.KEY_ENTER: "enter",
    KeyCode.KEY_LEFTCTRL: "ctrl",
    KeyCode.KEY_RIGHTCTRL: "ctrl_r",
    KeyCode.KEY_LEFTSHIFT: "shift",
    KeyCode.KEY_RIGHTSHIFT: "shift_r",
    KeyCode.KEY_LEFTALT: "alt",
    KeyCode.KEY_RIGHTALT: "alt_gr",
    KeyCode.KEY_LEFTMETA: "cmd",
    KeyCode.KEY_RIGHTMETA: "cmd_r",
    KeyCode.KEY_SPACE: "space",
    KeyCode.KEY_CAPSLOCK: "caps_lock",
    KeyCode.KEY_NUMLOCK: "num_lock",
    KeyCode.KEY_SCROLLLOCK: "scroll_lock",
    KeyCode.KEY_SYSRQ: "print_screen",
    KeyCode.KEY_PAUSE: "pause",
    KeyCode.KEY_COMPOSE: "menu",
    KeyCode.KEY_INSERT: "insert",
    KeyCode.KEY_DELETE: "delete",
    KeyCode.KEY_HOME: "home",
    KeyCode.KEY_END: "end",
    KeyCode.KEY_PAGEUP: "page_up",
    KeyCode.KEY_PAGEDOWN: "page_down",
    KeyCode.KEY_UP: "up",
    KeyCode.KEY_DOWN: "down",
    KeyCode.KEY_LEFT: "left",
    KeyCode.KEY_RIGHT: "right",
    KeyCode.KEY_MUTE: "media_volume_mute",
    KeyCode.KEY_VOLUMEDOWN: "media_volume_down",
    KeyCode.KEY_VOLUMEUP: "media_volume_up",
    KeyCode.KEY_PLAYPAUSE: "media_play_pause",
    KeyCode.KEY_NEXTSONG: "media_next",
    KeyCode.KEY_PREVIOUSSONG: "media_previous",
}
PYNPUT_KEY_NAMES.update({KeyCode[f"KEY_F{number}"]: f"f{number}" for number in range(1, 21)})


class PynputKeyboard:
    def __init__(self):
        self.controller = Controller()

    def _pynput_key(self, key: Key):
        if isinstance(key, CharKey):
            return key.char
        pynput_key = getattr(PynputKey, PYNPUT_KEY_NAMES.get(key, ""), None)
        if pynput_key is None:
            raise UnsupportedKeyError(key)
        return pynput_key

    def press(self, key: Key):
        self.controller.press(self._pynput_key(key))

    def release(self, key: Key):
        self.controller.release(self._pynput_key(key))

    def click(self, key: Key):
        pynput_key = self._pynput_key(key)
        self.controller.press(pynput_key)
        self.controller.release(pynput_key)

    def type_character(self, character: str):
        self.controller.press(character)
        self.controller.release(character)

    def focus_cycle(self):
        switcher = PynputKey.cmd if sys.platform == "darwin" else PynputKey.alt
        logger.debug("Cycling focus with %r+tab", switcher)
        self.controller.press(switcher)
        self.controller.press(PynputKey.tab)
        self.controller.release(PynputKey.tab)
        self.controller.release(switcher)
