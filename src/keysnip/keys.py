# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
"""The vocabulary of key names usable inside a key combo.

Named keys are matched case-insensitively. A token of exactly one character names
the key which types that character, with its case preserved. The first name listed
for a key code is the one used when rendering it back into a combo.
"""
import typing

from .device.hwtypes import CharKey, Key
from .device.keyboard_consts import KeyCode

KEY_NAMES: dict[str, KeyCode] = {
    "ctrl": KeyCode.KEY_LEFTCTRL,
    "control": KeyCode.KEY_LEFTCTRL,
    "leftctrl": KeyCode.KEY_LEFTCTRL,
    "rightctrl": KeyCode.KEY_RIGHTCTRL,
    "alt": KeyCode.KEY_LEFTALT,
    "option": KeyCode.KEY_LEFTALT,
    "leftalt": KeyCode.KEY_LEFTALT,
    "rightalt": KeyCode.KEY_RIGHTALT,
    "altgr": KeyCode.KEY_RIGHTALT,
    "shift": KeyCode.KEY_LEFTSHIFT,
    "leftshift": KeyCode.KEY_LEFTSHIFT,
    "rightshift": KeyCode.KEY_RIGHTSHIFT,
    "meta": KeyCode.KEY_LEFTMETA,
    "super": KeyCode.KEY_LEFTMETA,
    "cmd": KeyCode.KEY_LEFTMETA,
    "command": KeyCode.KEY_LEFTMETA,
    "win": KeyCode.KEY_LEFTMETA,
    "windows": KeyCode.KEY_LEFTMETA,
    "leftmeta": KeyCode.KEY_LEFTMETA,
    "rightmeta": KeyCode.KEY_RIGHTMETA,
    "enter": KeyCode.KEY_ENTER,
    "return": KeyCode.KEY_ENTER,
    "tab": KeyCode.KEY_TAB,
    "esc": KeyCode.KEY_ESC,
    "escape": KeyCode.KEY_ESC,
    "space": KeyCode.KEY_SPACE,
    "backspace": KeyCode.KEY_BACKSPACE,
    "delete": KeyCode.KEY_DELETE,
    "del": KeyCode.KEY_DELETE,
    "insert": KeyCode.KEY_INSERT,
    "ins": KeyCode.KEY_INSERT,
    "home": KeyCode.KEY_HOME,
    "end": KeyCode.KEY_END,
    "pageup": KeyCode.KEY_PAGEUP,
    "pgup": KeyCode.KEY_PAGEUP,
    "pagedown": KeyCode.KEY_PAGEDOWN,
    "pgdn": KeyCode.KEY_PAGEDOWN,
    "up": KeyCode.KEY_UP,
    "down": KeyCode.KEY_DOWN,
    "left": KeyCode.KEY_LEFT,
    "right": KeyCode.KEY_RIGHT,
    "capslock": KeyCode.KEY_CAPSLOCK,
    "numlock": KeyCode.KEY_NUMLOCK,
    "scrolllock": KeyCode.KEY_SCROLLLOCK,
    "printscreen": KeyCode.KEY_SYSRQ,
    "prtsc": KeyCode.KEY_SYSRQ,
    "pause": KeyCode.KEY_PAUSE,
    "menu": KeyCode.KEY_COMPOSE,
    "playpause": KeyCode.KEY_PLAYPAUSE,
    "nexttrack": KeyCode.KEY_NEXTSONG,
    "prevtrack": KeyCode.KEY_PREVIOUSSONG,
    "volumeup": KeyCode.KEY_VOLUMEUP,
    "volumedown": KeyCode.KEY_VOLUMEDOWN,
    "mute": KeyCode.KEY_MUTE,
}
KEY_NAMES.update({f"f{number}": KeyCode[f"KEY_F{number}"] for number in range(1, 21)})

# Characters which cannot be written directly inside a combo.
CHARACTER_NAMES: dict[str, str] = {
    "plus": "+",
    "dollar": "$",
}

CANONICAL_NAMES: dict[Key, str] = {}
for _name, _code in KEY_NAMES.items():
    CANONICAL_NAMES.setdefault(_code, _name)
for _name, _char in CHARACTER_NAMES.items():
    CANONICAL_NAMES.setdefault(CharKey(char=_char), _name)


def lookup_key(token: str, aliases: typing.Optional[typing.Mapping[str, str]] = None) -> Key:
    """Resolve a combo token to a key. Raises KeyError for unknown tokens."""
    if aliases and token in aliases:
        token = aliases[token]
    if len(token) == 1:
        return CharKey(char=token)
    name = token.lower()
    if name in KEY_NAMES:
        return KEY_NAMES[name]
    if name in CHARACTER_NAMES:
        return CharKey(char=CHARACTER_NAMES[name])
    raise KeyError(token)


def key_name(key: Key) -> str:
    if key in CANONICAL_NAMES:
        return CANONICAL_NAMES[key]
    if isinstance(key, CharKey) and not key.char.isspace() and key.char not in ("+", "$"):
        return key.char
    raise ValueError(f"{key!r} has no name usable in a key combo")
