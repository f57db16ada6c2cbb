import datetime
import functools
import json
import pathlib
import typing

import attr
import cattrs

from .commontypes import SettingsError
from .device.hwtypes import Key
from .durations import format_duration, parse_duration
from .keys import lookup_key


def timedelta_milliseconds(val: datetime.timedelta | int | str):
    if isinstance(val, datetime.timedelta):
        return val
    if isinstance(val, int):
        return datetime.timedelta(milliseconds=val)
    return parse_duration(val)


settings_converter = cattrs.Converter()
settings_converter.register_unstructure_hook(datetime.timedelta, format_duration)
settings_converter.register_structure_hook(datetime.timedelta, lambda d, _: timedelta_milliseconds(d))


@attr.define(kw_only=True)
class Settings:
    # pause after typing each character
    char_delay: datetime.timedelta = attr.field(default=datetime.timedelta(milliseconds=10))
    # pause before each line, giving the target application time to settle
    line_delay: datetime.timedelta = attr.field(default=datetime.timedelta(milliseconds=100))
    # switch away from the terminal and back to the previous window before typing
    focus_cycle: bool = True
    # when false, `$'...$` delays are parsed and checked but do not pause
    honor_delays: bool = True
    commit_key: str = "enter"
    key_aliases: dict[str, str] = attr.field(factory=dict)

    @property
    def commit(self) -> Key:
        return lookup_key(self.commit_key, self.key_aliases)

    def key_lookup(self) -> typing.Callable[[str], Key]:
        return functools.partial(lookup_key, aliases=self.key_aliases)

    def save(self, dest: pathlib.Path):
        with dest.open("w") as outfile:
            json.dump(settings_converter.unstructure(self), outfile, indent=2)

    @classmethod
    def load(cls, src: pathlib.Path):
        try:
            with src.open() as infile:
                raw = json.load(infile)
            settings = settings_converter.structure(raw, cls)
            lookup_key(settings.commit_key, settings.key_aliases)
        except KeyError as e:
            raise SettingsError(f"Unknown commit key in {src}: {e}") from e
        except (OSError, ValueError, TypeError, cattrs.BaseValidationError) as e:
            raise SettingsError(f"Could not load settings from {src}: {e}") from e
        return settings

    @classmethod
    def for_test(cls):
        return settings_converter.structure(
            {
                "char_delay": "0",
                "line_delay": "0",
                "focus_cycle": False,
                "honor_delays": True,
                "commit_key": "enter",
                "key_aliases": {},
            },
            cls,
        )
