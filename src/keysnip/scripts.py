import argparse
import logging
import pathlib
import sys

from .arguments import ask, pair_arguments, resolve_arguments
from .commontypes import KeysnipError
from .device.recorded_keyboard import Recorder
from .playback import Player
from .settings import Settings
from .snippet import parse_snippet, render_line
from .targets import open_target

logger = logging.getLogger(__name__)

# conventional exit status for a process ended by SIGINT
CANCELLED_EXIT_STATUS = 130

main_parser = argparse.ArgumentParser(prog="keysnip", description="Type out keystroke snippets.")
main_parser.add_argument("--settings", type=pathlib.Path, help="JSON settings file")
main_parser.add_argument("-v", "--verbose", action="store_true")
main_parser.add_argument("command", nargs="?", help="`paste` (or `p`, `v`) or `check` (or `c`)")
main_parser.add_argument("rest", nargs=argparse.REMAINDER)

paste_parser = argparse.ArgumentParser(prog="keysnip paste")
paste_parser.add_argument("--dry-run", action="store_true", help="print the key events instead of sending them")
paste_parser.add_argument("target", nargs="?", help="snippet file, or - for standard input")
paste_parser.add_argument("arguments", nargs=argparse.REMAINDER, help="argument name/value pairs")

check_parser = argparse.ArgumentParser(prog="keysnip check")
check_parser.add_argument("target", nargs="?", help="snippet file, or - for standard input")


def ask_target(target):
    if target is None:
        return ask("Target snippet (file path, or `-` for standard input)")
    return target


def paste(argv: list[str], settings: Settings) -> int:
    args = paste_parser.parse_args(argv)
    target = ask_target(args.target)
    supplied = pair_arguments(args.arguments)
    with open_target(target) as stream:
        snippet = parse_snippet(stream, lookup=settings.key_lookup())

    values = resolve_arguments(snippet.lines, snippet.defaults, supplied)

    if args.dry_run:
        keyboard = Recorder(echo=True)
    else:
        from .device.pynput_keyboard import PynputKeyboard

        keyboard = PynputKeyboard()
    Player(keyboard, settings).play(snippet, values)
    return 0


def check(argv: list[str], settings: Settings) -> int:
    args = check_parser.parse_args(argv)
    target = ask_target(args.target)
    with open_target(target) as stream:
        snippet = parse_snippet(stream, lookup=settings.key_lookup())

    for number, line in enumerate(snippet.lines, start=1):
        try:
            rendered = render_line(line)
        except ValueError:
            rendered = repr(line)
        print(f"{number:>4}: {rendered}")
    for name, value in snippet.defaults.items():
        print(f"default {name} = {value!r}")
    for diagnostic in snippet.diagnostics:
        print(f"warning: {diagnostic}")
    return 0


COMMANDS = {
    "paste": paste,
    "p": paste,
    "v": paste,
    "check": check,
    "c": check,
}


def main(argv=None) -> int:
    args = main_parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s: %(message)s")

    command = args.command
    try:
        settings = Settings.load(args.settings) if args.settings is not None else Settings()
        while True:
            if command is None:
                command = ask("Enter subcommand (`paste`/`p`, `check`/`c`)")
            handler = COMMANDS.get(command)
            if handler is None:
                logger.warning("Unknown subcommand: %s", command)
                command = None
                continue
            return handler(args.rest, settings)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        logger.error("Cancelled")
        return CANCELLED_EXIT_STATUS
    except (KeysnipError, OSError) as e:
        logger.error("%s", e)
        return 1


def run():
    sys.exit(main())
