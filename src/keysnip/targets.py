import contextlib
import logging
import pathlib
import sys
import typing

from .commontypes import TargetError

logger = logging.getLogger(__name__)

STDIN_TARGET = "-"


@contextlib.contextmanager
def open_target(target: str) -> typing.Iterator[typing.BinaryIO]:
    """Open a snippet target for reading: a file path, or ``-`` for standard input."""
    target = target.strip()
    if target == STDIN_TARGET:
        yield sys.stdin.buffer
        return
    path = pathlib.Path(target).expanduser()
    if not path.is_file():
        raise TargetError(f"Path does not exist or does not point to a file: {path}")
    logger.debug("Reading snippet from %s", path)
    with path.open("rb") as infile:
        yield infile
