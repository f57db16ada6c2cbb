import collections.abc

from .diagnostics import DiagnosticKind, Diagnostics


def physical_lines(text: str) -> collections.abc.Iterator[str]:
    """Split text on newlines, accepting both ``\\n`` and ``\\r\\n`` endings."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line.removesuffix("\r")


def logical_lines(
    lines: collections.abc.Iterable[str], diagnostics: Diagnostics
) -> collections.abc.Iterator[tuple[int, str]]:
    """Join backslash-continued lines, yielding (starting line number, logical line).

    Only the single trailing backslash is removed, so a line ending in ``\\\\`` keeps
    one backslash and still continues. A literal trailing backslash is written as
    backslash followed by a space.
    """
    buffer: list[str] = []
    start = 0
    appending = False
    for number, line in enumerate(lines, start=1):
        if appending:
            line = line.lstrip()
            appending = False
        else:
            start = number
        if line.endswith("\\"):
            buffer.append(line[:-1])
            appending = True
            continue
        buffer.append(line)
        yield start, "".join(buffer)
        buffer = []

    if appending:
        diagnostics.record(
            DiagnosticKind.TRAILING_CONTINUATION,
            start,
            "Last line ended with an appending backslash `\\`, "
            "assuming there is an empty line after it to append nothing. "
            "To use a backslash, append it with a whitespace (`\\ `).",
        )
        yield start, "".join(buffer)
