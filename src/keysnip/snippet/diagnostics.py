from __future__ import annotations

import collections.abc
import enum
import logging

import msgspec

logger = logging.getLogger(__name__)


class DiagnosticKind(enum.Enum):
    INCOMPLETE_ARG = enum.auto()
    INCOMPLETE_COMBO = enum.auto()
    DUPLICATE_DEFAULT = enum.auto()
    TRAILING_CONTINUATION = enum.auto()


class Diagnostic(msgspec.Struct, frozen=True, kw_only=True):
    kind: DiagnosticKind
    # 1-based number of the physical line the logical line started on
    line: int
    message: str

    def __str__(self):
        return f"line {self.line}: {self.message}"


class Diagnostics(collections.abc.Sequence):
    """Problems found while parsing which were corrected automatically.

    Every recorded diagnostic is also logged as a warning.
    """

    def __init__(self):
        self._items: list[Diagnostic] = []

    def record(self, kind: DiagnosticKind, line: int, message: str) -> Diagnostic:
        diagnostic = Diagnostic(kind=kind, line=line, message=message)
        self._items.append(diagnostic)
        logger.warning("%s", diagnostic)
        return diagnostic

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [d for d in self._items if d.kind is kind]

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self):
        return len(self._items)

    def __repr__(self):
        return f"Diagnostics({self._items!r})"
