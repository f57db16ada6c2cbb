from .defaults import DefaultRegistry
from .diagnostics import Diagnostic, DiagnosticKind, Diagnostics
from .parse import parse_line, parse_snippet, parse_text
from .render import render_line, render_part
from .types import (
    Arg,
    Delay,
    KeyCombo,
    Line,
    LinePart,
    MalformedDelay,
    Snippet,
    SnippetError,
    Text,
    UndecodableSnippet,
    UnknownKeyToken,
    UnsupportedArglist,
    is_comment,
)
