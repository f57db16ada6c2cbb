import io

import pytest

from keysnip.device.hwtypes import CharKey
from keysnip.device.keyboard_consts import KeyCode
from keysnip.snippet import (
    Arg,
    DefaultRegistry,
    Delay,
    DiagnosticKind,
    Diagnostics,
    KeyCombo,
    MalformedDelay,
    Text,
    UndecodableSnippet,
    UnknownKeyToken,
    UnsupportedArglist,
    parse_line,
    parse_snippet,
    parse_text,
    render_line,
)


def parse_one(text: str):
    lines = []
    defaults = DefaultRegistry()
    diagnostics = Diagnostics()
    parse_line(text, lines, defaults, diagnostics)
    assert len(lines) == 1
    return lines[0], defaults, diagnostics


def test_snippet_line():
    line, defaults, diagnostics = parse_one("test $@arg1::a$ $@$ $@arg2$")
    assert line == [Text("test "), Arg("arg1"), Text(" $@ "), Arg("arg2")]
    assert dict(defaults) == {"arg1": "a"}
    assert len(diagnostics) == 0


def test_snippet():
    text = "test $@arg1$ $@arg2::a$ $@$ $@arg3$\ntest $@arg3$ $ $@arg1::b$ $@arg2$"
    snippet = parse_snippet(io.BytesIO(text.encode("utf-8")))
    assert snippet.lines == [
        [Text("test "), Arg("arg1"), Text(" "), Arg("arg2"), Text(" $@ "), Arg("arg3")],
        [Text("test "), Arg("arg3"), Text(" $ "), Arg("arg1"), Text(" "), Arg("arg2")],
    ]
    # arg2 was declared first, so it stays first even though arg1 changed later
    assert list(snippet.defaults.items()) == [("arg2", "a"), ("arg1", "b")]
    assert snippet.diagnostics.of_kind(DiagnosticKind.DUPLICATE_DEFAULT) == []


def test_duplicate_default_across_lines():
    snippet = parse_text("$@x::1$\n$@y::2$ $@x::3$")
    assert list(snippet.defaults.items()) == [("x", "3"), ("y", "2")]
    (diagnostic,) = snippet.diagnostics.of_kind(DiagnosticKind.DUPLICATE_DEFAULT)
    assert diagnostic.line == 2
    assert "`1`" in diagnostic.message


@pytest.mark.parametrize(
    "text,expected",
    (
        ("", []),
        ("plain text", [Text("plain text")]),
        ("$'250$", [Delay(250)]),
        ("a$'0$b", [Text("a"), Delay(0), Text("b")]),
        ("$@name$", [Arg("name")]),
        ("$@name::$", [Arg("name")]),
        ("$@a::b::c$", [Arg("a")]),
        ("$@$", [Text("$@")]),
        ("$@$$@$", [Text("$@$@")]),
        ("x$@$y", [Text("x$@y")]),
        ("$!$", [Text("$!")]),
        ("cost: $5", [Text("cost: $5")]),
        ("trailing $", [Text("trailing $")]),
        ("$$@a$", [Text("$"), Arg("a")]),
        ("$!ctrl+c$", [KeyCombo((KeyCode.KEY_LEFTCTRL, CharKey("c")))]),
        ("$!ctrl c$", [KeyCombo((KeyCode.KEY_LEFTCTRL, CharKey("c")))]),
        ("$! +ctrl++ alt  +$", [KeyCombo((KeyCode.KEY_LEFTCTRL, KeyCode.KEY_LEFTALT))]),
        ("$!F5$done", [KeyCombo((KeyCode.KEY_F5,)), Text("done")]),
        ("$!shift+A$", [KeyCombo((KeyCode.KEY_LEFTSHIFT, CharKey("A")))]),
        ("$!plus$", [KeyCombo((CharKey("+"),))]),
        (
            "git commit -m \"$@message$\"$!enter$",
            [Text('git commit -m "'), Arg("message"), Text('"'), KeyCombo((KeyCode.KEY_ENTER,))],
        ),
    ),
)
def test_parts(text, expected):
    line, _, diagnostics = parse_one(text)
    assert line == expected
    assert len(diagnostics) == 0


def test_default_with_colons_in_value():
    line, defaults, _ = parse_one("$@url::http://example.com$")
    assert line == [Arg("url")]
    assert defaults["url"] == "http://example.com"


def test_escape_ignores_default():
    line, defaults, _ = parse_one("$@::lost$")
    assert line == [Text("$@")]
    assert len(defaults) == 0


def test_no_adjacent_text_parts():
    line, _, _ = parse_one("a$@$b$!$c$@$")
    assert line == [Text("a$@b$!c$@")]


def test_unterminated_combo():
    line, _, diagnostics = parse_one("$!ctrl+alt")
    assert line == [KeyCombo((KeyCode.KEY_LEFTCTRL, KeyCode.KEY_LEFTALT))]
    (diagnostic,) = diagnostics
    assert diagnostic.kind is DiagnosticKind.INCOMPLETE_COMBO
    assert "(key combo)" in diagnostic.message


def test_unterminated_empty_combo():
    line, _, diagnostics = parse_one("hello $!")
    assert line == [Text("hello $!")]
    (diagnostic,) = diagnostics
    assert diagnostic.kind is DiagnosticKind.INCOMPLETE_COMBO
    assert 'text "$!"' in diagnostic.message


def test_unterminated_arg():
    line, defaults, diagnostics = parse_one("hello $@name::world")
    assert line == [Text("hello "), Arg("name")]
    assert dict(defaults) == {"name": "world"}
    (diagnostic,) = diagnostics
    assert diagnostic.kind is DiagnosticKind.INCOMPLETE_ARG
    assert "(arg)" in diagnostic.message


def test_unterminated_empty_arg():
    line, _, diagnostics = parse_one("email me $@")
    assert line == [Text("email me $@")]
    (diagnostic,) = diagnostics
    assert diagnostic.kind is DiagnosticKind.INCOMPLETE_ARG
    assert 'text "$@"' in diagnostic.message


def test_unterminated_delay_is_closed_quietly():
    line, _, diagnostics = parse_one("wait $'500")
    assert line == [Text("wait "), Delay(500)]
    assert len(diagnostics) == 0


@pytest.mark.parametrize("text", ("$'$", "$'abc$", "$'-5$", "$'1.5$", "$'12a", "$'²$"))
def test_malformed_delay(text):
    with pytest.raises(MalformedDelay):
        parse_one(text)


def test_unknown_key_token():
    with pytest.raises(UnknownKeyToken) as excinfo:
        parse_text("first line\n$!ctrl+bogus$")
    assert excinfo.value.token == "bogus"
    assert excinfo.value.line == 2
    assert "bogus" in str(excinfo.value)


def test_arglist_is_rejected():
    with pytest.raises(UnsupportedArglist):
        parse_one("$[items$")


def test_arglist_opener_inside_other_parts_is_not_special():
    line, _, _ = parse_one("$@a$[$")
    assert line == [Arg("a"), Text("[$")]


def test_custom_lookup():
    lookup_calls = []

    def lookup(token):
        lookup_calls.append(token)
        if token == "hyper":
            return KeyCode.KEY_LEFTMETA
        raise KeyError(token)

    snippet = parse_text("$!hyper+hyper$", lookup=lookup)
    assert snippet.lines == [[KeyCombo((KeyCode.KEY_LEFTMETA, KeyCode.KEY_LEFTMETA))]]
    assert lookup_calls == ["hyper", "hyper"]


def test_comment_lines_are_parsed():
    snippet = parse_text("## $@name::x$\nreal")
    assert snippet.lines == [[Text("## "), Arg("name")], [Text("real")]]
    assert dict(snippet.defaults) == {"name": "x"}


def test_utf8_and_crlf():
    snippet = parse_snippet(io.BytesIO("héllo\r\nwörld\r\n".encode("utf-8")))
    assert snippet.lines == [[Text("héllo")], [Text("wörld")]]


def test_invalid_utf8_names_the_line():
    with pytest.raises(UndecodableSnippet) as excinfo:
        parse_snippet(io.BytesIO(b"fine\nhello \xff\xfe world\n"))
    assert excinfo.value.line == 2
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_empty_lines_are_kept():
    snippet = parse_text("a\n\nb\n")
    assert snippet.lines == [[Text("a")], [], [Text("b")]]


def test_argument_names_in_order():
    snippet = parse_text("$@b$ $@a$\n$@b$ $@c$")
    assert snippet.argument_names == ["b", "a", "c"]


@pytest.mark.parametrize(
    "source",
    (
        "a$@$b$!$c",
        "$$@a$$",
        "x $@$ $@$ y",
        "$@$$!$",
        "$!$",
        "$@$!",
        "$!$@$@$",
        "lead$'5$$!ctrl$trail",
        "$@a$$@b$",
        "unterminated $@",
    ),
)
def test_text_coalescing_is_stable(source):
    (line,) = parse_text(source).lines
    assert all(part.text for part in line if isinstance(part, Text))
    assert not any(isinstance(a, Text) and isinstance(b, Text) for a, b in zip(line, line[1:]))
    rendered = render_line(line)
    (reparsed,) = parse_text(rendered).lines
    assert reparsed == line
    assert render_line(reparsed) == rendered
