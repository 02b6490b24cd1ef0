# test_sinks.py
#
# Tests:
# - PlainSink leaves text untouched and strips ANSI codes on write
# - ColorSink styles the program name and known severity tags
# - select_sink picks ColorSink for a terminal, PlainSink otherwise
# - select_sink treats streams without a usable isatty() as non-terminals

import io

import click

from clisupport.sinks import ColorSink, PlainSink, select_sink


class _FakeTTY(io.StringIO):
    def isatty(self):
        return True


class TestPlainSink:
    def test_parts_unchanged(self):
        sink = PlainSink()
        assert sink.name("prog") == "prog"
        assert sink.tag("Warning") == "Warning"

    def test_emit_strips_ansi(self):
        buf = io.StringIO()
        PlainSink(buf).emit(click.style("red", fg="red"))
        assert buf.getvalue() == "red\n"


class TestColorSink:
    def test_known_tags_styled(self):
        sink = ColorSink()
        assert sink.tag("Warning") == click.style("Warning", fg="yellow", bold=True)
        assert sink.tag("Error") == click.style("Error", fg="red", bold=True)
        assert sink.name("prog") == click.style("prog", fg="white")

    def test_emit_keeps_ansi(self):
        buf = io.StringIO()
        line = click.style("x", fg="red")
        ColorSink(buf).emit(line)
        assert buf.getvalue() == line + "\n"


class TestSelectSink:
    def test_terminal_gets_color(self):
        assert isinstance(select_sink(_FakeTTY()), ColorSink)

    def test_buffer_gets_plain(self):
        sink = select_sink(io.StringIO())
        assert isinstance(sink, PlainSink)
        assert not isinstance(sink, ColorSink)

    def test_closed_stream_gets_plain(self):
        buf = io.StringIO()
        buf.close()
        assert not isinstance(select_sink(buf), ColorSink)

    def test_object_without_isatty(self):
        assert not isinstance(select_sink(object()), ColorSink)

    def test_defaults_to_stderr(self, capsys):
        # pytest's captured stderr is not a terminal
        assert not isinstance(select_sink(), ColorSink)
