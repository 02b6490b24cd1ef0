"""Formatting back-ends for diagnostic lines.

A sink decides how the program name and the severity tag look, and
where the finished line is written. Both built-in sinks write to stderr
through :func:`click.echo` unless given an explicit file.
"""

import sys
from typing import IO, Protocol

import click

_TAG_STYLES = {
    "Warning": dict(fg="yellow", bold=True),
    "Error": dict(fg="red", bold=True),
}


class DiagnosticsSink(Protocol):
    def name(self, text: str) -> str: ...

    def tag(self, text: str) -> str: ...

    def emit(self, line: str) -> None: ...


class PlainSink:
    """Uncoloured output. Any ANSI codes in the line are stripped."""

    def __init__(self, file: IO[str] | None = None) -> None:
        self.file = file

    def name(self, text: str) -> str:
        return text

    def tag(self, text: str) -> str:
        return text

    def emit(self, line: str) -> None:
        click.echo(line, file=self.file, err=True, color=False)


class ColorSink(PlainSink):
    """Terminal output with the program name and severity tags styled."""

    def name(self, text: str) -> str:
        return click.style(text, fg="white")

    def tag(self, text: str) -> str:
        return click.style(text, **_TAG_STYLES.get(text, {}))

    def emit(self, line: str) -> None:
        click.echo(line, file=self.file, err=True, color=True)


def _isatty(stream: IO[str] | None) -> bool:
    try:
        return bool(stream is not None and stream.isatty())
    except (AttributeError, ValueError):
        # closed or file-like objects without a terminal behind them
        return False


def select_sink(file: IO[str] | None = None) -> DiagnosticsSink:
    """Pick :class:`ColorSink` for an interactive terminal, else :class:`PlainSink`.

    ``file`` defaults to the current ``sys.stderr``.
    """
    target = file if file is not None else sys.stderr
    if _isatty(target):
        return ColorSink(file)
    return PlainSink(file)
