"""Input/output stream acquisition with ``"-"`` meaning stdin/stdout.

Two flavours are provided:

- ``load_input`` / ``open_input`` / ``open_output`` raise
  :class:`~clisupport.errors.InputError` or
  :class:`~clisupport.errors.OutputError` and leave the decision to the
  caller.
- ``read_input`` / ``get_input_stream`` / ``get_output_stream`` print an
  error line and exit with status 1 instead, which is what a small
  command-line tool usually wants.

Handles returned for ``"-"`` are wrapped by :func:`click.open_file` so
that leaving a ``with`` block does not close the standard stream. Named
files are the caller's to close. A standard stream with no binary buffer
behind it (replaced by a ``StringIO``, or missing) is reported like any
other acquisition failure.
"""

import os
from typing import IO

import click

from . import cli_utils
from .diagnostics import Diagnostics
from .errors import InputError, OutputError, StreamError

READ_INPUT = "ReadInput"
GET_INPUT_STREAM = "GetInputStream"
GET_OUTPUT_STREAM = "GetOutputStream"

PathArg = str | os.PathLike


# ---------------------------------------------------------------------------
# Raising helpers
# ---------------------------------------------------------------------------

def load_input(path: PathArg) -> bytes:
    """Return every byte of the named file, or of stdin for ``"-"``."""
    try:
        with click.open_file(path, "rb") as f:
            return f.read()
    except (OSError, RuntimeError) as e:
        raise InputError(READ_INPUT, e) from e


def open_input(
    path: PathArg,
    mode: str = "rb",
    encoding: str | None = None,
) -> IO:
    """Open ``path`` for reading, or return stdin for ``"-"``."""
    try:
        return click.open_file(path, mode, encoding=encoding)
    except (OSError, RuntimeError) as e:
        raise InputError(GET_INPUT_STREAM, e) from e


def open_output(
    path: PathArg,
    mode: str = "wb",
    encoding: str | None = None,
) -> IO:
    """Create or truncate ``path`` for writing, or return stdout for ``"-"``."""
    try:
        return click.open_file(path, mode, encoding=encoding)
    except (OSError, RuntimeError) as e:
        raise OutputError(GET_OUTPUT_STREAM, e) from e


# ---------------------------------------------------------------------------
# Aborting helpers
# ---------------------------------------------------------------------------

def _abort(err: StreamError, diagnostics: Diagnostics | None) -> None:
    target = diagnostics if diagnostics is not None else cli_utils.get_diagnostics()
    target.abort_on(err.label, err.cause)


def read_input(path: PathArg, diagnostics: Diagnostics | None = None) -> bytes:
    """Like :func:`load_input`, but exit with status 1 on failure.

    Parameters
    ----------
    path:
        File to read, or ``"-"`` for stdin.
    diagnostics:
        Where the error line goes. Defaults to the process-wide instance
        installed by :func:`clisupport.cli_utils.setup`.
    """
    try:
        return load_input(path)
    except InputError as e:
        _abort(e, diagnostics)
        raise


def get_input_stream(
    path: PathArg,
    diagnostics: Diagnostics | None = None,
    mode: str = "rb",
    encoding: str | None = None,
) -> IO:
    """Like :func:`open_input`, but exit with status 1 on failure."""
    try:
        return open_input(path, mode, encoding)
    except InputError as e:
        _abort(e, diagnostics)
        raise


def get_output_stream(
    path: PathArg,
    diagnostics: Diagnostics | None = None,
    mode: str = "wb",
    encoding: str | None = None,
) -> IO:
    """Like :func:`open_output`, but exit with status 1 on failure."""
    try:
        return open_output(path, mode, encoding)
    except OutputError as e:
        _abort(e, diagnostics)
        raise
