"""clisupport: small helpers for command-line programs."""

from .cli_utils import abort_on, get_diagnostics, setup, verbose, warn_on, warning
from .diagnostics import Diagnostics
from .errors import CliSupportError, InputError, OutputError, StreamError
from .helpers import abs_int, basename, file_exists
from .models import Options
from .sinks import ColorSink, DiagnosticsSink, PlainSink, select_sink
from .streams import (
    get_input_stream,
    get_output_stream,
    load_input,
    open_input,
    open_output,
    read_input,
)

__version__ = "0.1.0"
__all__ = [
    "CliSupportError",
    "ColorSink",
    "Diagnostics",
    "DiagnosticsSink",
    "InputError",
    "Options",
    "OutputError",
    "PlainSink",
    "StreamError",
    "abort_on",
    "abs_int",
    "basename",
    "file_exists",
    "get_diagnostics",
    "get_input_stream",
    "get_output_stream",
    "load_input",
    "open_input",
    "open_output",
    "read_input",
    "select_sink",
    "setup",
    "verbose",
    "warn_on",
    "warning",
]
