"""Warning, error and verbose-trace emitters.

Every line goes to stderr and starts with ``[<program_name>]`` so that
stdout stays free for program data::

    [prog] Warning: something odd
    [prog] Warning: Load, step two, [Errno 2] No such file or directory: 'x'
    [prog] Error: ReadInput, [Errno 13] Permission denied: 'y'
    [prog] processed 3 records
"""

import sys

from .models import Options
from .sinks import DiagnosticsSink, select_sink


class Diagnostics:
    """Diagnostic emitters bound to one :class:`Options` value.

    Parameters
    ----------
    options:
        Program name and verbosity threshold. Defaults to ``Options()``.
    sink:
        Formatting back-end. When ``None`` a sink is chosen for every line
        with :func:`select_sink`, so colours follow whatever stderr is at
        the time of writing.
    """

    def __init__(
        self,
        options: Options | None = None,
        sink: DiagnosticsSink | None = None,
    ) -> None:
        self.options = options if options is not None else Options()
        self.sink = sink

    def _sink(self) -> DiagnosticsSink:
        return self.sink if self.sink is not None else select_sink()

    def _emit(self, body: str, tag: str | None = None) -> None:
        sink = self._sink()
        prefix = f"[{sink.name(self.options.program_name)}]"
        if tag is None:
            sink.emit(f"{prefix} {body}")
        else:
            sink.emit(f"{prefix} {sink.tag(tag)}: {body}")

    def warning(self, message: str) -> None:
        """Print ``message`` as a warning."""
        self._emit(message, tag="Warning")

    def warn_on(self, label: str, err: BaseException | None) -> bool:
        """Print ``err`` as a warning if there is one, and return whether there was.

        With a label of the form ``"ActionName, step name"`` the line reads::

            [prog] Warning: ActionName, step name, <err>
        """
        if err is None:
            return False
        self._emit(f"{label}, {err}", tag="Warning")
        return True

    def abort_on(self, label: str, err: BaseException | None) -> None:
        """Print ``err`` as an error and exit with status 1. No-op for ``None``."""
        if err is None:
            return
        self._emit(f"{label}, {err}", tag="Error")
        sys.exit(1)

    def verbose(self, level: int, fmt: str, *args, **kwargs) -> None:
        """Print a trace line if the verbosity threshold is at least ``level``.

        ``fmt`` is filled with :meth:`str.format`; without arguments it is
        printed as-is.
        """
        if self.options.verbose < level:
            return
        message = fmt.format(*args, **kwargs) if args or kwargs else fmt
        self._emit(message)
