"""Process-wide diagnostics for programs that don't pass one around.

Call :func:`setup` once at startup; the module-level emitters then use
the installed :class:`~clisupport.diagnostics.Diagnostics`. Code that
prefers explicit wiring can keep the instance :func:`setup` returns and
call its methods directly.
"""

from .diagnostics import Diagnostics
from .models import Options

_default = Diagnostics()


def setup(name: str, verbosity: int) -> Diagnostics:
    """Install the program name and verbosity threshold for this process."""
    global _default
    _default = Diagnostics(Options(program_name=name, verbose=verbosity))
    return _default


def get_diagnostics() -> Diagnostics:
    return _default


def warning(message: str) -> None:
    """Emit a warning to stderr."""
    _default.warning(message)


def warn_on(label: str, err: BaseException | None) -> bool:
    """Emit ``err`` as a warning if set; return whether it was."""
    return _default.warn_on(label, err)


def abort_on(label: str, err: BaseException | None) -> None:
    """Print ``err`` as an error and exit with code 1, if set."""
    _default.abort_on(label, err)


def verbose(level: int, fmt: str, *args, **kwargs) -> None:
    _default.verbose(level, fmt, *args, **kwargs)
