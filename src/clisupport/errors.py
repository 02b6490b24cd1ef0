"""Exception hierarchy for clisupport."""


class CliSupportError(Exception):
    """Base exception for clisupport errors."""


class StreamError(CliSupportError):
    """A stream could not be acquired.

    ``label`` names the operation that failed and ``cause`` is the
    underlying ``OSError``. ``str()`` gives the same ``"<label>, <cause>"``
    text that an abort line carries.
    """

    def __init__(self, label: str, cause: BaseException):
        self.label = label
        self.cause = cause
        super().__init__(f"{label}, {cause}")


class InputError(StreamError):
    """Input could not be opened or read."""


class OutputError(StreamError):
    """Output could not be created."""
