"""Scalar and string helpers."""

import os


def abs_int(x: int) -> int:
    """Return the absolute value of ``x``.

    Python integers are unbounded, so negating the smallest value never
    overflows and ``abs_int(x) == abs_int(-x)`` holds for every int.
    """
    if x < 0:
        return -x
    return x


def basename(s: str) -> str:
    """Return ``s`` without its extension.

    Everything from the last ``.`` on is dropped, unless that dot is the
    first character (``.hidden`` stays as is). Path separators are not
    treated specially.
    """
    n = s.rfind(".")
    if n > 0:
        return s[:n]
    return s


def file_exists(path: str | os.PathLike) -> bool:
    """Return ``True`` if something can be stat'ed at ``path``."""
    try:
        os.stat(path)
    except FileExistsError:
        return True
    except (OSError, ValueError):
        return False
    return True
