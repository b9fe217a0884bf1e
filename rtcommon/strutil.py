"""String helpers that follow the C locale's idea of whitespace."""

from __future__ import annotations

from .errors import ErrorCode, StackError

# Characters the C locale classifies as whitespace.
_C_WHITESPACE = " \t\n\v\f\r"


def trim_whitespace(s):
    """Return the string without leading and trailing whitespace."""
    return s.strip(_C_WHITESPACE)


def remove_trailing_space(s):
    """Return the string without trailing whitespace."""
    return s.rstrip(_C_WHITESPACE)


def replace_char(s, old_char, new_char):
    """Return the string with every occurrence of old_char replaced by new_char."""
    if len(old_char) != 1 or len(new_char) != 1:
        raise ValueError("replace_char expects single characters")
    return s.replace(old_char, new_char)


def safe_copy(src, dest_size):
    """Return src cut down to fit a buffer of dest_size with its terminator.

    Raises StackError(INVALID_PARAMETER) when src is missing or the buffer
    cannot hold even the terminator.
    """
    if src is None or dest_size < 1:
        raise StackError(ErrorCode.INVALID_PARAMETER)
    return src[:dest_size - 1]