"""Error types and coercion of arbitrary failure values into exceptions."""

from __future__ import annotations

from typing import Any

__all__ = [
    'PreludeError',
    'ThrownValueError',
    'to_error',
]


class PreludeError(Exception):
    """Base class for exceptions created by fp-prelude."""


class ThrownValueError(PreludeError):
    """Exception-shaped wrapper for a failure value that is not an Exception.

    The message is ``str(value)``; the original object is kept on ``value``.

    Example:
        ```python
        error = ThrownValueError('Bob is dead!')
        str(error)  # 'Bob is dead!'
        error.value  # 'Bob is dead!'
        ```
    """

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(str(value))

    def __repr__(self) -> str:
        return f'ThrownValueError({self.value!r})'


def to_error(value: object) -> Exception:
    """Coerce any failure value into an Exception.

    Exceptions are returned unchanged. Other BaseExceptions and plain values
    are wrapped in ThrownValueError; a wrapped BaseException is also kept as
    the ``__cause__``.

    Args:
        value: The failure value to coerce.

    Returns:
        An Exception carrying the failure.

    Example:
        ```python
        exc = ValueError('bad')
        to_error(exc) is exc  # True
        to_error('bad')  # ThrownValueError('bad')
        ```
    """
    if isinstance(value, Exception):
        return value
    error = ThrownValueError(value)
    if isinstance(value, BaseException):
        error.__cause__ = value
    return error
