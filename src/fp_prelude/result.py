"""Result type: Ok[T] | Err[E] for explicit error handling.

Err is the failure (Left) side and Ok the success (Right) side. Once an Err
appears in a chain of map/and_then calls, no later callback runs and the error
reaches the final fold unchanged.

Example:
    ```python
    from fp_prelude import pipe, result

    louder = pipe(
        result.try_catch_error(lambda: check_vibes(vibes)),
        result.map(str.upper),
        result.map_left(str),
        result.fold(lambda bad: f'Darn, {bad}', lambda good: f'We have some {good}'),
    )
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, TypeIs

import msgspec

from fp_prelude._logging import get_logger
from fp_prelude.errors import to_error

if TYPE_CHECKING:
    from fp_prelude.option import Option

__all__ = [
    'Err',
    'ErrorOr',
    'Ok',
    'Result',
    'chain',
    'err',
    'fold',
    'from_option',
    'from_predicate',
    'get_or_else',
    'is_left',
    'is_right',
    'left',
    'map',
    'map_left',
    'ok',
    'or_else',
    'right',
    'sequence',
    'try_catch',
    'try_catch_error',
]

logger = get_logger(__name__)


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Ok represents the successful outcome of an operation. It wraps a value
    that can be transformed, chained, or extracted through fold.

    Examples:
        >>> ok = Ok(42)
        >>> ok.map(lambda x: x * 2)
        Ok(value=84)
        >>> ok.fold(str, lambda x: x + 1)
        43
    """

    value: T

    def __iter__(self) -> Iterator[T]:
        """Yield the contained value once."""
        yield self.value

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True if the result is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[object], T]) -> T:  # noqa: ARG002
        """Return the contained Ok value without calling the fallback."""
        return self.value

    def fold[R](self, on_err: Callable[[object], R], on_ok: Callable[[T], R]) -> R:  # noqa: ARG002
        """Apply on_ok to the contained value."""
        return on_ok(self.value)

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[object], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def and_then[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as chain, flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_else[F](self, _f: Callable[[object], Ok[T] | Err[F]]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def ok(self) -> Option[T]:
        """Convert to Option, returning Some(value)."""
        from fp_prelude.option import Some

        return Some(self.value)

    def err(self) -> Option[object]:
        """Convert to Option, returning Nothing since this is Ok."""
        from fp_prelude.option import Nothing

        return Nothing

    def swap(self) -> Err[T]:
        """Turn the success into a failure carrying the same value."""
        return Err(self.value)

    def zip[U, E](self, other: Ok[U] | Err[E]) -> Ok[tuple[T, U]] | Err[E]:
        """Combine two Ok values into a tuple.

        If both are Ok, returns Ok((self.value, other.value)).
        If other is Err, returns it.
        """
        if isinstance(other, Ok):
            return Ok((self.value, other.value))
        return other

    def flatten[U, E](self: Ok[Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Flatten a nested Result.

        Converts Result[Result[T, E], E] into Result[T, E].
        """
        return self.value  # type: ignore[return-value]


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Err represents the failure outcome of an operation. It wraps an error
    value that can be transformed, recovered from, or folded.

    Examples:
        >>> err = Err("something went wrong")
        >>> err.is_err()
        True
        >>> err.unwrap_or(0)
        0
    """

    error: E

    def __iter__(self) -> Iterator[object]:
        """Yield nothing."""
        return iter(())

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True if the result is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute a value from the error since this is Err."""
        return f(self.error)

    def fold[T, R](self, on_err: Callable[[E], R], on_ok: Callable[[T], R]) -> R:  # noqa: ARG002
        """Apply on_err to the contained error."""
        return on_err(self.error)

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def and_then[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def or_else[T, F](self, f: Callable[[E], Ok[T] | Err[F]]) -> Ok[T] | Err[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def ok(self) -> Option[object]:
        """Convert to Option, returning Nothing since this is Err."""
        from fp_prelude.option import Nothing

        return Nothing

    def err(self) -> Option[E]:
        """Convert to Option, returning Some(error)."""
        from fp_prelude.option import Some

        return Some(self.error)

    def swap(self) -> Ok[E]:
        """Turn the failure into a success carrying the same value."""
        return Ok(self.error)

    def zip[U](self, _other: Ok[U] | Err[E]) -> Err[E]:
        """Return self since this is Err."""
        return self

    def flatten(self) -> Err[E]:
        """Return self since this is Err (nothing to flatten)."""
        return self


type Result[T, E = Exception] = Ok[T] | Err[E]

type ErrorOr[T] = Ok[T] | Err[Exception]


# ---------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------


def ok[T](value: T) -> Result[T, object]:
    """Wrap a value in Ok."""
    return Ok(value)


def err[E](error: E) -> Result[object, E]:
    """Wrap an error in Err."""
    return Err(error)


right = ok
left = err


def from_predicate[T, E](
    predicate: Callable[[T], bool],
    on_false: Callable[[], E],
) -> Callable[[T], Result[T, E]]:
    """Build a function returning Ok(value) when predicate(value) holds.

    on_false is only called when the predicate fails, once per call.

    Example:
        ```python
        old_enough = from_predicate(lambda age: age >= 21, lambda: ValueError('too young'))
        old_enough(23)  # Ok(value=23)
        old_enough(8)  # Err(error=ValueError('too young'))
        ```
    """

    def _from_predicate(value: T) -> Result[T, E]:
        if predicate(value):
            return Ok(value)
        return Err(on_false())

    return _from_predicate


def from_option[T, E](on_none: Callable[[], E]) -> Callable[[Option[T]], Result[T, E]]:
    """Require a value: Some(x) becomes Ok(x), Nothing becomes Err(on_none())."""

    def _from_option(option: Option[T]) -> Result[T, E]:
        return option.ok_or_else(on_none)

    return _from_option


def try_catch[T, E](thunk: Callable[[], T], on_error: Callable[[Exception], E]) -> Result[T, E]:
    """Call thunk, turning a raised exception into Err(on_error(exc)).

    Only Exception subclasses are caught. KeyboardInterrupt, SystemExit and
    other BaseExceptions propagate.

    Args:
        thunk: Zero-argument function to call.
        on_error: Maps the caught exception to the error payload.

    Returns:
        Ok(thunk()) or Err(on_error(exc)).
    """
    try:
        value = thunk()
    except Exception as exc:
        error = on_error(exc)
        logger.debug('exception captured', exc_type=type(exc).__name__)
        return Err(error)
    return Ok(value)


def try_catch_error[T](thunk: Callable[[], T]) -> ErrorOr[T]:
    """Call thunk, turning a raised exception into Err(exception).

    Example:
        ```python
        try_catch_error(lambda: 10 / 2)  # Ok(value=5.0)
        try_catch_error(lambda: 10 / 0)  # Err(error=ZeroDivisionError(...))
        ```
    """
    return try_catch(thunk, to_error)


# ---------------------------------------------------------------------
# Point-free combinators
# ---------------------------------------------------------------------


def is_right[T, E](result: Result[T, E]) -> TypeIs[Ok[T]]:
    """Return True if the result is Ok."""
    return isinstance(result, Ok)


def is_left[T, E](result: Result[T, E]) -> TypeIs[Err[E]]:
    """Return True if the result is Err."""
    return isinstance(result, Err)


def map[T, U, E](f: Callable[[T], U]) -> Callable[[Result[T, E]], Result[U, E]]:  # noqa: A001
    """Point-free Result.map; Err passes through untouched."""

    def _map(result: Result[T, E]) -> Result[U, E]:
        return result.map(f)

    return _map


def map_left[T, E, F](f: Callable[[E], F]) -> Callable[[Result[T, E]], Result[T, F]]:
    """Point-free Result.map_err; Ok passes through untouched."""

    def _map_left(result: Result[T, E]) -> Result[T, F]:
        return result.map_err(f)

    return _map_left


def chain[T, U, E](f: Callable[[T], Result[U, E]]) -> Callable[[Result[T, E]], Result[U, E]]:
    """Point-free Result.and_then; Err short-circuits without calling f."""

    def _chain(result: Result[T, E]) -> Result[U, E]:
        return result.and_then(f)

    return _chain


def or_else[T, E, F](f: Callable[[E], Result[T, F]]) -> Callable[[Result[T, E]], Result[T, F]]:
    """Point-free Result.or_else."""

    def _or_else(result: Result[T, E]) -> Result[T, F]:
        return result.or_else(f)

    return _or_else


def fold[T, E, R](on_left: Callable[[E], R], on_right: Callable[[T], R]) -> Callable[[Result[T, E]], R]:
    """Point-free Result.fold: exactly one of the branches runs."""

    def _fold(result: Result[T, E]) -> R:
        return result.fold(on_left, on_right)

    return _fold


def get_or_else[T, E](on_left: Callable[[E], T]) -> Callable[[Result[T, E]], T]:
    """Point-free Result.unwrap_or_else; on_left receives the error."""

    def _get_or_else(result: Result[T, E]) -> T:
        return result.unwrap_or_else(on_left)

    return _get_or_else


def sequence[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered.

    Args:
        results: An iterable of Result values.

    Returns:
        Ok(list[T]) if all results are Ok, otherwise the first Err.

    Examples:
        >>> sequence([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> sequence([Ok(1), Err("fail"), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)
