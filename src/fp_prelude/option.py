"""Option type: Some[T] | Nothing for optional values.

Two ways to use it:

    # Methods, for fluent chaining
    Some(5).map(lambda x: x + 3).unwrap_or_else(lambda: 0)  # 8

    # Point-free combinators, for pipe() and flow()
    pipe(
        option.from_nullable(None),
        option.map(lambda x: x + 3),
        option.get_or_else(lambda: 0),
    )  # 0
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, TypeIs

import msgspec

if TYPE_CHECKING:
    from fp_prelude.result import Err, Ok, Result

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'chain',
    'filter',
    'fold',
    'from_nullable',
    'from_predicate',
    'get_or_else',
    'is_none',
    'is_some',
    'map',
    'none',
    'or_else',
    'sequence',
    'some',
    'to_result',
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Some represents the presence of a value. It wraps a value that can be
    transformed, chained, or extracted through fold/unwrap_or_else.

    Examples:
        >>> some = Some(42)
        >>> some.map(lambda x: x * 2)
        Some(value=84)
        >>> some.fold(lambda: 0, lambda x: x + 1)
        43
    """

    value: T

    def __iter__(self) -> Iterator[T]:
        """Yield the contained value once."""
        yield self.value

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True if the option is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the option is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained Some value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained Some value without calling the fallback."""
        return self.value

    def fold[R](self, on_none: Callable[[], R], on_some: Callable[[T], R]) -> R:  # noqa: ARG002
        """Apply on_some to the contained value.

        Args:
            on_none: Ignored for Some.
            on_some: Function applied to the value.

        Returns:
            The result of on_some(value).
        """
        return on_some(self.value)

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply a function to the contained value.

        The result is wrapped in Some even when f returns None, so that
        map(f).map(g) == map(g . f) holds for every f and g.

        Args:
            f: Function to apply to the Some value.

        Returns:
            Some containing the result of applying f to the value.
        """
        return Some(f(self.value))

    def and_then[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply a function that returns an Option to the contained value.

        Also known as chain, flatmap or bind.

        Args:
            f: Function that takes T and returns Option[U].

        Returns:
            The Option returned by f.
        """
        return f(self.value)

    def or_else(self, _f: Callable[[], Some[T] | NothingType]) -> Some[T]:
        """Return self unchanged since this is Some."""
        return self

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return Some if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.

        Returns:
            Some(value) if predicate(value) is True, else Nothing.
        """
        if predicate(self.value):
            return self
        return Nothing

    def ok_or[E](self, _err: E) -> Ok[T]:
        """Convert to Result, returning Ok(value)."""
        from fp_prelude.result import Ok

        return Ok(self.value)

    def ok_or_else[E](self, _f: Callable[[], E]) -> Ok[T]:
        """Convert to Result, returning Ok(value) without calling the error factory."""
        from fp_prelude.result import Ok

        return Ok(self.value)

    def zip[U](self, other: Some[U] | NothingType) -> Some[tuple[T, U]] | NothingType:
        """Combine two Some values into a tuple.

        If both are Some, returns Some((self.value, other.value)).
        If either is Nothing, returns Nothing.
        """
        if isinstance(other, Some):
            return Some((self.value, other.value))
        return Nothing

    def flatten[U](self: Some[Some[U] | NothingType]) -> Some[U] | NothingType:
        """Flatten a nested Option.

        Converts Option[Option[T]] into Option[T].
        """
        return self.value  # type: ignore[return-value]


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    Operations on Nothing return Nothing or the supplied fallback; no
    callback that expects a value is ever invoked.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def __iter__(self) -> Iterator[object]:
        """Yield nothing."""
        return iter(())

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True if the option is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the option is Nothing.
        """
        return True

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def fold[T, R](self, on_none: Callable[[], R], on_some: Callable[[T], R]) -> R:  # noqa: ARG002
        """Call on_none since there is no value."""
        return on_none()

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    def or_else[T](self, f: Callable[[], Some[T] | NothingType]) -> Some[T] | NothingType:
        """Apply a recovery function since this is Nothing.

        Args:
            f: Function that returns a new Option.

        Returns:
            The Option returned by f.
        """
        return f()

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self

    def ok_or[E](self, err: E) -> Err[E]:
        """Convert to Result, returning Err(err)."""
        from fp_prelude.result import Err

        return Err(err)

    def ok_or_else[E](self, f: Callable[[], E]) -> Err[E]:
        """Convert to Result, computing the error.

        Args:
            f: Function that produces the error value.

        Returns:
            Err containing the computed error.
        """
        from fp_prelude.result import Err

        return Err(f())

    def zip[U](self, _other: Some[U] | NothingType) -> NothingType:
        """Return Nothing since self is Nothing."""
        return self

    def flatten(self) -> NothingType:
        """Return Nothing since there's nothing to flatten."""
        return self


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""

none: NothingType = Nothing
"""Alias of Nothing, mirroring some()."""


type Option[T] = Some[T] | NothingType


# ---------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------


def some[T](value: T) -> Option[T]:
    """Wrap a value in Some."""
    return Some(value)


def from_nullable[T](value: T | None) -> Option[T]:
    """Lift a possibly-missing value into an Option.

    None and Nothing itself become Nothing; every other value, falsy ones
    included, becomes Some(value).

    Examples:
        >>> from_nullable(None)
        NothingType()
        >>> from_nullable(0)
        Some(value=0)
    """
    if value is None or isinstance(value, NothingType):
        return Nothing
    return Some(value)


def from_predicate[T](predicate: Callable[[T], bool]) -> Callable[[T], Option[T]]:
    """Build a function returning Some(value) when predicate(value) holds.

    The predicate is called exactly once per call.

    Example:
        ```python
        positive = from_predicate(lambda x: x > 0)
        positive(3)  # Some(value=3)
        positive(-1)  # Nothing
        ```
    """

    def _from_predicate(value: T) -> Option[T]:
        return Some(value) if predicate(value) else Nothing

    return _from_predicate


# ---------------------------------------------------------------------
# Point-free combinators
# ---------------------------------------------------------------------


def is_some[T](option: Option[T]) -> TypeIs[Some[T]]:
    """Return True if the option is Some."""
    return isinstance(option, Some)


def is_none[T](option: Option[T]) -> TypeIs[NothingType]:
    """Return True if the option is Nothing."""
    return isinstance(option, NothingType)


def map[T, U](f: Callable[[T], U]) -> Callable[[Option[T]], Option[U]]:  # noqa: A001
    """Point-free Option.map."""

    def _map(option: Option[T]) -> Option[U]:
        return option.map(f)

    return _map


def chain[T, U](f: Callable[[T], Option[U]]) -> Callable[[Option[T]], Option[U]]:
    """Point-free Option.and_then; Nothing short-circuits without calling f."""

    def _chain(option: Option[T]) -> Option[U]:
        return option.and_then(f)

    return _chain


def filter[T](predicate: Callable[[T], bool]) -> Callable[[Option[T]], Option[T]]:  # noqa: A001
    """Point-free Option.filter."""

    def _filter(option: Option[T]) -> Option[T]:
        return option.filter(predicate)

    return _filter


def or_else[T](f: Callable[[], Option[T]]) -> Callable[[Option[T]], Option[T]]:
    """Point-free Option.or_else."""

    def _or_else(option: Option[T]) -> Option[T]:
        return option.or_else(f)

    return _or_else


def fold[T, R](on_none: Callable[[], R], on_some: Callable[[T], R]) -> Callable[[Option[T]], R]:
    """Point-free Option.fold: exactly one of the branches runs."""

    def _fold(option: Option[T]) -> R:
        return option.fold(on_none, on_some)

    return _fold


def get_or_else[T](on_none: Callable[[], T]) -> Callable[[Option[T]], T]:
    """Point-free Option.unwrap_or_else; on_none is only called for Nothing."""

    def _get_or_else(option: Option[T]) -> T:
        return option.unwrap_or_else(on_none)

    return _get_or_else


def to_result[T, E](on_none: Callable[[], E]) -> Callable[[Option[T]], Result[T, E]]:
    """Require a value: Some(x) becomes Ok(x), Nothing becomes Err(on_none())."""

    def _to_result(option: Option[T]) -> Result[T, E]:
        return option.ok_or_else(on_none)

    return _to_result


def sequence[T](options: Iterable[Option[T]]) -> Option[list[T]]:
    """Turn an iterable of Options into an Option of list.

    Stops at the first Nothing.

    Examples:
        >>> sequence([Some(1), Some(2)])
        Some(value=[1, 2])
        >>> sequence([Some(1), Nothing])
        NothingType()
    """
    values: list[T] = []
    for option in options:
        if isinstance(option, NothingType):
            return Nothing
        values.append(option.value)
    return Some(values)
