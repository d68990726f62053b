"""pipe() and flow() for left-to-right function composition."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

from fp_prelude.compose.curry import identity

__all__ = ['flow', 'pipe']

T = TypeVar('T')
T1 = TypeVar('T1')
T2 = TypeVar('T2')
T3 = TypeVar('T3')
T4 = TypeVar('T4')
T5 = TypeVar('T5')
T6 = TypeVar('T6')
T7 = TypeVar('T7')
T8 = TypeVar('T8')


# Overloads for type inference (up to 8 functions)
@overload
def pipe(value: T, /) -> T: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], /) -> T1: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], /) -> T2: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], fn3: Callable[[T2], T3], /) -> T3: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    /,
) -> T4: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    /,
) -> T5: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    fn6: Callable[[T5], T6],
    /,
) -> T6: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    fn6: Callable[[T5], T6],
    fn7: Callable[[T6], T7],
    /,
) -> T7: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    fn6: Callable[[T5], T6],
    fn7: Callable[[T6], T7],
    fn8: Callable[[T7], T8],
    /,
) -> T8: ...
@overload
def pipe(value: Any, /, *fns: Callable[[Any], Any]) -> Any: ...


def pipe(value: Any, /, *fns: Callable[[Any], Any]) -> Any:
    """Thread a value through functions, left to right.

    ``pipe(x, f, g, h)`` is ``h(g(f(x)))``. With no functions the value is
    returned as is. Nothing is caught: an exception raised by any function
    propagates to the caller.

    Args:
        value: The initial value.
        *fns: Unary functions to apply in sequence.

    Returns:
        The result of the last function.

    Example:
        ```python
        pipe(1, lambda x: x - 4, lambda x: x + 5, lambda x: x + 3)
        # 5

        pipe(from_nullable(5), option.map(lambda x: x + 3), option.get_or_else(lambda: 0))
        # 8
        ```
    """
    current = value
    for fn in fns:
        current = fn(current)
    return current


@overload
def flow() -> Callable[[T], T]: ...
@overload
def flow(fn1: Callable[..., T1], /) -> Callable[..., T1]: ...
@overload
def flow(fn1: Callable[..., T1], fn2: Callable[[T1], T2], /) -> Callable[..., T2]: ...
@overload
def flow(fn1: Callable[..., T1], fn2: Callable[[T1], T2], fn3: Callable[[T2], T3], /) -> Callable[..., T3]: ...
@overload
def flow(
    fn1: Callable[..., T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    /,
) -> Callable[..., T4]: ...
@overload
def flow(
    fn1: Callable[..., T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    /,
) -> Callable[..., T5]: ...
@overload
def flow(*fns: Callable[..., Any]) -> Callable[..., Any]: ...


def flow(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """Compose functions left to right into a single function.

    ``flow(f, g, h)(x)`` is ``pipe(x, f, g, h)``. The first function receives
    every argument the composed function is called with; the others are
    unary. Each call re-runs the whole chain.

    Args:
        *fns: Functions to compose.

    Returns:
        The composed function. ``flow()`` returns its single argument.

    Example:
        ```python
        word_count = flow(str.split, len)
        word_count('Three words long')  # 3
        ```
    """
    if not fns:
        return identity

    first, rest = fns[0], fns[1:]

    def composed(*args: Any, **kwargs: Any) -> Any:
        return pipe(first(*args, **kwargs), *rest)

    return composed
