"""@safe and @safe_async decorators for catching exceptions."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from fp_prelude.async_.result import AsyncResult
from fp_prelude.result import Err, Ok, try_catch

__all__ = ['safe', 'safe_async']

P = ParamSpec('P')
T = TypeVar('T')
E = TypeVar('E', bound=Exception)


def _catching(catch: tuple[type[Exception], ...]) -> Callable[[Exception], Any]:
    """Keep exceptions of the given types as the error, re-raise the rest.

    Raises:
        TypeError: If a listed type is not an Exception subclass; those are
            never captured.
    """
    for exc_type in catch:
        if not (isinstance(exc_type, type) and issubclass(exc_type, Exception)):
            msg = f'exceptions must be Exception subclasses, got {exc_type!r}'
            raise TypeError(msg)

    def on_error(exc: Exception) -> Any:
        if not isinstance(exc, catch):
            raise exc
        return exc

    return on_error


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Ok[T] | Err[Exception]]: ...


@overload
def safe[E: Exception](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, T]], Callable[P, Ok[T] | Err[E]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator that catches exceptions and returns Err.

    Wraps a function so that it returns Ok(value) on success and
    Err(exception) if an exception is raised. Shares the capture boundary of
    result.try_catch.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of Exception types to catch. Defaults to (Exception,);
            other exceptions propagate. BaseException-only types such as
            KeyboardInterrupt are rejected with TypeError.

    Returns:
        A wrapped function that returns Result[T, E] instead of T.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Ok(value=5.0)
        divide(10, 0)
        # Err(error=ZeroDivisionError('division by zero'))
        ```
    """
    on_error = _catching(exceptions if exceptions is not None else (Exception,))

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[Any]:
        return try_catch(lambda: wrapped(*args, **kwargs), on_error)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Ok[T] | Err[Exception]]]: ...


@overload
def safe_async[E: Exception](
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Ok[T] | Err[E]]]]: ...


def safe_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Async decorator that catches exceptions and returns Err.

    Wraps an async function so that it returns Ok(value) on success and
    Err(exception) if an exception is raised. Shares the capture boundary of
    AsyncResult.try_catch.

    Can be used with or without arguments:
        @safe_async
        async def risky(): ...

        @safe_async(exceptions=(ValueError, TypeError))
        async def specific(): ...

    Args:
        func: The async function to wrap (when used without parentheses).
        exceptions: Tuple of Exception types to catch. Defaults to (Exception,).
            BaseException-only types are rejected with TypeError.

    Returns:
        A wrapped async function that returns Result[T, E] instead of T.

    Example:
        ```python
        @safe_async
        async def fetch(url: str) -> str:
            # may raise
            return await http_get(url)
        ```
    """
    on_error = _catching(exceptions if exceptions is not None else (Exception,))

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Ok[T] | Err[Any]:
        return await AsyncResult.try_catch(lambda: wrapped(*args, **kwargs), on_error)

    if func is not None:
        return wrapper(func)
    return wrapper
