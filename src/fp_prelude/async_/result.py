"""AsyncResult type for deferred Result computations.

AsyncResult wraps a zero-argument function returning an Awaitable[Result[T, E]].
It is a recipe, not an in-flight operation: every call (or await) runs the
wrapped function again, and transformations build new recipes without running
anything.

Example:
    ```python
    async def fetch_user(id: int) -> User: ...

    load = (
        AsyncResult.try_catch_error(lambda: fetch_user(1))
        .and_then(validate_user)
        .map(format_response)
    )

    first = await load()
    second = await load  # runs fetch_user again
    ```
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Coroutine, Generator
from typing import Any

from fp_prelude._logging import get_logger
from fp_prelude.errors import to_error
from fp_prelude.result import Err, Ok, Result

__all__ = [
    'AsyncResult',
    'chain',
    'err',
    'fold',
    'from_result',
    'get_or_else',
    'left',
    'map',
    'map_left',
    'ok',
    'right',
    'try_catch',
    'try_catch_error',
]

logger = get_logger(__name__)


async def _settle[T](result: Result[T, Any] | Awaitable[Result[T, Any]]) -> Result[T, Any]:
    """Await result unless it is already a Result."""
    if isinstance(result, Ok | Err):
        return result
    return await result


class AsyncResult[T, E]:
    """Re-invocable deferred computation producing a Result[T, E].

    Calling an AsyncResult returns a fresh coroutine that runs the wrapped
    function once; awaiting the AsyncResult directly does the same. Nothing is
    cached, so the same AsyncResult can be run any number of times.

    Values built with from_ok/from_err/from_result/try_catch_error/try_catch
    never raise when run: exceptions from the wrapped operation settle into an
    Err. Exceptions raised by callbacks given to map/and_then propagate, as
    they do for Result.

    Attributes:
        _thunk: The zero-argument function producing an awaitable Result.

    Example:
        ```python
        async def main():
            result = await AsyncResult.from_ok(21).map(lambda x: x * 2)
            assert result == Ok(42)

        anyio.run(main)
        ```
    """

    __slots__ = ('_thunk',)

    def __init__(self, thunk: Callable[[], Awaitable[Result[T, E]]]) -> None:
        """Create an AsyncResult from a zero-argument function.

        Args:
            thunk: Function returning an awaitable that produces a Result[T, E].
        """
        self._thunk = thunk

    def __call__(self) -> Coroutine[Any, Any, Result[T, E]]:
        """Start a new run of the computation."""
        return self._run()

    async def _run(self) -> Result[T, E]:
        return await self._thunk()

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        """Support await syntax; each await is a new run.

        Example:
            ```python
            async def example():
                result = await AsyncResult.from_ok(42)
                assert result == Ok(42)
            ```
        """
        return self._run().__await__()

    @classmethod
    def from_ok(cls, value: T) -> AsyncResult[T, E]:
        """Create an AsyncResult that settles to Ok(value)."""
        return cls.from_result(Ok(value))

    @classmethod
    def from_err(cls, error: E) -> AsyncResult[T, E]:
        """Create an AsyncResult that settles to Err(error)."""
        return cls.from_result(Err(error))

    @classmethod
    def from_result(cls, result: Result[T, E]) -> AsyncResult[T, E]:
        """Lift a synchronous Result into an immediately-settling AsyncResult.

        Args:
            result: A Result[T, E] value.

        Returns:
            AsyncResult producing that result on every run.
        """

        async def _result() -> Result[T, E]:
            return result

        return cls(_result)

    @classmethod
    def try_catch(
        cls,
        thunk: Callable[[], Awaitable[T]],
        on_error: Callable[[Exception], E],
    ) -> AsyncResult[T, E]:
        """Wrap an operation whose awaitable may raise.

        Each run calls thunk and awaits what it returns. A normal result
        becomes Ok(value); an Exception raised by thunk itself or while
        awaiting becomes Err(on_error(exc)). Cancellation and other
        BaseExceptions propagate.

        Args:
            thunk: Zero-argument function returning an awaitable.
            on_error: Maps the caught exception to the error payload.

        Returns:
            AsyncResult that never raises for failures of thunk.
        """

        async def _attempt() -> Result[T, E]:
            try:
                value = await thunk()
            except Exception as exc:
                error = on_error(exc)
                logger.debug('exception captured', exc_type=type(exc).__name__)
                return Err(error)
            return Ok(value)

        return cls(_attempt)

    @classmethod
    def try_catch_error(cls, thunk: Callable[[], Awaitable[T]]) -> AsyncResult[T, Exception]:
        """Wrap an operation whose awaitable may raise, keeping the exception.

        Example:
            ```python
            async def spin(player: str) -> str:
                if random.random() < 1 / 6:
                    raise RuntimeError(f'{player} is dead!')
                return f'{player} is safe...'

            safe_spin = AsyncResult.try_catch_error(lambda: spin('Bob'))
            await safe_spin()  # Ok('Bob is safe...') or Err(RuntimeError(...))
            ```
        """
        return cls.try_catch(thunk, to_error)  # type: ignore[return-value]

    def map[U](self, f: Callable[[T], U]) -> AsyncResult[U, E]:
        """Apply a sync function to the Ok value once the computation settles.

        If the underlying Result is Ok, applies f to the value.
        If Err, returns the Err unchanged without calling f.

        Args:
            f: Sync function to apply to the Ok value.

        Returns:
            New AsyncResult with the transformed value.
        """

        async def _mapped() -> Result[U, E]:
            return (await self._run()).map(f)

        return AsyncResult(_mapped)

    def map_async[U](self, f: Callable[[T], Awaitable[U]]) -> AsyncResult[U, E]:
        """Apply an async function to the Ok value.

        If the underlying Result is Ok, awaits f(value).
        If Err, returns the Err unchanged.

        Args:
            f: Async function to apply to the Ok value.

        Returns:
            New AsyncResult with the transformed value.
        """

        async def _mapped() -> Result[U, E]:
            result = await self._run()
            if isinstance(result, Ok):
                return Ok(await f(result.value))
            return result

        return AsyncResult(_mapped)

    def map_err[F](self, f: Callable[[E], F]) -> AsyncResult[T, F]:
        """Apply a sync function to the Err value.

        If the underlying Result is Err, applies f to the error.
        If Ok, returns the Ok unchanged.

        Args:
            f: Sync function to apply to the Err value.

        Returns:
            New AsyncResult with the transformed error.
        """

        async def _mapped() -> Result[T, F]:
            return (await self._run()).map_err(f)

        return AsyncResult(_mapped)

    def and_then[U](
        self,
        f: Callable[[T], Result[U, E] | Awaitable[Result[U, E]]],
    ) -> AsyncResult[U, E]:
        """Chain with a function returning a Result, an AsyncResult or any awaitable Result.

        If Ok, calls f(value) and settles what it returns.
        If Err, returns the Err unchanged without calling f.

        Args:
            f: Function that takes T and returns Result[U, E] or an awaitable of it.

        Returns:
            New AsyncResult with the chained result.

        Example:
            ```python
            def validate(x: int) -> Result[int, str]:
                return Ok(x) if x > 0 else Err('not positive')

            async def example():
                result = await AsyncResult.from_ok(5).and_then(validate)
                assert result == Ok(5)
            ```
        """

        async def _chained() -> Result[U, E]:
            result = await self._run()
            if isinstance(result, Ok):
                return await _settle(f(result.value))
            return result

        return AsyncResult(_chained)

    def or_else[F](
        self,
        f: Callable[[E], Result[T, F] | Awaitable[Result[T, F]]],
    ) -> AsyncResult[T, F]:
        """Recover from an Err.

        If Err, calls f(error) and settles what it returns.
        If Ok, returns the Ok unchanged.

        Args:
            f: Function that takes E and returns Result[T, F] or an awaitable of it.

        Returns:
            New AsyncResult with the recovery result.
        """

        async def _recovered() -> Result[T, F]:
            result = await self._run()
            if isinstance(result, Err):
                return await _settle(f(result.error))
            return result

        return AsyncResult(_recovered)

    async def fold[R](self, on_err: Callable[[E], R], on_ok: Callable[[T], R]) -> R:
        """Run the computation and fold the Result into a plain value."""
        return (await self._run()).fold(on_err, on_ok)

    async def unwrap_or(self, default: T) -> T:
        """Run the computation, returning the Ok value or the default."""
        return (await self._run()).unwrap_or(default)

    async def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Run the computation, returning the Ok value or f(error)."""
        return (await self._run()).unwrap_or_else(f)

    def __repr__(self) -> str:
        name = getattr(self._thunk, '__qualname__', None) or repr(self._thunk)
        return f'AsyncResult({name})'


# ---------------------------------------------------------------------
# Module-level constructors
# ---------------------------------------------------------------------


def ok[T](value: T) -> AsyncResult[T, Any]:
    """AsyncResult that settles to Ok(value)."""
    return AsyncResult.from_ok(value)


def err[E](error: E) -> AsyncResult[Any, E]:
    """AsyncResult that settles to Err(error)."""
    return AsyncResult.from_err(error)


right = ok
left = err


def from_result[T, E](result: Result[T, E]) -> AsyncResult[T, E]:
    """Lift a synchronous Result into an AsyncResult."""
    return AsyncResult.from_result(result)


def try_catch[T, E](
    thunk: Callable[[], Awaitable[T]],
    on_error: Callable[[Exception], E],
) -> AsyncResult[T, E]:
    """Module-level AsyncResult.try_catch."""
    return AsyncResult.try_catch(thunk, on_error)


def try_catch_error[T](thunk: Callable[[], Awaitable[T]]) -> AsyncResult[T, Exception]:
    """Module-level AsyncResult.try_catch_error."""
    return AsyncResult.try_catch_error(thunk)


# ---------------------------------------------------------------------
# Point-free combinators
# ---------------------------------------------------------------------


def map[T, U, E](  # noqa: A001
    f: Callable[[T], U | Awaitable[U]],
) -> Callable[[AsyncResult[T, E]], AsyncResult[U, E]]:
    """Point-free AsyncResult.map.

    f may be sync or async: whatever it returns is awaited when it is
    awaitable, so coroutine functions and lambdas returning a coroutine both
    work. Err passes through without calling f.
    """

    def _map(computation: AsyncResult[T, E]) -> AsyncResult[U, E]:
        async def _mapped() -> Result[U, E]:
            result = await computation()
            if isinstance(result, Err):
                return result
            value = f(result.value)
            if inspect.isawaitable(value):
                value = await value
            return Ok(value)

        return AsyncResult(_mapped)

    return _map


def map_left[T, E, F](f: Callable[[E], F]) -> Callable[[AsyncResult[T, E]], AsyncResult[T, F]]:
    """Point-free AsyncResult.map_err."""

    def _map_left(computation: AsyncResult[T, E]) -> AsyncResult[T, F]:
        return computation.map_err(f)

    return _map_left


def chain[T, U, E](
    f: Callable[[T], Result[U, E] | Awaitable[Result[U, E]]],
) -> Callable[[AsyncResult[T, E]], AsyncResult[U, E]]:
    """Point-free AsyncResult.and_then."""

    def _chain(computation: AsyncResult[T, E]) -> AsyncResult[U, E]:
        return computation.and_then(f)

    return _chain


def fold[T, E, R](
    on_left: Callable[[E], R],
    on_right: Callable[[T], R],
) -> Callable[[AsyncResult[T, E]], Coroutine[Any, Any, R]]:
    """Point-free AsyncResult.fold; returns a coroutine to await."""

    def _fold(computation: AsyncResult[T, E]) -> Coroutine[Any, Any, R]:
        return computation.fold(on_left, on_right)

    return _fold


def get_or_else[T, E](on_left: Callable[[E], T]) -> Callable[[AsyncResult[T, E]], Coroutine[Any, Any, T]]:
    """Point-free AsyncResult.unwrap_or_else; returns a coroutine to await."""

    def _get_or_else(computation: AsyncResult[T, E]) -> Coroutine[Any, Any, T]:
        return computation.unwrap_or_else(on_left)

    return _get_or_else
