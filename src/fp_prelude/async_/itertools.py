"""Collection utilities for AsyncResult: sequence and traverse.

Computations are started concurrently inside an anyio task group, so these
helpers run on asyncio and trio alike.

Examples:
    >>> safe_spin = lambda player: AsyncResult.try_catch_error(lambda: spin(player))
    >>> survivors = pipe(
    ...     ['Conner', 'Brian', 'Andy'],
    ...     traverse(safe_spin),
    ...     async_result.map(lambda _: 'Nobody dies!'),
    ... )
    >>> await survivors()
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import aiologic
import anyio

from fp_prelude._logging import get_logger
from fp_prelude.async_.result import AsyncResult
from fp_prelude.result import Result, sequence as sequence_results

__all__ = [
    'sequence',
    'traverse',
]

logger = get_logger(__name__)


def sequence[T, E](
    computations: Iterable[AsyncResult[T, E]],
    *,
    limit: int | None = None,
) -> AsyncResult[list[T], E]:
    """Combine AsyncResults into one AsyncResult of list.

    Each run starts every computation in input order without waiting for the
    previous ones, waits until all of them have settled, then returns
    Ok(values) in input order or the first Err by input order. A computation
    that settles to Err never aborts the others.

    An exception raised while running a computation (for example from a
    callback given to map or and_then) cancels the computations still in
    flight and propagates. A single exception is raised as is; several are
    raised together in an ExceptionGroup.

    Args:
        computations: The AsyncResults to run. Consumed once, when sequence is called.
        limit: Maximum number of computations in flight. None means unlimited.

    Returns:
        AsyncResult of Ok(list[T]) if all results are Ok, otherwise the first Err.

    Raises:
        ValueError: If limit is not a positive integer.

    Examples:
        >>> async def example():
        ...     runs = [AsyncResult.from_ok('safe') for _ in range(3)]
        ...     assert await sequence(runs) == Ok(['safe', 'safe', 'safe'])
    """
    if limit is not None and limit < 1:
        msg = f'limit must be a positive integer, got {limit!r}'
        raise ValueError(msg)

    items = tuple(computations)

    async def _sequenced() -> Result[list[T], E]:
        settled: list[Result[T, E] | None] = [None] * len(items)
        limiter = aiologic.CapacityLimiter(limit) if limit is not None else None

        async def run(index: int, computation: AsyncResult[T, E]) -> None:
            if limiter is None:
                settled[index] = await computation()
                return
            async with limiter:
                settled[index] = await computation()

        try:
            async with anyio.create_task_group() as tg:
                for index, computation in enumerate(items):
                    tg.start_soon(run, index, computation)
        except ExceptionGroup as group:
            if len(group.exceptions) == 1:
                raise group.exceptions[0] from None
            raise

        combined = sequence_results(result for result in settled if result is not None)
        logger.debug('sequence settled', size=len(items), failed=combined.is_err())
        return combined

    return AsyncResult(_sequenced)


def traverse[A, T, E](
    f: Callable[[A], AsyncResult[T, E]],
    *,
    limit: int | None = None,
) -> Callable[[Iterable[A]], AsyncResult[list[T], E]]:
    """Map each item to an AsyncResult and sequence them.

    Args:
        f: Builds the computation for one item.
        limit: Maximum number of computations in flight. None means unlimited.

    Returns:
        Function from an iterable of items to the sequenced AsyncResult.

    Examples:
        >>> checks = traverse(lambda n: AsyncResult.from_ok(n * 2))
        >>> await checks([1, 2, 3])
        Ok(value=[2, 4, 6])
    """

    def _traverse(items: Iterable[A]) -> AsyncResult[list[T], E]:
        return sequence([f(item) for item in items], limit=limit)

    return _traverse
