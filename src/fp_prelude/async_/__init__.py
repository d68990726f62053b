"""Async utilities: AsyncResult and its combinators.

This module provides deferred, re-invocable Result computations:
- AsyncResult: recipe for a computation that settles into a Result
- sequence: run many AsyncResults concurrently and collect their values
- traverse: map items to AsyncResults and sequence them
- map, map_left, chain, fold, get_or_else: point-free forms for pipe()

The package is also exported as ``fp_prelude.async_result``.

Examples:
    >>> from fp_prelude.async_ import AsyncResult, sequence
    >>>
    >>> async def fetch(id: int) -> dict:
    ...     return {"id": id}
    >>>
    >>> async def main():
    ...     one = AsyncResult.try_catch_error(lambda: fetch(1)).map(lambda d: d["id"])
    ...     assert await one == Ok(1)
    ...     assert await sequence([one, one]) == Ok([1, 1])
"""

from fp_prelude.async_.itertools import sequence, traverse
from fp_prelude.async_.result import (
    AsyncResult,
    chain,
    err,
    fold,
    from_result,
    get_or_else,
    left,
    map,  # noqa: A004
    map_left,
    ok,
    right,
    try_catch,
    try_catch_error,
)

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
    'sequence',
    'traverse',
    'try_catch',
    'try_catch_error',
]
