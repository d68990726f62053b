"""fp-prelude: Option, Result and AsyncResult with pipe-friendly combinators.

Flat imports (preferred):
    from fp_prelude import Result, Ok, Err, Option, Some, Nothing, AsyncResult
    from fp_prelude import pipe, flow, curry, safe, safe_async

Point-free combinators, one namespace per type:
    from fp_prelude import option, result, async_result

    pipe(
        option.from_nullable(5),
        option.map(lambda x: x + 3),
        option.get_or_else(lambda: 0),
    )  # 8
"""

# Types and their point-free namespaces
from fp_prelude import async_ as async_result
from fp_prelude import option, result

# Configuration
from fp_prelude._config import PreludeConfig, init
from fp_prelude.async_ import AsyncResult

# Composition
from fp_prelude.compose import constant, curry, flow, identity, pipe

# Decorators
from fp_prelude.decorators import safe, safe_async

# Errors
from fp_prelude.errors import PreludeError, ThrownValueError, to_error
from fp_prelude.option import Nothing, NothingType, Option, Some
from fp_prelude.result import Err, ErrorOr, Ok, Result

__all__ = [
    # Async
    'AsyncResult',
    # Result types
    'Err',
    'ErrorOr',
    # Option types
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    # Configuration
    'PreludeConfig',
    # Errors
    'PreludeError',
    'Result',
    'Some',
    'ThrownValueError',
    # Namespaces
    'async_result',
    # Composition
    'constant',
    'curry',
    'flow',
    'identity',
    'init',
    'option',
    'pipe',
    'result',
    # Decorators
    'safe',
    'safe_async',
    'to_error',
]
