"""Currying and small function combinators."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any

__all__ = ['Curried', 'constant', 'curry', 'identity']

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _signature(func: Callable[..., Any]) -> inspect.Signature:
    try:
        return inspect.signature(func)
    except (TypeError, ValueError) as exc:
        msg = f'Cannot determine the arity of {func!r}; pass arity= explicitly'
        raise TypeError(msg) from exc


def _required_names(signature: inspect.Signature) -> tuple[str, ...]:
    """Names of the positional parameters that have no default."""
    return tuple(
        name
        for name, param in signature.parameters.items()
        if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty
    )


class Curried:
    """A partially applied function waiting for the rest of its arguments.

    Arguments collected so far live in tuples, so every application returns a
    new Curried and two partial applications of the same function never see
    each other's arguments.

    With a signature, the function runs once every required positional
    parameter is bound, whether it was passed by position or by keyword.
    Without one, it runs once ``arity`` positional arguments are collected.

    Example:
        ```python
        add = curry(lambda x, y: x + y)
        three = add(3)
        three(3)  # 6
        add(3)(3) == add(3, 3)  # True
        add(y=3)(3)  # 6
        ```
    """

    def __init__(
        self,
        func: Callable[..., Any],
        arity: int,
        args: tuple[Any, ...] = (),
        kwargs: tuple[tuple[str, Any], ...] = (),
        signature: inspect.Signature | None = None,
    ) -> None:
        functools.update_wrapper(self, func)
        self._func = func
        self._arity = arity
        self._args = args
        self._kwargs = kwargs
        self._signature = signature
        self._required = _required_names(signature) if signature is not None else ()

    def _missing(self, args: tuple[Any, ...], kwargs: tuple[tuple[str, Any], ...]) -> int:
        if self._signature is None:
            return max(0, self._arity - len(args))
        bound = self._signature.bind_partial(*args, **dict(kwargs))
        return sum(1 for name in self._required if name not in bound.arguments)

    @property
    def arity(self) -> int:
        """Number of required arguments still missing."""
        return self._missing(self._args, self._kwargs)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        collected = self._args + args
        merged = (*self._kwargs, *kwargs.items())
        if self._missing(collected, merged) == 0:
            return self._func(*collected, **dict(merged))
        return Curried(self._func, self._arity, collected, merged, self._signature)

    def __repr__(self) -> str:
        return f'<curried {self._func!r} args={self._args!r}>'


def curry(func: Callable[..., Any] | None = None, *, arity: int | None = None) -> Any:
    """Curry a function.

    The curried function accepts its arguments one or several at a time and
    calls ``func`` once every required positional parameter is bound, by
    position or by keyword. Other keyword arguments are collected along the
    way and passed on the final call. With an explicit ``arity``, ``func`` is
    called once that many positional arguments have been collected.

    Can be used with or without arguments:
        @curry
        def add(x, y): ...

        @curry(arity=2)
        def scaled(x, y, factor=1): ...

    Args:
        func: The function to curry.
        arity: Positional arguments to collect before calling. Defaults to
            binding every required positional parameter of ``func``.

    Returns:
        A Curried wrapper around ``func``.

    Raises:
        TypeError: If ``arity`` is omitted and the signature of ``func``
            cannot be inspected.
    """

    def decorate(target: Callable[..., Any]) -> Curried:
        if arity is not None:
            return Curried(target, arity)
        signature = _signature(target)
        return Curried(target, len(_required_names(signature)), signature=signature)

    if func is not None:
        return decorate(func)
    return decorate


def identity[T](value: T) -> T:
    """Return the argument unchanged."""
    return value


def constant[T](value: T) -> Callable[..., T]:
    """Return a function that ignores its arguments and returns ``value``."""

    def _constant(*_: Any, **__: Any) -> T:
        return value

    return _constant
