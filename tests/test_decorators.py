"""Tests for @safe and @safe_async decorators."""

import pytest

from fp_prelude import Err, Ok, safe, safe_async


class TestSafe:
    """Tests for @safe decorator."""

    def test_safe_success(self):
        """@safe returns Ok on success."""

        @safe
        def divide(a, b):
            return a / b

        assert divide(10, 2) == Ok(5.0)

    def test_safe_exception(self):
        """@safe returns Err on exception."""

        @safe
        def divide(a, b):
            return a / b

        outcome = divide(10, 0)
        assert outcome.is_err()
        assert isinstance(outcome.error, ZeroDivisionError)

    def test_safe_with_specific_exceptions(self):
        """@safe(exceptions=...) catches only the listed types."""

        @safe(exceptions=(ValueError,))
        def parse(value):
            return int(value)

        assert parse('42') == Ok(42)
        assert isinstance(parse('nope').error, ValueError)

    def test_safe_unlisted_exception_propagates(self):
        """Exceptions outside the listed types are re-raised."""

        @safe(exceptions=(ValueError,))
        def lookup(key):
            return {}[key]

        with pytest.raises(KeyError):
            lookup('missing')

    @pytest.mark.parametrize('exc_type', [KeyboardInterrupt, SystemExit, BaseException])
    def test_safe_rejects_base_exception_types(self, exc_type):
        """Listing a type that is never captured fails at decoration time."""
        with pytest.raises(TypeError, match='Exception subclasses'):
            safe(exceptions=(exc_type,))
        with pytest.raises(TypeError, match='Exception subclasses'):
            safe_async(exceptions=(ValueError, exc_type))

    def test_safe_base_exception_propagates(self):
        """BaseExceptions are never captured."""

        @safe
        def leave():
            raise SystemExit(2)

        with pytest.raises(SystemExit):
            leave()

    def test_safe_preserves_metadata(self):
        """@safe keeps the function name and docstring."""

        @safe
        def documented():
            """Docstring here."""

        assert documented.__name__ == 'documented'
        assert documented.__doc__ == 'Docstring here.'

    def test_safe_on_method(self):
        """@safe works on methods."""

        class Parser:
            base = 10

            @safe
            def parse(self, value):
                return int(value, self.base)

        assert Parser().parse('12') == Ok(12)
        assert Parser().parse('x').is_err()

    def test_safe_kwargs(self):
        """Keyword arguments reach the wrapped function."""

        @safe
        def greet(name, *, punctuation='!'):
            return f'hi {name}{punctuation}'

        assert greet('Bob', punctuation='?') == Ok('hi Bob?')


class TestSafeAsync:
    """Tests for @safe_async decorator."""

    @pytest.mark.asyncio
    async def test_safe_async_success(self):
        """@safe_async returns Ok on success."""

        @safe_async
        async def fetch(value):
            return value * 2

        assert await fetch(21) == Ok(42)

    @pytest.mark.asyncio
    async def test_safe_async_exception(self):
        """@safe_async returns Err on exception."""

        @safe_async
        async def fetch():
            raise RuntimeError('unreachable')

        outcome = await fetch()
        assert isinstance(outcome, Err)
        assert str(outcome.error) == 'unreachable'

    @pytest.mark.asyncio
    async def test_safe_async_specific_exceptions(self):
        """@safe_async(exceptions=...) re-raises unlisted exceptions."""

        @safe_async(exceptions=(ValueError,))
        async def lookup(key):
            return {}[key]

        with pytest.raises(KeyError):
            await lookup('missing')

    @pytest.mark.asyncio
    async def test_safe_async_runs_each_call(self):
        """Each call runs the wrapped coroutine function again."""
        calls = []

        @safe_async
        async def record():
            calls.append(1)
            return len(calls)

        assert await record() == Ok(1)
        assert await record() == Ok(2)

    def test_safe_async_preserves_metadata(self):
        """@safe_async keeps the function name."""

        @safe_async
        async def fetch_user():
            """Fetch a user."""

        assert fetch_user.__name__ == 'fetch_user'
        assert fetch_user.__doc__ == 'Fetch a user.'
