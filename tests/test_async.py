"""Test wrapping coroutine functions."""

import asyncio
import inspect

import pytest

from typewrap import ParameterTypeError, ReturnTypeError, typed, wrap


@pytest.mark.integration
@pytest.mark.wrapper
class TestAsyncTargets:
    """Coroutine functions: arguments checked on call, return checked after await."""

    @pytest.mark.skipif(
        not hasattr(inspect, "markcoroutinefunction"),
        reason="inspect.markcoroutinefunction needs Python 3.12",
    )
    def test_wrapper_is_coroutine_function(self):
        async def fetch(x):
            return x

        assert inspect.iscoroutinefunction(wrap(fetch, "number"))

    def test_call_returns_awaitable(self):
        async def fetch(x):
            return x

        pending = wrap(fetch, "number")(1)

        assert inspect.iscoroutine(pending)
        assert asyncio.run(pending) == 1

    def test_resolved_value_is_checked(self):
        @typed("number", returns="string")
        async def label(x):
            await asyncio.sleep(0)
            return f"#{x}"

        assert asyncio.run(label(3)) == "#3"

    def test_resolved_value_failure(self):
        calls = []

        @typed("number", returns="string")
        async def label(x):
            calls.append(x)
            return x

        with pytest.raises(ReturnTypeError, match="expected string, got int"):
            asyncio.run(label(3))
        assert calls == [3]

    def test_arguments_checked_before_target_runs(self):
        calls = []

        @typed("number")
        async def label(x):
            calls.append(x)
            return x

        # Raised by the call itself, before any coroutine exists
        with pytest.raises(ParameterTypeError, match="Parameter 0 \\(x\\)"):
            label("3")
        assert calls == []

    def test_plain_function_returning_awaitable(self):
        # Only coroutine functions are awaited; other callables are checked as returned
        async def inner():
            return 1

        def schedule():
            return inner()

        checked = wrap(schedule, returns="number")

        with pytest.raises(ReturnTypeError, match="got coroutine") as exc_info:
            checked()

        exc_info.value.value.close()
