"""Global pytest configuration for the typewrap test suite."""

import pytest

from typewrap import default_registry


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "descriptors: tests the descriptor model")
    config.addinivalue_line("markers", "wrapper: tests the validating wrapper")
    config.addinivalue_line("markers", "cli: tests the command line")


@pytest.fixture
def registry():
    """Fresh registry with the builtin predicates plus a few test ones."""
    reg = default_registry()

    @reg.register("even")
    def is_even(value):
        return isinstance(value, int) and value % 2 == 0

    return reg


@pytest.fixture
def calls():
    """Records invocations of the functions under test."""
    return []


@pytest.fixture
def add(calls):
    def add(x, y):
        calls.append((x, y))
        return x + y
    return add


@pytest.fixture
def complex_add(calls):
    """Adds two numbers or numeric strings; returns None when ``a`` is 0."""
    def complex_add(a, b):
        calls.append((a, b))
        if a == 0:
            return None
        return float(a) + float(b)
    return complex_add
