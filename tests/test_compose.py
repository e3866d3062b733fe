"""Tests for composition helpers."""

import pytest

from fnkit import compose, curry, negate, partial, pipe, rearg, spread, wrap


def add_one(x):
    return x + 1


def double(x):
    return x * 2


def test_compose_right_to_left():
    """Test that compose applies the last function first."""
    assert compose(double, add_one)(3) == 8
    assert compose(add_one, double)(3) == 7


def test_pipe_left_to_right():
    """Test that pipe applies the first function first."""
    assert pipe(add_one, double)(3) == 8
    assert pipe(double, add_one)(3) == 7


def test_compose_and_pipe_empty_are_identity():
    """Test that composing nothing returns the input."""
    assert compose()(5) == 5
    assert pipe()("x") == "x"


def test_negate():
    """Test that negate inverts a predicate."""

    def is_even(n):
        return n % 2 == 0

    is_odd = negate(is_even)

    assert is_odd(3) is True
    assert is_odd(4) is False


def test_wrap():
    """Test that wrap passes the wrapped function to the wrapper."""

    def hello(name):
        return "Hello " + name

    shout = wrap(hello, lambda f, name: f(name) + "!")

    assert shout("John") == "Hello John!"


def test_partial():
    """Test that partial binds the first argument."""

    def greet(greeting, name):
        return f"{greeting} {name}"

    say_hello = partial(greet, "Hello")

    assert say_hello("John") == "Hello John"


def test_rearg():
    """Test that rearg swaps the two arguments."""

    def subtract(a, b):
        return a - b

    assert rearg(subtract)(10, 2) == -8


def test_spread():
    """Test that spread unpacks the first two items."""

    def add(a, b):
        return a + b

    add_pair = spread(add)

    assert add_pair([1, 2]) == 3
    assert add_pair([1, 2, 99]) == 3
    assert add_pair([1]) is None
    assert add_pair([]) is None


def test_curry():
    """Test that curry collects one argument per call."""
    add = curry(lambda a, b: a + b)
    add_one_curried = add(1)

    assert add_one_curried(2) == 3
    assert add_one_curried(10) == 11

    volume = curry(lambda w, h, d: w * h * d, arity=3)
    assert volume(2)(3)(4) == 24


def test_curry_invalid_arity():
    """Test that a non-positive arity is rejected."""
    with pytest.raises(ValueError):
        curry(lambda: None, arity=0)
