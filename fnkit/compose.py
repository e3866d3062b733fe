"""Higher-order helpers for composing and reshaping functions."""

import functools
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")
R = TypeVar("R")
S = TypeVar("S")


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions right-to-left: compose(f, g)(x) == f(g(x)).

    Example:
        >>> add_one = lambda x: x + 1
        >>> double = lambda x: x * 2
        >>> compose(double, add_one)(3)
        8
    """

    def composed(x: Any) -> Any:
        result = x
        for fn in reversed(fns):
            result = fn(result)
        return result

    return composed


def pipe(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions left-to-right: pipe(f, g)(x) == g(f(x))."""

    def piped(x: Any) -> Any:
        result = x
        for fn in fns:
            result = fn(result)
        return result

    return piped


def negate(predicate: Callable[[T], bool]) -> Callable[[T], bool]:
    @functools.wraps(predicate)
    def negated(x: T) -> bool:
        return not predicate(x)

    return negated


def wrap(
    fn: Callable[[T], R], wrapper: Callable[[Callable[[T], R], T], S]
) -> Callable[[T], S]:
    """Hand ``fn`` to ``wrapper`` as its first argument on every call.

    Example:
        >>> hello = lambda name: "Hello " + name
        >>> shout = wrap(hello, lambda f, name: f(name) + "!")
        >>> shout("John")
        'Hello John!'
    """

    def wrapped(arg: T) -> S:
        return wrapper(fn, arg)

    return wrapped


def partial(fn: Callable[[T, T], R], first: T) -> Callable[[T], R]:
    """Bind the first of two arguments."""

    def applied(arg: T) -> R:
        return fn(first, arg)

    return applied


def rearg(fn: Callable[[T, T], R]) -> Callable[[T, T], R]:
    """Swap the two arguments of ``fn``."""

    def swapped(a: T, b: T) -> R:
        return fn(b, a)

    return swapped


def spread(fn: Callable[[T, T], R]) -> Callable[[Sequence[T]], R | None]:
    """Call a two-argument ``fn`` with the first two items of a sequence.

    Sequences shorter than two items return None without calling ``fn``.
    """

    def spreaded(args: Sequence[T]) -> R | None:
        if len(args) < 2:
            return None
        return fn(args[0], args[1])

    return spreaded


def curry(fn: Callable[..., R], arity: int = 2) -> Callable[[Any], Any]:
    """Take ``fn``'s arguments one call at a time.

    Each call supplies one argument. Once ``arity`` arguments are collected,
    ``fn`` is invoked with them and its result returned.

    Example:
        >>> add = curry(lambda a, b: a + b)
        >>> add(1)(2)
        3
    """
    if arity < 1:
        raise ValueError(f"arity must be at least 1, got {arity}")

    def collect(collected: tuple[Any, ...]) -> Callable[[Any], Any]:
        def step(arg: Any) -> Any:
            args = collected + (arg,)
            if len(args) >= arity:
                return fn(*args)
            return collect(args)

        return step

    return collect(())
