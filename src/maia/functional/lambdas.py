"""Utilities for working with lambda blocks.

This module provides small higher-order helpers that make call-sites which
pass functions around easier to read. Every helper is stateless and
transparent: a wrapped block runs exactly when the wrapper is invoked, once
per invocation, and any exception it raises reaches the caller unchanged.

Python has a single calling convention for functions, so the receiver form of
a unary function is modelled as a function of ``self``, i.e. a function that
binds as a method once it is placed on a class:

    >>> from maia.functional.lambdas import to_receiver_form, to_explicit_form
    >>>
    >>> class Account:
    ...     def __init__(self, balance):
    ...         self.balance = balance
    ...
    ...     # The instance becomes the implicit receiver of the block
    ...     doubled = to_receiver_form(lambda account: account.balance * 2)
    >>>
    >>> Account(10).doubled()
    20
    >>> to_explicit_form(Account.doubled)(Account(4))
    8

Zero-argument helpers:

    >>> from maia.functional.lambdas import as_supplier, evaluate, discard_result
    >>>
    >>> supplier = as_supplier([1, 2, 3])
    >>> evaluate(supplier)
    [1, 2, 3]
    >>> discard_result(supplier) is None
    True
"""

import functools

from maia.core.types import F, R, T, Supplier, Unary
from maia.logger.logger import logger

__all__ = [
    "identify_as_function",
    "to_receiver_form",
    "to_explicit_form",
    "as_supplier",
    "evaluate",
    "discard_result",
    "noop",
]


def identify_as_function(value: F) -> F:
    """Identify a block as a lambda.

    Helper for the cases where a type checker cannot determine by itself that
    an expression should be treated as a function. The value is returned
    unchanged.

    Args:
        value: The body of the lambda function.

    Returns:
        The same lambda function.
    """
    return value


def to_receiver_form(block: Unary[T, R]) -> Unary[T, R]:
    """Convert a block taking an explicit argument into receiver form.

    The returned function takes its single argument as ``self`` and forwards
    it to ``block``. Being a plain function, it binds as a method when
    assigned to a class attribute, which makes the instance the implicit
    receiver of ``block``.

    Args:
        block: The block with an explicit argument.

    Returns:
        A function that, invoked with receiver ``x``, returns ``block(x)``.
    """
    logger.debug("Converting %r to receiver form", block)

    @functools.wraps(block, updated=())
    def receiver(self: T) -> R:
        return block(self)

    return receiver


def to_explicit_form(block: Unary[T, R]) -> Unary[T, R]:
    """Convert a receiver-style block into one taking an explicit argument.

    Inverse of :func:`to_receiver_form`. ``block`` may be any function of
    ``self``, including unbound methods such as ``str.upper``.

    Args:
        block: The block with an implicit receiver.

    Returns:
        A function that, invoked with ``it``, returns ``block(it)``.
    """
    logger.debug("Converting %r to explicit form", block)

    @functools.wraps(block, updated=())
    def explicit(it: T) -> R:
        return block(it)

    return explicit


def as_supplier(value: T) -> Supplier[T]:
    """Return a lambda which returns ``value`` when called.

    The value is captured now; every call returns that same object.
    """
    logger.debug("Capturing %s value as a supplier", type(value).__name__)

    def supplier() -> T:
        return value

    return supplier


def evaluate(block: Supplier[R]) -> R:
    """Execute the given block and return its result.

    Args:
        block: The block to evaluate.

    Returns:
        The return value of ``block``.
    """
    return block()


def discard_result(block: Supplier[T]) -> None:
    """Execute a block and discard its result.

    Useful when delegating to a value-producing function from a call-site
    which expects a function returning nothing.

    Args:
        block: The function to perform.
    """
    block()


def noop() -> None:
    """Do nothing."""
