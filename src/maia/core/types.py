"""Reusable type definitions for function-valued values.

This module provides type variables and callable aliases that can be used
across different parts of the package to annotate lambdas consistently.

Type Aliases:
    Supplier: A zero-argument function producing a value.
    Unary: A function of exactly one argument.
"""

from typing import Any, Callable, TypeVar

__all__ = [
    "T",
    "R",
    "F",
    "Supplier",
    "Unary",
]

T = TypeVar("T")
R = TypeVar("R")

# Any callable, preserved exactly by identity-style helpers
F = TypeVar("F", bound=Callable[..., Any])

Supplier = Callable[[], T]
Unary = Callable[[T], R]
