"""Functional primitives for Maia.

This module provides small helpers for working with function-valued values
(lambdas): converting between calling conventions, wrapping values as
suppliers and evaluating blocks. Utilities are stateless and transparent so
they can be dropped into any call-site that expects a callable.
"""

from maia.functional.lambdas import (
    identify_as_function,
    to_receiver_form,
    to_explicit_form,
    as_supplier,
    evaluate,
    discard_result,
    noop,
)

__all__ = [
    "identify_as_function",
    "to_receiver_form",
    "to_explicit_form",
    "as_supplier",
    "evaluate",
    "discard_result",
    "noop",
]
