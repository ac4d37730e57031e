"""Core type definitions and configuration."""

from maia.core.types import T, R, F, Supplier, Unary
from maia.core.config import Settings, settings

__all__ = [
    "T",
    "R",
    "F",
    "Supplier",
    "Unary",
    "Settings",
    "settings",
]
