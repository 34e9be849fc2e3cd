"""Angle-of-attack UDF plugin: inlet profiles and force coefficients."""

from .plugin import AoAPlugin

__all__ = [
    "AoAPlugin",
]
