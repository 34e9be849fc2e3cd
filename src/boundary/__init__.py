"""Boundary-condition profiles supplied to the host solver."""

from .profiles import InletVelocityProfile, VelocityComponent

__all__ = [
    "InletVelocityProfile",
    "VelocityComponent",
]
