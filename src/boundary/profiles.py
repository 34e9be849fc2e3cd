"""
Inlet velocity profiles driven by the angle of attack.

The inlet velocity is uniform: every face of the inlet gets the same
component, U_inf*cos(a) along X or U_inf*sin(a) along Y. The angle is
re-read from the angle source on every evaluation.
"""

from __future__ import annotations
from enum import Enum
import numpy as np
from numpy.typing import NDArray

from core.io.angle_source import AngleSource
from postprocessing.context import FlowContext


class VelocityComponent(str, Enum):
    """Freestream velocity component supplied by a profile."""
    ALONG_FLOW = "x"   # U_inf * cos(a)
    CROSS_FLOW = "y"   # U_inf * sin(a)


class InletVelocityProfile:
    """
    Boundary profile for one inlet velocity component.

    The host calls the profile once per boundary evaluation with the array
    of face values for the inlet; the profile fills it in place.

    Usage:
        u_profile = InletVelocityProfile(VelocityComponent.ALONG_FLOW, 16.0, source)
        faces = np.empty(n_faces)
        u_profile(context, faces)
    """

    def __init__(
        self,
        component: VelocityComponent | str,
        v_inf: float,
        angle_source: AngleSource
    ):
        """
        Args:
            component: ALONG_FLOW (x) or CROSS_FLOW (y)
            v_inf: Freestream speed [m/s]
            angle_source: Reader for the angle-of-attack file
        """
        self.component = VelocityComponent(component)
        self.v_inf = v_inf
        self.angle_source = angle_source

    def value(self, context: FlowContext) -> float:
        """Refresh the angle and return the velocity component [m/s]."""
        self.angle_source.refresh(context)
        a_rad = context.aoa_rad

        if self.component is VelocityComponent.ALONG_FLOW:
            return float(self.v_inf * np.cos(a_rad))
        return float(self.v_inf * np.sin(a_rad))

    def __call__(self, context: FlowContext, face_values: NDArray[np.float64]) -> NDArray[np.float64]:
        """
        Assign the component to every inlet face.

        Args:
            context: Shared flow context
            face_values: Host-owned per-face array, modified in place

        Returns:
            face_values
        """
        face_values[...] = self.value(context)
        return face_values

    def __repr__(self) -> str:
        return f"InletVelocityProfile({self.component.value}, v_inf={self.v_inf})"
