"""
Flow context shared by the inlet profiles and the force post-processor.

Holds the current angle of attack. One context is created by the harness
that owns the plugin and handed to every callback, so the profiles and the
on-demand command always agree on the angle.
"""

from __future__ import annotations
from dataclasses import dataclass
import numpy as np


@dataclass
class FlowContext:
    """
    Mutable per-process flow state.

    Attributes:
        aoa_deg: Latest angle of attack [deg]. Starts at 0 and keeps its
            last value whenever the angle source cannot be read.
    """
    aoa_deg: float = 0.0

    @property
    def aoa_rad(self) -> float:
        """Angle of attack in radians."""
        return float(np.radians(self.aoa_deg))
