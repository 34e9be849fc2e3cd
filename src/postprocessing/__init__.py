"""
Post-processing module.

Reduces surface force/moment integrals to aerodynamic coefficients.

Key classes:
- FlowContext: Current angle of attack shared by all callbacks
- ForceMomentSample: Force and moment on a surface
- CoefficientRecord: One row of the results log
- ForceCoefficientProcessor: On-demand force -> coefficient command
"""

from .context import FlowContext
from .forces import (
    ForceMomentSample,
    ReferencePoint,
    CoefficientRecord,
    wind_axes,
    dynamic_pressure,
    compute_coefficients,
)
from .coefficients import ForceCoefficientProcessor

__all__ = [
    # State
    "FlowContext",
    # Force data
    "ForceMomentSample",
    "ReferencePoint",
    "CoefficientRecord",
    # Reduction
    "wind_axes",
    "dynamic_pressure",
    "compute_coefficients",
    # Processor
    "ForceCoefficientProcessor",
]
