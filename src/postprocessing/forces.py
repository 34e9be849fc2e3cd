"""
Surface force reduction: wind-axis rotation and aerodynamic coefficients.

Takes the integrated force/moment on a surface (as returned by the host
solver) and reduces it to drag, lift and moment coefficients.

Conventions:
- Freestream lies in the X-Y plane at angle a from +X.
- Drag is along the freestream, lift is perpendicular to it (+90° in X-Y).
- Fz is reported but not decomposed.
- Moments are taken about the quarter-chord point (0.25*LREF, 0, 0).
"""

from __future__ import annotations
from dataclasses import dataclass, astuple
from typing import Tuple
import numpy as np
from numpy.typing import NDArray


@dataclass
class ForceMomentSample:
    """
    Force and moment on a surface about a reference point.

    Both vectors are (3,) arrays in body (solver) axes, [N] and [N·m].
    """
    force: NDArray[np.float64]
    moment: NDArray[np.float64]

    def __post_init__(self):
        self.force = np.asarray(self.force, dtype=np.float64).reshape(3)
        self.moment = np.asarray(self.moment, dtype=np.float64).reshape(3)

    @classmethod
    def from_components(cls, Fx: float, Fy: float, Fz: float,
                        Mx: float = 0.0, My: float = 0.0, Mz: float = 0.0) -> ForceMomentSample:
        """Build a sample from its six scalar components."""
        return cls(force=np.array([Fx, Fy, Fz]), moment=np.array([Mx, My, Mz]))

    @property
    def Fx(self) -> float:
        return float(self.force[0])

    @property
    def Fy(self) -> float:
        return float(self.force[1])

    @property
    def Fz(self) -> float:
        return float(self.force[2])

    @property
    def Mx(self) -> float:
        return float(self.moment[0])

    @property
    def My(self) -> float:
        return float(self.moment[1])

    @property
    def Mz(self) -> float:
        return float(self.moment[2])


@dataclass(frozen=True)
class ReferencePoint:
    """Moment reference point [m]."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def quarter_chord(cls, lref: float) -> ReferencePoint:
        """Quarter-chord, mid-span, zero-height point for chord lref."""
        return cls(x=0.25 * lref, y=0.0, z=0.0)

    def to_array(self) -> NDArray[np.float64]:
        return np.array([self.x, self.y, self.z], dtype=np.float64)


@dataclass
class CoefficientRecord:
    """
    One row of the results log.

    Field order is the column order of the log and must not change.
    """
    aoa: float
    Fx: float
    Fy: float
    Fz: float
    Fd: float
    Fl: float
    Cd: float
    Cl: float
    Mx: float
    My: float
    Mz: float
    Cmx: float
    Cmy: float
    Cmz: float

    def as_row(self) -> Tuple[float, ...]:
        """Values in log column order."""
        return astuple(self)

    def summary(self) -> str:
        """Single-line human readable summary."""
        return (
            f"AoA {self.aoa:g} deg: "
            f"Fx={self.Fx:g} Fy={self.Fy:g} Fz={self.Fz:g} "
            f"Fd={self.Fd:g} Fl={self.Fl:g} Cd={self.Cd:g} Cl={self.Cl:g} | "
            f"Mx={self.Mx:g} My={self.My:g} Mz={self.Mz:g} "
            f"Cmx={self.Cmx:g} Cmy={self.Cmy:g} Cmz={self.Cmz:g}"
        )


def wind_axes(Fx: float, Fy: float, aoa_rad: float) -> Tuple[float, float]:
    """
    Rotate a body-axis force into drag/lift.

    Args:
        Fx, Fy: Force components in body axes
        aoa_rad: Angle of attack [rad]

    Returns:
        (drag, lift)
    """
    c, s = np.cos(aoa_rad), np.sin(aoa_rad)
    drag = Fx * c + Fy * s
    lift = -Fx * s + Fy * c
    return float(drag), float(lift)


def dynamic_pressure(rho: float, v_inf: float) -> float:
    """q_inf = 0.5 * rho * v_inf^2."""
    return 0.5 * rho * v_inf**2


def compute_coefficients(
    sample: ForceMomentSample,
    aoa_deg: float,
    rho: float,
    v_inf: float,
    aref: float,
    lref: float
) -> CoefficientRecord:
    """
    Reduce a force/moment sample to aerodynamic coefficients.

    Cd, Cl use q*AREF, moment coefficients use q*AREF*LREF. When q*AREF
    is zero every coefficient is 0.0 (never NaN or inf).

    Args:
        sample: Force/moment about the reference point
        aoa_deg: Angle of attack [deg]
        rho: Density [kg/m³]
        v_inf: Freestream speed [m/s]
        aref: Reference area [m²]
        lref: Reference length [m]

    Returns:
        CoefficientRecord with all 14 values
    """
    Fd, Fl = wind_axes(sample.Fx, sample.Fy, np.radians(aoa_deg))

    q_inf = dynamic_pressure(rho, v_inf)
    q_area = q_inf * aref
    q_area_length = q_area * lref

    Cd = Cl = 0.0
    Cmx = Cmy = Cmz = 0.0
    if q_area != 0.0:
        Cd = Fd / q_area
        Cl = Fl / q_area
        # lref is validated > 0 in config; guard for direct callers
        if q_area_length != 0.0:
            Cmx = sample.Mx / q_area_length
            Cmy = sample.My / q_area_length
            Cmz = sample.Mz / q_area_length

    return CoefficientRecord(
        aoa=float(aoa_deg),
        Fx=sample.Fx, Fy=sample.Fy, Fz=sample.Fz,
        Fd=Fd, Fl=Fl,
        Cd=float(Cd), Cl=float(Cl),
        Mx=sample.Mx, My=sample.My, Mz=sample.Mz,
        Cmx=float(Cmx), Cmy=float(Cmy), Cmz=float(Cmz),
    )
