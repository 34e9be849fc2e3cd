"""
On-demand force coefficient processor.

Computes Cd, Cl and moment coefficients for one surface and appends them
to the results log. Triggered explicitly (not every iteration).
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

from core.io.angle_source import AngleSource
from core.io.results_log import CoefficientLogWriter
from .context import FlowContext
from .forces import CoefficientRecord, ReferencePoint, compute_coefficients

if TYPE_CHECKING:
    from solvers.host import HostSolver


class ForceCoefficientProcessor:
    """
    Surface force -> coefficient post-processor.

    Steps:
    1. Refresh the angle of attack
    2. Resolve the surface (abort with a message if unknown)
    3. Ask the host for force/moment about the quarter-chord point
       (abort with a message if the host cannot supply it)
    4. Rotate into wind axes and non-dimensionalise
    5. Append a row to the results log and print a summary

    Usage:
        processor = ForceCoefficientProcessor(
            host, angle_source, writer,
            surface_zone=5, v_inf=16.0, rho=1.225, aref=0.4, lref=0.435
        )
        record = processor(context)   # None if the surface was not found
    """

    def __init__(
        self,
        host: HostSolver,
        angle_source: AngleSource,
        writer: CoefficientLogWriter,
        surface_zone: int | str,
        v_inf: float,
        rho: float,
        aref: float,
        lref: float
    ):
        self.host = host
        self.angle_source = angle_source
        self.writer = writer
        self.surface_zone = surface_zone
        self.v_inf = v_inf
        self.rho = rho
        self.aref = aref
        self.lref = lref

    @property
    def reference_point(self) -> ReferencePoint:
        """Moment reference (quarter-chord)."""
        return ReferencePoint.quarter_chord(self.lref)

    def __call__(self, context: FlowContext) -> Optional[CoefficientRecord]:
        """
        Run the post-processor once.

        Args:
            context: Shared flow context

        Returns:
            The record written, or None if the surface could not be resolved
            or the host could not supply force/moment
        """
        self.angle_source.refresh(context)

        surface = self.host.lookup_surface(self.surface_zone)
        if surface is None:
            self.host.message(
                f"aoa_udf: ERROR - zone id {self.surface_zone} not found. "
                f"Edit surface_zone."
            )
            return None

        try:
            sample = self.host.compute_force_and_moment(surface, self.reference_point)
        except (OSError, ValueError, KeyError) as e:
            self.host.message(
                f"aoa_udf: ERROR - force/moment for zone {self.surface_zone} "
                f"unavailable: {e}"
            )
            return None

        record = compute_coefficients(
            sample,
            aoa_deg=context.aoa_deg,
            rho=self.rho,
            v_inf=self.v_inf,
            aref=self.aref,
            lref=self.lref
        )

        try:
            self.writer.append(record)
        except OSError as e:
            self.host.message(f"aoa_udf: WARNING - cannot write {self.writer.path}: {e}")

        self.host.message(record.summary())
        return record

    def __repr__(self) -> str:
        return (f"ForceCoefficientProcessor(zone={self.surface_zone!r}, "
                f"v_inf={self.v_inf}, rho={self.rho}, aref={self.aref}, lref={self.lref})")
