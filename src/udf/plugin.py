"""
Plugin assembly.

Builds the angle source, results writer, inlet profiles and coefficient
processor from one configuration and exposes them as host callbacks.
"""

from __future__ import annotations
from pathlib import Path
from typing import Callable, Dict, Optional

import numpy as np
from numpy.typing import NDArray

from core.config.schemas import UDFConfig
from core.io.angle_source import AngleSource
from core.io.config_loader import ConfigLoader
from core.io.results_log import CoefficientLogWriter
from boundary.profiles import InletVelocityProfile, VelocityComponent
from postprocessing.context import FlowContext
from postprocessing.coefficients import ForceCoefficientProcessor
from postprocessing.forces import CoefficientRecord
from solvers.host import HostSolver


class AoAPlugin:
    """
    Angle-of-attack inlet + force coefficient plugin.

    Owns the flow context; every callback receives it explicitly.

    Usage:
        host = CannedHost({5: sample})
        plugin = AoAPlugin.from_file("udf.yaml", host)

        callbacks = plugin.entry_points()
        callbacks["inlet_U_profile"](u_faces)
        callbacks["inlet_V_profile"](v_faces)
        callbacks["compute_forces_and_write"]()
    """

    def __init__(
        self,
        config: UDFConfig,
        host: HostSolver,
        working_dir: Optional[str | Path] = None
    ):
        """
        Initialize plugin.

        Args:
            config: Validated plugin configuration
            host: Host solver interface
            working_dir: Directory for relative angle/results paths
                (None = process working directory at call time)
        """
        self.config = config
        self.host = host
        self.working_dir = Path(working_dir) if working_dir is not None else None

        self.host.verbose = config.verbose
        self.context = FlowContext()

        self.angle_source = AngleSource(self._resolve(config.files.angle_file))
        self.writer = CoefficientLogWriter(self._resolve(config.files.results_file))

        v_inf = config.freestream.velocity
        self.inlet_u_profile = InletVelocityProfile(
            VelocityComponent.ALONG_FLOW, v_inf, self.angle_source
        )
        self.inlet_v_profile = InletVelocityProfile(
            VelocityComponent.CROSS_FLOW, v_inf, self.angle_source
        )

        self.compute_forces_and_write = ForceCoefficientProcessor(
            host=host,
            angle_source=self.angle_source,
            writer=self.writer,
            surface_zone=config.surface_zone,
            v_inf=v_inf,
            rho=config.freestream.density,
            aref=config.reference.area,
            lref=config.reference.length,
        )

    @classmethod
    def from_file(
        cls,
        config_path: str | Path,
        host: HostSolver,
        working_dir: Optional[str | Path] = None
    ) -> AoAPlugin:
        """Build a plugin from a YAML configuration file."""
        return cls(ConfigLoader.load(config_path), host, working_dir=working_dir)

    def _resolve(self, filename: str) -> Path:
        path = Path(filename)
        if self.working_dir is None or path.is_absolute():
            return path
        return self.working_dir / path

    # -------------------------------------------------------------------------
    # Host callbacks
    # -------------------------------------------------------------------------

    def entry_points(self) -> Dict[str, Callable]:
        """
        Host callbacks with the context bound.

        Returns:
            inlet_U_profile(face_values), inlet_V_profile(face_values),
            compute_forces_and_write()
        """
        def inlet_U_profile(face_values: NDArray[np.float64]) -> NDArray[np.float64]:
            return self.inlet_u_profile(self.context, face_values)

        def inlet_V_profile(face_values: NDArray[np.float64]) -> NDArray[np.float64]:
            return self.inlet_v_profile(self.context, face_values)

        def compute_forces_and_write() -> None:
            self.compute_forces_and_write(self.context)

        return {
            "inlet_U_profile": inlet_U_profile,
            "inlet_V_profile": inlet_V_profile,
            "compute_forces_and_write": compute_forces_and_write,
        }

    def apply_inlet(self, patch: str) -> None:
        """
        Write the current inlet velocity to the host as one uniform patch value.

        For hosts that take a vector per patch instead of per-face profiles
        (e.g. OpenFOAMHost.write_inlet_velocity).

        Raises:
            TypeError: If the host has no write_inlet_velocity()
        """
        write = getattr(self.host, "write_inlet_velocity", None)
        if write is None:
            raise TypeError(f"{self.host.name} does not accept patch inlet values")

        ux = self.inlet_u_profile.value(self.context)
        uy = self.inlet_v_profile.value(self.context)
        write(patch, ux, uy)

    def post_process(self) -> Optional[CoefficientRecord]:
        """Run the coefficient processor with this plugin's context."""
        return self.compute_forces_and_write(self.context)

    def __repr__(self) -> str:
        return f"AoAPlugin('{self.config.name}', host={self.host.name}, aoa={self.context.aoa_deg:g})"
