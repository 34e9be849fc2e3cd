"""
OpenFOAM host using foamlib.

Maps the host interface onto an OpenFOAM case directory:
- surfaces are wall patches integrated by a `forces` function object
- force/moment come from its postProcessing output (force.dat, moment.dat)
- inlet velocity is written as a uniform patch value in the initial U field
"""

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from foamlib import FoamCase

from postprocessing.forces import ForceMomentSample, ReferencePoint
from .host import HostSolver


@dataclass
class ForceTable:
    """Latest row of a forces function object output file."""
    path: Path
    columns: List[str]
    values: NDArray[np.float64]
    cofr: Optional[NDArray[np.float64]] = None

    @property
    def time(self) -> float:
        return float(self.values[0])

    def total(self) -> NDArray[np.float64]:
        """(total_x, total_y, total_z) vector."""
        try:
            idx = [self.columns.index(f"total_{c}") for c in "xyz"]
        except ValueError:
            raise KeyError(
                f"No total_x/y/z columns in {self.path}. "
                f"Available columns: {self.columns}"
            )
        return self.values[idx]


def read_force_table(path: Path | str) -> ForceTable:
    """
    Read the last data row of force.dat / moment.dat.

    Expects the tabulated format written by the `forces` function object:

        # Force
        # CofR                : (0.1 0 0)
        #
        # Time          total_x total_y total_z pressure_x ...
        100             1.2     3.4     0       ...

    Args:
        path: Path to force.dat or moment.dat

    Returns:
        ForceTable with column names, last row and CofR (if in the header)
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Forces output not found: {path}")

    columns: List[str] = []
    cofr = None
    last_row = None

    with open(path, 'r') as f:
        for line in f:
            stripped = line.strip()
            if not stripped:
                continue
            if stripped.startswith('#'):
                body = stripped.lstrip('#').strip()
                if body.startswith('CofR'):
                    cofr = _parse_vector(body.split(':', 1)[-1])
                elif body.startswith('Time'):
                    columns = body.split()
                continue
            last_row = stripped

    if not columns:
        raise ValueError(f"No column header found in {path}")
    if last_row is None:
        raise ValueError(f"No data rows in {path}")

    values = np.array([float(v) for v in last_row.split()], dtype=np.float64)
    if len(values) != len(columns):
        raise ValueError(
            f"Row has {len(values)} values but header has {len(columns)} columns: {path}"
        )

    return ForceTable(path=path, columns=columns, values=values, cofr=cofr)


def _parse_vector(text: str) -> NDArray[np.float64]:
    """Parse '(x y z)' into a (3,) array."""
    parts = text.strip().strip('()').split()
    return np.array([float(p) for p in parts[:3]], dtype=np.float64)


def transfer_moment(
    moment: NDArray,
    force: NDArray,
    from_point: NDArray,
    to_point: NDArray
) -> NDArray[np.float64]:
    """
    Move a moment to a new reference point.

    M_to = M_from + (r_from - r_to) x F

    Args:
        moment: Moment about from_point (3,)
        force: Total force (3,)
        from_point: Original reference point (3,)
        to_point: New reference point (3,)

    Returns:
        Moment about to_point (3,)
    """
    arm = np.asarray(from_point, dtype=np.float64) - np.asarray(to_point, dtype=np.float64)
    return np.asarray(moment, dtype=np.float64) + np.cross(arm, np.asarray(force, dtype=np.float64))


class OpenFOAMHost(HostSolver):
    """
    Host backed by an OpenFOAM case directory.

    Requires a `forces` function object in system/controlDict, e.g.:

        functions
        {
            forces
            {
                type    forces;
                libs    (forces);
                patches (airfoil);
                CofR    (0 0 0);
                rho     rhoInf;
                rhoInf  1.225;
            }
        }

    Usage:
        host = OpenFOAMHost("runs/naca0012")
        plugin = AoAPlugin(config, host, working_dir=host.case_dir)
        plugin.apply_inlet("inlet")
        # ... run the solver ...
        plugin.compute_forces_and_write(plugin.context)
    """

    def __init__(
        self,
        case_dir: Path | str,
        forces_object: str = "forces",
        verbose: bool = True
    ):
        """
        Initialize host.

        Args:
            case_dir: Path to OpenFOAM case directory
            forces_object: Name of the forces function object in controlDict
            verbose: If True, print host messages
        """
        self.case_dir = Path(case_dir).resolve()
        self.forces_object = forces_object
        self.verbose = verbose

        if not self.case_dir.exists():
            raise FileNotFoundError(f"Case directory not found: {self.case_dir}")

        self._foam_case = FoamCase(self.case_dir)

    @property
    def foam_case(self) -> FoamCase:
        """Access the foamlib FoamCase object."""
        return self._foam_case

    def _forces_dict(self):
        return self._foam_case.control_dict["functions"][self.forces_object]

    def force_patches(self) -> List[str]:
        """Patches integrated by the forces function object."""
        try:
            patches = self._forces_dict()["patches"]
        except (KeyError, FileNotFoundError):
            return []
        if isinstance(patches, str):
            return [patches]
        return [str(p) for p in patches]

    def configured_cofr(self) -> NDArray[np.float64]:
        """CofR from controlDict (origin if not set)."""
        try:
            return np.asarray(self._forces_dict()["CofR"], dtype=np.float64).reshape(3)
        except (KeyError, FileNotFoundError):
            return np.zeros(3)

    def lookup_surface(self, zone: int | str) -> Optional[str]:
        patch = str(zone)
        if patch in self.force_patches():
            return patch
        return None

    def output_dir(self) -> Path:
        """Latest start-time directory of the forces output."""
        base = self.case_dir / "postProcessing" / self.forces_object
        if not base.is_dir():
            raise FileNotFoundError(f"No forces output in {base}")

        start_times: List[Tuple[float, Path]] = []
        for d in base.iterdir():
            if not d.is_dir():
                continue
            try:
                start_times.append((float(d.name), d))
            except ValueError:
                continue

        if not start_times:
            raise FileNotFoundError(f"No time directories in {base}")

        return max(start_times)[1]

    def compute_force_and_moment(
        self,
        surface: str,
        reference_point: ReferencePoint
    ) -> ForceMomentSample:
        out_dir = self.output_dir()
        force_table = read_force_table(out_dir / "force.dat")
        moment_table = read_force_table(out_dir / "moment.dat")

        force = force_table.total()
        moment = moment_table.total()

        cofr = moment_table.cofr
        if cofr is None:
            cofr = self.configured_cofr()

        moment = transfer_moment(moment, force, cofr, reference_point.to_array())

        if self.verbose:
            print(f"  {surface}: forces at t={force_table.time:g} from {out_dir}")

        return ForceMomentSample(force=force, moment=moment)

    def write_inlet_velocity(
        self,
        patch: str,
        ux: float,
        uy: float,
        uz: float = 0.0
    ) -> None:
        """
        Set a uniform fixed value on an inlet patch of the initial U field.

        Args:
            patch: Inlet patch name
            ux, uy, uz: Velocity components [m/s]
        """
        U = self._foam_case[0]["U"]
        try:
            inlet = U.boundary_field[patch]
        except KeyError:
            available = list(U.boundary_field.keys())
            raise KeyError(
                f"Patch '{patch}' not found. "
                f"Available patches: {available}"
            )
        inlet.value = [float(ux), float(uy), float(uz)]

        if self.verbose:
            print(f"✓ {patch}: U = ({ux:g} {uy:g} {uz:g})")

    def __repr__(self) -> str:
        return f"OpenFOAMHost('{self.case_dir}', forces_object='{self.forces_object}')"
