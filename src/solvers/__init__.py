"""
Host solver adapters.

- HostSolver: interface the plugin talks to
- CannedHost: in-memory double with fixed or modelled forces
- OpenFOAMHost: OpenFOAM case directory (via foamlib)
"""

from .host import HostSolver
from .canned import CannedHost, CannedSurface
from .openfoam import OpenFOAMHost, ForceTable, read_force_table, transfer_moment

__all__ = [
    "HostSolver",
    "CannedHost",
    "CannedSurface",
    "OpenFOAMHost",
    "ForceTable",
    "read_force_table",
    "transfer_moment",
]
