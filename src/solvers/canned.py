"""
In-memory host with canned force/moment data.

Stands in for the solver in tests and demos: surfaces are plain dictionary
entries and each one returns either a fixed sample or the result of a
user-supplied force model.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from postprocessing.forces import ForceMomentSample, ReferencePoint
from .host import HostSolver


ForceModel = Callable[[ReferencePoint], ForceMomentSample]


@dataclass
class CannedSurface:
    """Surface handle for CannedHost."""
    zone: Union[int, str]
    source: Union[ForceMomentSample, ForceModel]

    def evaluate(self, reference_point: ReferencePoint) -> ForceMomentSample:
        if isinstance(self.source, ForceMomentSample):
            return self.source
        return self.source(reference_point)


class CannedHost(HostSolver):
    """
    Host double backed by a zone -> sample mapping.

    Records every force request and every console message so callers can
    inspect what the plugin asked for.

    Usage:
        host = CannedHost({5: ForceMomentSample.from_components(-2.0, 0.5, 0.0)})
        plugin = AoAPlugin(config, host)
        plugin.compute_forces_and_write(plugin.context)
        print(host.messages[-1])
    """

    def __init__(
        self,
        surfaces: Optional[Dict[Union[int, str], Union[ForceMomentSample, ForceModel]]] = None,
        verbose: bool = False
    ):
        self.surfaces: Dict[Union[int, str], CannedSurface] = {}
        self.verbose = verbose
        self.messages: List[str] = []
        self.requests: List[Tuple[Union[int, str], ReferencePoint]] = []

        for zone, source in (surfaces or {}).items():
            self.add_surface(zone, source)

    def add_surface(
        self,
        zone: Union[int, str],
        source: Union[ForceMomentSample, ForceModel]
    ) -> CannedHost:
        """Register a surface (fixed sample or force model)."""
        self.surfaces[zone] = CannedSurface(zone=zone, source=source)
        return self  # Allow chaining

    def lookup_surface(self, zone: Union[int, str]) -> Optional[CannedSurface]:
        return self.surfaces.get(zone)

    def compute_force_and_moment(
        self,
        surface: Any,
        reference_point: ReferencePoint
    ) -> ForceMomentSample:
        self.requests.append((surface.zone, reference_point))
        return surface.evaluate(reference_point)

    def message(self, text: str) -> None:
        self.messages.append(text)
        super().message(text)

    def __repr__(self) -> str:
        return f"CannedHost(zones={list(self.surfaces)})"
