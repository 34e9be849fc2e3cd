"""
Host solver interface.

The plugin never touches solver data structures directly. Everything it
needs from the host (surface lookup, force/moment integration, console
output) goes through this interface, so the same plugin runs against
Fluent-style hosts, an OpenFOAM case or a test double.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional

from postprocessing.forces import ForceMomentSample, ReferencePoint


class HostSolver(ABC):
    """
    Base class for host solvers.

    Subclasses resolve surface identifiers to handles and integrate
    force/moment over a surface. Handles are opaque to the plugin.

    Example:
        class MyHost(HostSolver):
            def lookup_surface(self, zone):
                return self.zones.get(zone)

            def compute_force_and_moment(self, surface, reference_point):
                F, M = surface.integrate(reference_point.to_array())
                return ForceMomentSample(F, M)
    """

    verbose: bool = True

    @abstractmethod
    def lookup_surface(self, zone: int | str) -> Optional[Any]:
        """
        Resolve a surface identifier.

        Returns:
            Opaque surface handle, or None if the surface does not exist
        """
        pass

    @abstractmethod
    def compute_force_and_moment(
        self,
        surface: Any,
        reference_point: ReferencePoint
    ) -> ForceMomentSample:
        """
        Integrate force and moment over a surface.

        Args:
            surface: Handle returned by lookup_surface()
            reference_point: Point the moment is taken about

        Returns:
            ForceMomentSample in body axes
        """
        pass

    def message(self, text: str) -> None:
        """Write a line to the host console."""
        if self.verbose:
            print(text)

    @property
    def name(self) -> str:
        """Host name (defaults to class name)."""
        return self.__class__.__name__
