#!/usr/bin/env python3
"""
Demo: Angle-of-attack sweep

Drives the plugin the way a sweep script drives the solver:
- writes the angle to aoa.txt
- evaluates the inlet profiles
- triggers the on-demand force/coefficient command
- plots Cl and Cd from the returned records

Forces come from a thin-airfoil model (Cl = 2*pi*a, parabolic drag polar)
served through CannedHost, so no solver is needed.

Usage:
    python demos/demo_aoa_sweep.py
"""

import sys
from pathlib import Path
import numpy as np
import matplotlib.pyplot as plt

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.io import ConfigLoader
from postprocessing import ForceMomentSample, dynamic_pressure
from solvers import CannedHost
from udf import AoAPlugin


CASE_DIR = Path(__file__).parent.parent / "cases" / "naca0012"


def thin_airfoil_model(plugin: AoAPlugin):
    """Body-axis force model reading the plugin's current angle."""
    config = plugin.config
    q_area = dynamic_pressure(config.freestream.density, config.freestream.velocity) * config.reference.area

    def model(reference_point):
        a = plugin.context.aoa_rad
        Cl = 2.0 * np.pi * a
        Cd = 0.008 + 0.05 * Cl**2
        lift, drag = Cl * q_area, Cd * q_area
        # Wind axes -> body axes
        Fx = drag * np.cos(a) - lift * np.sin(a)
        Fy = drag * np.sin(a) + lift * np.cos(a)
        return ForceMomentSample.from_components(Fx, Fy, 0.0)

    return model


def main():
    config = ConfigLoader.load_dir(CASE_DIR)
    out_dir = CASE_DIR / "out"
    out_dir.mkdir(exist_ok=True)

    # Fresh log for each demo run
    results_file = out_dir / config.files.results_file
    if results_file.exists():
        results_file.unlink()

    host = CannedHost()
    plugin = AoAPlugin(config, host, working_dir=out_dir)
    host.add_surface(config.surface_zone, thin_airfoil_model(plugin))

    callbacks = plugin.entry_points()
    u_faces = np.zeros(50)
    v_faces = np.zeros(50)

    print(f"Case: {config.name}")
    print(f"  V_inf: {config.freestream.velocity} m/s, rho: {config.freestream.density} kg/m³")
    print(f"  AREF: {config.reference.area} m², LREF: {config.reference.length} m")
    print()

    angles = np.arange(-4.0, 12.1, 2.0)
    records = []
    for angle in angles:
        (out_dir / config.files.angle_file).write_text(f"{angle:g}\n")

        callbacks["inlet_U_profile"](u_faces)
        callbacks["inlet_V_profile"](v_faces)
        record = plugin.post_process()
        records.append(record)

        print(f"  inlet U={u_faces[0]:.3f} V={v_faces[0]:.3f} m/s")

    print(f"\n✓ Wrote {len(records)} rows to {plugin.writer.path}")

    aoa = [r.aoa for r in records]
    Cl = [r.Cl for r in records]
    Cd = [r.Cd for r in records]

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(12, 5))

    ax1.plot(aoa, Cl, 'o-', label='Cl')
    ax1.set_xlabel('AoA [deg]')
    ax1.set_ylabel('Cl')
    ax1.set_title('Lift curve')
    ax1.grid(True)

    ax2.plot(Cd, Cl, 's-', color='tab:red')
    ax2.set_xlabel('Cd')
    ax2.set_ylabel('Cl')
    ax2.set_title('Drag polar')
    ax2.grid(True)

    plt.tight_layout()
    output_file = out_dir / "aoa_sweep.png"
    plt.savefig(output_file, dpi=150)
    print(f"✓ Plot saved to {output_file}")


if __name__ == "__main__":
    main()
