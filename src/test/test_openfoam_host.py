"""
Test OpenFOAM host: forces output parsing, moment transfer, patch lookup.
"""

import pytest
import numpy as np

# Add src to path
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import UDFConfig
from postprocessing import ReferencePoint
from solvers import OpenFOAMHost, read_force_table, transfer_moment
from udf import AoAPlugin


FORCE_DAT = """\
# Force
# CofR                : (0 0 0)
#
# Time          \ttotal_x\ttotal_y\ttotal_z\tpressure_x\tpressure_y\tpressure_z\tviscous_x\tviscous_y\tviscous_z
1\t-1.0\t0.2\t0\t-0.9\t0.2\t0\t-0.1\t0\t0
2\t-2.0\t0.5\t0\t-1.8\t0.5\t0\t-0.2\t0\t0
"""

MOMENT_DAT = """\
# Moment
# CofR                : (0 0 0)
#
# Time          \ttotal_x\ttotal_y\ttotal_z\tpressure_x\tpressure_y\tpressure_z\tviscous_x\tviscous_y\tviscous_z
1\t0\t0\t0.1\t0\t0\t0.1\t0\t0\t0
2\t0\t0\t0.3\t0\t0\t0.3\t0\t0\t0
"""

CONTROL_DICT = """\
FoamFile
{
    version     2.0;
    format      ascii;
    class       dictionary;
    object      controlDict;
}

application     simpleFoam;
startTime       0;
endTime         2;
deltaT          1;
writeControl    timeStep;
writeInterval   1;

functions
{
    forces
    {
        type        forces;
        libs        (forces);
        patches     (airfoil);
        CofR        (0 0 0);
        rho         rhoInf;
        rhoInf      1.225;
    }
}
"""


@pytest.fixture
def case_dir(tmp_path):
    (tmp_path / "system").mkdir()
    (tmp_path / "system" / "controlDict").write_text(CONTROL_DICT)

    out = tmp_path / "postProcessing" / "forces" / "0"
    out.mkdir(parents=True)
    (out / "force.dat").write_text(FORCE_DAT)
    (out / "moment.dat").write_text(MOMENT_DAT)
    return tmp_path


class TestForceTable:

    def test_reads_last_row(self, case_dir):
        table = read_force_table(case_dir / "postProcessing/forces/0/force.dat")

        assert table.time == 2.0
        np.testing.assert_allclose(table.total(), [-2.0, 0.5, 0.0])
        np.testing.assert_allclose(table.cofr, [0.0, 0.0, 0.0])

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_force_table(tmp_path / "force.dat")

    def test_no_rows(self, tmp_path):
        path = tmp_path / "force.dat"
        path.write_text("# Time total_x total_y total_z\n")
        with pytest.raises(ValueError):
            read_force_table(path)

    def test_no_total_columns(self, tmp_path):
        path = tmp_path / "force.dat"
        path.write_text("# Time fx fy fz\n1 2 3 4\n")
        with pytest.raises(KeyError):
            read_force_table(path).total()


class TestTransferMoment:

    def test_same_point(self):
        M = transfer_moment([1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [0.1, 0, 0], [0.1, 0, 0])
        np.testing.assert_allclose(M, [1.0, 2.0, 3.0])

    def test_lift_about_quarter_chord(self):
        # Lift acting at the origin, moment taken 0.25 aft of it
        M = transfer_moment([0.0, 0.0, 0.0], [0.0, 10.0, 0.0], [0.0, 0.0, 0.0], [0.25, 0.0, 0.0])
        np.testing.assert_allclose(M, [0.0, 0.0, -2.5])


class TestOpenFOAMHost:

    def test_missing_case(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            OpenFOAMHost(tmp_path / "nope", verbose=False)

    def test_lookup_surface(self, case_dir):
        host = OpenFOAMHost(case_dir, verbose=False)

        assert host.force_patches() == ["airfoil"]
        assert host.lookup_surface("airfoil") == "airfoil"
        assert host.lookup_surface(5) is None

    def test_unknown_forces_object(self, case_dir):
        host = OpenFOAMHost(case_dir, forces_object="forceCoeffs", verbose=False)
        assert host.lookup_surface("airfoil") is None

    def test_compute_force_and_moment(self, case_dir):
        host = OpenFOAMHost(case_dir, verbose=False)
        sample = host.compute_force_and_moment("airfoil", ReferencePoint.quarter_chord(0.4))

        np.testing.assert_allclose(sample.force, [-2.0, 0.5, 0.0])
        # M_ref = M_0 + (0 - r_ref) x F = 0.3 + (-0.1 * 0.5) about z
        np.testing.assert_allclose(sample.moment, [0.0, 0.0, 0.25])

    def test_latest_start_time(self, case_dir):
        restart = case_dir / "postProcessing" / "forces" / "10"
        restart.mkdir()
        (restart / "force.dat").write_text(FORCE_DAT.replace("-2.0\t0.5", "-3.0\t1.5"))
        (restart / "moment.dat").write_text(MOMENT_DAT)

        host = OpenFOAMHost(case_dir, verbose=False)
        assert host.output_dir().name == "10"

        sample = host.compute_force_and_moment("airfoil", ReferencePoint())
        np.testing.assert_allclose(sample.force, [-3.0, 1.5, 0.0])

    def test_no_output(self, tmp_path):
        host = OpenFOAMHost(tmp_path, verbose=False)
        with pytest.raises(FileNotFoundError):
            host.compute_force_and_moment("airfoil", ReferencePoint())

    def test_command_before_first_write(self, tmp_path, capsys):
        (tmp_path / "system").mkdir()
        (tmp_path / "system" / "controlDict").write_text(CONTROL_DICT)
        host = OpenFOAMHost(tmp_path)
        plugin = AoAPlugin(UDFConfig(surface_zone="airfoil"), host, working_dir=tmp_path)

        assert plugin.entry_points()["compute_forces_and_write"]() is None
        assert plugin.writer.header_written is False
        assert not (tmp_path / "aoa_results.txt").exists()
        assert "aoa_udf: ERROR - force/moment for zone airfoil" in capsys.readouterr().out
