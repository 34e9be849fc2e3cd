"""
Test configuration schemas and YAML loading.
"""

import pytest
from pydantic import ValidationError

# Add src to path
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import UDFConfig
from core.io import ConfigLoader


class TestUDFConfig:

    def test_defaults_match_case_constants(self):
        config = UDFConfig()
        assert config.surface_zone == 5
        assert config.freestream.velocity == 16.0
        assert config.freestream.density == 1.225
        assert config.reference.area == 0.4
        assert config.reference.length == 0.435
        assert config.files.angle_file == "aoa.txt"
        assert config.files.results_file == "aoa_results.txt"

    def test_patch_name_zone(self):
        config = UDFConfig(surface_zone=" airfoil ")
        assert config.surface_zone == "airfoil"

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            UDFConfig(surfce_zone=5)

    def test_negative_density_rejected(self):
        with pytest.raises(ValidationError):
            UDFConfig(freestream={"density": -1.0})

    def test_zero_density_allowed(self):
        config = UDFConfig(freestream={"density": 0.0})
        assert config.freestream.density == 0.0

    def test_zero_area_allowed(self):
        assert UDFConfig(reference={"area": 0.0}).reference.area == 0.0

    def test_zero_length_rejected(self):
        with pytest.raises(ValidationError):
            UDFConfig(reference={"length": 0.0})

    def test_negative_zone_rejected(self):
        with pytest.raises(ValidationError):
            UDFConfig(surface_zone=-1)

    def test_blank_file_rejected(self):
        with pytest.raises(ValidationError):
            UDFConfig(files={"angle_file": "  "})

    def test_validate_assignment(self):
        config = UDFConfig()
        with pytest.raises(ValidationError):
            config.surface_zone = ""


class TestConfigLoader:

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "udf.yaml"
        path.write_text(
            "name: naca0012\n"
            "surface_zone: wing\n"
            "freestream:\n"
            "  velocity: 20.0\n"
            "  density: 1.0\n"
            "reference:\n"
            "  area: 1.5\n"
            "  length: 0.3\n"
            "files:\n"
            "  angle_file: alpha.txt\n"
            "verbose: false\n"
        )
        config = ConfigLoader.load(path)

        assert config.name == "naca0012"
        assert config.surface_zone == "wing"
        assert config.freestream.velocity == 20.0
        assert config.reference.length == 0.3
        assert config.files.angle_file == "alpha.txt"
        assert config.files.results_file == "aoa_results.txt"
        assert config.verbose is False

    def test_integer_zone(self, tmp_path):
        path = tmp_path / "udf.yaml"
        path.write_text("surface_zone: 12\n")
        assert ConfigLoader.load(path).surface_zone == 12

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "udf.yaml"
        path.write_text("")
        assert ConfigLoader.load(path) == UDFConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader.load(tmp_path / "udf.yaml")

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "udf.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            ConfigLoader.load(path)

    def test_invalid_content(self, tmp_path):
        path = tmp_path / "udf.yaml"
        path.write_text("freestream:\n  density: -2\n")
        with pytest.raises(ValidationError):
            ConfigLoader.load(path)

    def test_load_dir(self, tmp_path):
        (tmp_path / "udf.yaml").write_text("name: from_dir\n")
        assert ConfigLoader.load_dir(tmp_path).name == "from_dir"

    def test_load_dir_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigLoader.load_dir(tmp_path)

    def test_save_and_reload(self, tmp_path):
        config = UDFConfig(name="saved", surface_zone="airfoil", reference={"area": 2.0})
        path = ConfigLoader.save(config, tmp_path / "out" / "udf.yaml")
        assert ConfigLoader.load(path) == config
