"""
YAML plugin configuration loader with validation.
"""

from pathlib import Path
import yaml

from ..config.schemas import UDFConfig


class ConfigLoader:
    """Load and validate plugin configuration from YAML files."""

    CONFIG_FILENAME = "udf.yaml"

    @staticmethod
    def load(filepath: str | Path) -> UDFConfig:
        """
        Load and validate a configuration file.

        Args:
            filepath: Path to YAML config file

        Returns:
            Validated UDFConfig

        Raises:
            FileNotFoundError: If the file does not exist
            pydantic.ValidationError: If the content is invalid
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"Config file not found: {filepath}")

        with open(filepath, 'r') as f:
            raw_config = yaml.safe_load(f)

        # Empty file -> all defaults
        if raw_config is None:
            raw_config = {}

        if not isinstance(raw_config, dict):
            raise ValueError(f"Config file must contain a mapping: {filepath}")

        return UDFConfig(**raw_config)

    @staticmethod
    def load_dir(case_dir: str | Path) -> UDFConfig:
        """
        Load udf.yaml from a case directory.

        Args:
            case_dir: Directory containing udf.yaml

        Returns:
            Validated UDFConfig
        """
        case_dir = Path(case_dir)
        config_file = case_dir / ConfigLoader.CONFIG_FILENAME

        if not config_file.exists():
            raise FileNotFoundError(f"No {ConfigLoader.CONFIG_FILENAME} found in {case_dir}")

        return ConfigLoader.load(config_file)

    @staticmethod
    def save(config: UDFConfig, filepath: str | Path) -> Path:
        """
        Write a configuration to YAML.

        Args:
            config: Configuration to write
            filepath: Destination path

        Returns:
            Path written
        """
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, 'w') as f:
            yaml.safe_dump(config.model_dump(), f, sort_keys=False)

        return filepath
