"""IO utilities: config loader, angle source, results log."""

from .config_loader import ConfigLoader
from .angle_source import AngleSource
from .results_log import CoefficientLogWriter, RESULTS_HEADER, RESULTS_COLUMNS

__all__ = [
    "ConfigLoader",
    "AngleSource",
    "CoefficientLogWriter",
    "RESULTS_HEADER",
    "RESULTS_COLUMNS",
]
