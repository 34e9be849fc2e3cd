"""
Append-only coefficient results log.

One tab-separated row per post-processing call. The column header is
written once per writer, before its first row.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from postprocessing.forces import CoefficientRecord


RESULTS_COLUMNS = (
    "AoA_deg",
    "Fx[N]", "Fy[N]", "Fz[N]",
    "Fd[N]", "Fl[N]",
    "Cd", "Cl",
    "Mx[Nm]", "My[Nm]", "Mz[Nm]",
    "Cmx", "Cmy", "Cmz",
)

RESULTS_HEADER = "\t".join(RESULTS_COLUMNS) + "\n"


def format_row(values) -> str:
    """Format values as a %g tab-separated line."""
    return "\t".join(f"{float(v):g}" for v in values) + "\n"


class CoefficientLogWriter:
    """
    Writer for the coefficient results log.

    The file is opened in append mode for every row and closed again, so
    rows from earlier runs are preserved. The header flag belongs to the
    writer: a new writer on the same file writes the header again.

    Usage:
        writer = CoefficientLogWriter("aoa_results.txt")
        writer.append(record)   # header + row
        writer.append(record)   # row only
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self.header_written = False
        self.rows_written = 0

    def append(self, record: CoefficientRecord) -> None:
        """
        Append one record.

        Raises:
            OSError: If the file cannot be opened for appending
        """
        values = record.as_row()
        if len(values) != len(RESULTS_COLUMNS):
            raise ValueError(
                f"Record has {len(values)} values, expected {len(RESULTS_COLUMNS)}"
            )

        with open(self.path, 'a') as f:
            if not self.header_written:
                f.write(RESULTS_HEADER)
                self.header_written = True
            f.write(format_row(values))

        self.rows_written += 1

    def __repr__(self) -> str:
        return (f"CoefficientLogWriter('{self.path}', "
                f"header_written={self.header_written}, rows={self.rows_written})")
