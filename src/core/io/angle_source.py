"""
Angle-of-attack side-channel reader.

The angle is supplied by an external driver (sweep script, operator) as a
plain text file whose first whitespace-delimited token is the angle in
degrees. Reading is best effort: a missing or unparsable file leaves the
current angle unchanged.
"""

from __future__ import annotations
import re
from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from postprocessing.context import FlowContext


# Leading numeric part of a token ("10deg" -> 10, "5;" -> 5)
NUMBER_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE
)


class AngleSource:
    """
    Best-effort reader for the angle-of-attack file.

    Usage:
        source = AngleSource("aoa.txt")
        context = FlowContext()
        source.refresh(context)   # context.aoa_deg updated if file readable
    """

    def __init__(self, path: str | Path):
        """
        Args:
            path: Angle file. Relative paths resolve against the process
                working directory at read time.
        """
        self.path = Path(path)

    def read(self) -> Optional[float]:
        """
        Parse the leading number of the first token of the file.

        Returns:
            Angle in degrees, or None if the file is missing, unreadable,
            empty or its first token does not start with a number.
        """
        try:
            with open(self.path, 'r') as f:
                tokens = f.read().split()
        except (OSError, UnicodeDecodeError):
            return None

        if not tokens:
            return None

        match = NUMBER_PREFIX.match(tokens[0])
        if match is None:
            return None
        return float(match.group(0))

    def refresh(self, context: FlowContext) -> bool:
        """
        Update context.aoa_deg from the file.

        Args:
            context: Flow context to update

        Returns:
            True if a new value was read, False if the previous value was kept
        """
        value = self.read()
        if value is None:
            return False
        context.aoa_deg = value
        return True

    def __repr__(self) -> str:
        return f"AngleSource('{self.path}')"
