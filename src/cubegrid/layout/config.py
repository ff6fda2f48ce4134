"""
Layout configuration.
"""

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from cubegrid.errors import ConfigurationError


class HeaderMode(Enum):
    """How column header rows map onto column dimensions."""
    PAIRED = "paired"  # header row r shows dimension split_index + (r % 2)
    NESTED = "nested"  # each column dimension gets a name row and a category row


@dataclass
class LayoutConfig:
    """
    Configuration for a pivot layout.

    Attributes:
        split_index: Dimensions [0, split_index) become row dimensions,
            the remaining ones become column dimensions
        header_mode: Header row scheme (see HeaderMode)
        missing_text: Text rendered for None / NaN values
    """
    split_index: int = 2
    header_mode: HeaderMode = HeaderMode.PAIRED
    missing_text: str = ""

    def __post_init__(self):
        if isinstance(self.header_mode, str):
            try:
                self.header_mode = HeaderMode(self.header_mode)
            except ValueError:
                raise ConfigurationError(f"Unknown header mode: {self.header_mode!r}")

    def validate(self):
        """Check field values that do not depend on a particular cube."""
        if (isinstance(self.split_index, bool)
                or not isinstance(self.split_index, numbers.Integral)):
            raise ConfigurationError(
                f"split_index must be an integer, got {self.split_index!r}"
            )
        if self.split_index < 0:
            raise ConfigurationError(f"split_index must be >= 0, got {self.split_index}")
        if not isinstance(self.header_mode, HeaderMode):
            raise ConfigurationError(f"Unknown header mode: {self.header_mode!r}")
        if not isinstance(self.missing_text, str):
            raise ConfigurationError("missing_text must be a string")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "split_index": self.split_index,
            "header_mode": self.header_mode.value,
            "missing_text": self.missing_text,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutConfig":
        return cls(
            split_index=data.get("split_index", 2),
            header_mode=data.get("header_mode", HeaderMode.PAIRED.value),
            missing_text=data.get("missing_text", ""),
        )
