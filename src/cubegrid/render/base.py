"""
Grid renderers: consumers of GridModel that produce a displayable table.
"""

from abc import ABC, abstractmethod
from typing import Any

from cubegrid.layout.grid import GridModel


class GridRenderer(ABC):
    """
    Abstract base class for grid renderers.

    Implementations can target different outputs (HTML, plain text,
    DataFrames, etc.)
    """

    @abstractmethod
    def render(self, grid: GridModel) -> Any:
        """Render a grid."""
        pass
