"""
cubegrid: Pivot layout of multidimensional data cubes as two-dimensional grids

Leading dimensions of a cube become nested row labels, the remaining ones
become nested column headers, and the flat row-major value sequence fills
the grid body.
"""

__version__ = "0.1.0"
__author__ = "cubegrid Team"

from cubegrid.cube.schema import Cube, Dimension
from cubegrid.layout.config import LayoutConfig, HeaderMode
from cubegrid.layout.grid import GridModel
from cubegrid.layout.assembler import build_grid, PivotTable
from cubegrid.errors import (
    CubeGridError, ShapeMismatchError, ConfigurationError, LabelResolutionError
)

__all__ = [
    "Cube",
    "Dimension",
    "LayoutConfig",
    "HeaderMode",
    "GridModel",
    "build_grid",
    "PivotTable",
    "CubeGridError",
    "ShapeMismatchError",
    "ConfigurationError",
    "LabelResolutionError",
]
