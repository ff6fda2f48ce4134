"""
Cube module: labeled N-dimensional cubes and pandas adapters.
"""

from cubegrid.cube.schema import Cube, Dimension
from cubegrid.cube.frame import cube_from_series, cube_from_frame, cube_to_series

__all__ = [
    "Cube", "Dimension",
    "cube_from_series", "cube_from_frame", "cube_to_series",
]
