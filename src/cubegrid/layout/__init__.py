"""
Layout module: pivot layout of a flat row-major cube into a 2D grid.
"""

from cubegrid.layout.strides import (
    product, product_from, product_before, category_index, category_indices, flat_offset
)
from cubegrid.layout.config import LayoutConfig, HeaderMode
from cubegrid.layout.splitter import GridShape, split_dimensions
from cubegrid.layout.grid import (
    Axis, CellKind, HeaderCell, BodyCell, HeaderSpan, GridModel
)
from cubegrid.layout.assembler import build_grid, PivotTable

__all__ = [
    "product", "product_from", "product_before",
    "category_index", "category_indices", "flat_offset",
    "LayoutConfig", "HeaderMode",
    "GridShape", "split_dimensions",
    "Axis", "CellKind", "HeaderCell", "BodyCell", "HeaderSpan", "GridModel",
    "build_grid", "PivotTable",
]
