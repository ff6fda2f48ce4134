"""
Header builder: column header rows and the corner cells naming the row
dimensions.

Column header labels come from the same row-major decomposition used for
the body: applying category_index over the column dimensions to each column
position reproduces the category boundaries of one column dimension per
header row. A label only changes where its category changes, so nested
spans fall out without any colspan bookkeeping.
"""

import logging
from typing import Any, List, Tuple

from cubegrid.layout.config import HeaderMode
from cubegrid.layout.grid import Axis, HeaderCell
from cubegrid.layout.labels import resolve_category_label, resolve_dimension_label
from cubegrid.layout.splitter import GridShape
from cubegrid.layout.strides import category_index, product_from

logger = logging.getLogger(__name__)


def build_corner_cells(cube: Any, shape: GridShape, row: int) -> List[HeaderCell]:
    """
    Corner cells above the label columns.

    Row dimension names appear only on the last header row, directly above
    their label column; every other header row has blank corner cells.
    """
    if row == shape.num_header_rows - 1:
        return [
            HeaderCell(text=resolve_dimension_label(cube, k))
            for k in range(shape.num_label_cols)
        ]
    return [HeaderCell(text=None) for _ in range(shape.num_label_cols)]


def build_paired_header_cells(cube: Any, shape: GridShape, row: int) -> List[HeaderCell]:
    """
    Column header cells for one header row, alternating between the first
    two column dimensions (dimension split_index + row % 2).
    """
    dim_index = shape.split_index + row % 2
    if dim_index >= len(shape.sizes):
        logger.warning(
            f"Header row {row} refers to dimension {dim_index}, but the cube has "
            f"only {len(shape.sizes)} dimensions; leaving the row blank"
        )
        return [HeaderCell(text=None, axis=Axis.COL) for _ in range(shape.num_value_cols)]

    a = product_from(shape.col_dims, row)
    b = product_from(shape.col_dims, row + 1)
    dim_size = shape.sizes[dim_index]
    cells = []
    n_blank = 0
    for i in range(shape.num_value_cols):
        cat_idx = (i % a) // b
        # past the first two column dimensions the index can exceed dim_size
        if cat_idx >= dim_size:
            cells.append(HeaderCell(text=None, axis=Axis.COL))
            n_blank += 1
            continue
        cells.append(HeaderCell(
            text=resolve_category_label(cube, dim_index, cat_idx),
            axis=Axis.COL,
        ))
    if n_blank:
        logger.warning(
            f"Header row {row}: {n_blank} cells index past the {dim_size} categories "
            f"of dimension {dim_index}; leaving them blank"
        )
    return cells


def build_nested_header_cells(cube: Any, shape: GridShape, row: int) -> List[HeaderCell]:
    """
    Column header cells where column dimension j owns header rows 2j
    (its name) and 2j + 1 (its category labels).
    """
    j, is_category_row = divmod(row, 2)
    dim_index = shape.split_index + j
    if not is_category_row:
        name = resolve_dimension_label(cube, dim_index)
        return [HeaderCell(text=name, axis=Axis.COL) for _ in range(shape.num_value_cols)]

    return [
        HeaderCell(
            text=resolve_category_label(cube, dim_index, category_index(shape.col_dims, j, i)),
            axis=Axis.COL,
        )
        for i in range(shape.num_value_cols)
    ]


def build_header_rows(cube: Any, shape: GridShape,
                      header_mode: HeaderMode = HeaderMode.PAIRED
                      ) -> Tuple[Tuple[HeaderCell, ...], ...]:
    """Build all num_header_rows header rows."""
    if header_mode == HeaderMode.NESTED:
        build_value_cells = build_nested_header_cells
    else:
        build_value_cells = build_paired_header_cells

    rows = []
    for r in range(shape.num_header_rows):
        cells = build_corner_cells(cube, shape, r) + build_value_cells(cube, shape, r)
        rows.append(tuple(cells))
    return tuple(rows)
