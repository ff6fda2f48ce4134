"""
Body rows: row label cells and value cells.

Values are visited in flat-offset order. A new body row starts whenever
offset % num_value_cols == 0, so the column of a value within its row is
offset % num_value_cols, which is the column order of the header rows.
"""

from typing import Any, Iterator, List, Tuple

from cubegrid.layout.grid import Axis, BodyCell, CellKind
from cubegrid.layout.labels import resolve_category_label
from cubegrid.layout.splitter import GridShape
from cubegrid.layout.strides import product_from
from cubegrid.values import format_value


def build_label_cells(cube: Any, shape: GridShape, row_index: int) -> List[BodyCell]:
    """Label cells of body row row_index, one per row dimension."""
    cells = []
    for k in range(shape.num_label_cols):
        a = product_from(shape.row_dims, k)
        b = product_from(shape.row_dims, k + 1)
        cat_idx = (row_index % a) // b
        cells.append(BodyCell(
            kind=CellKind.LABEL,
            text=resolve_category_label(cube, k, cat_idx),
            axis=Axis.ROW,
        ))
    return cells


def locate(shape: GridShape, offset: int) -> Tuple[int, int]:
    """(body row, value column) of a flat offset."""
    if not 0 <= offset < shape.num_values:
        raise IndexError(f"Offset {offset} out of range for {shape.num_values} values")
    return divmod(offset, shape.num_value_cols)


def iter_body_rows(cube: Any, shape: GridShape,
                   missing_text: str = "") -> Iterator[Tuple[BodyCell, ...]]:
    """Yield body rows in order, label cells first, then value cells."""
    row: List[BodyCell] = []
    for offset, value in enumerate(cube.values):
        if offset % shape.num_value_cols == 0:
            if row:
                yield tuple(row)
            row = build_label_cells(cube, shape, offset // shape.num_value_cols)
        row.append(BodyCell(kind=CellKind.VALUE, text=format_value(value, missing_text)))
    if row:
        yield tuple(row)
