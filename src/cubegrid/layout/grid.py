"""
Grid model: the renderer-agnostic description of a pivoted cube.

A GridModel holds header rows (corner cells followed by column header
cells) and body rows (label cells followed by value cells). It keeps no
reference to the cube it was computed from.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from cubegrid.layout.splitter import GridShape


class Axis(Enum):
    """Header scope of a cell."""
    ROW = "row"
    COL = "col"


class CellKind(Enum):
    """Kind of a body cell."""
    LABEL = "label"
    VALUE = "value"


@dataclass(frozen=True)
class HeaderCell:
    """A header cell; text is None for a blank cell."""
    text: Optional[str]
    axis: Optional[Axis] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "axis": self.axis.value if self.axis else None,
        }


@dataclass(frozen=True)
class BodyCell:
    """A body cell: a row label or a value."""
    kind: CellKind
    text: str
    axis: Optional[Axis] = None

    @property
    def is_label(self) -> bool:
        return self.kind == CellKind.LABEL

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "text": self.text,
            "axis": self.axis.value if self.axis else None,
        }


@dataclass(frozen=True)
class HeaderSpan:
    """A run of consecutive column header cells sharing the same text."""
    text: Optional[str]
    start: int
    length: int


@dataclass(frozen=True)
class GridModel:
    """
    A fully computed pivot grid.

    Attributes:
        shape: Structural constants the grid was built with
        header_rows: Header rows, each num_label_cols corner cells then
            num_value_cols column header cells
        body_rows: Body rows, each num_label_cols label cells then
            num_value_cols value cells
    """
    shape: GridShape
    header_rows: Tuple[Tuple[HeaderCell, ...], ...]
    body_rows: Tuple[Tuple[BodyCell, ...], ...]

    def value_at(self, offset: int) -> BodyCell:
        """Value cell holding the cube value at a flat offset."""
        if not 0 <= offset < self.shape.num_values:
            raise IndexError(f"Offset {offset} out of range for {self.shape.num_values} values")
        row, col = divmod(offset, self.shape.num_value_cols)
        return self.body_rows[row][self.shape.num_label_cols + col]

    def row_labels(self, row: int) -> List[str]:
        return [cell.text for cell in self.body_rows[row][:self.shape.num_label_cols]]

    def row_values(self, row: int) -> List[str]:
        return [cell.text for cell in self.body_rows[row][self.shape.num_label_cols:]]

    def corner_labels(self) -> List[Optional[str]]:
        """Texts of the corner cells on the last header row."""
        if not self.header_rows:
            return [None] * self.shape.num_label_cols
        return [cell.text for cell in self.header_rows[-1][:self.shape.num_label_cols]]

    def header_spans(self, row: int) -> List[HeaderSpan]:
        """
        Group the column header cells of a header row into runs of identical
        text, the natural candidates for merged (colspan) rendering.
        """
        cells = self.header_rows[row][self.shape.num_label_cols:]
        spans: List[HeaderSpan] = []
        start = 0
        for i in range(1, len(cells) + 1):
            if i == len(cells) or cells[i].text != cells[start].text:
                spans.append(HeaderSpan(text=cells[start].text, start=start, length=i - start))
                start = i
        return spans

    def to_dict(self) -> Dict[str, Any]:
        """Serialize grid to dictionary."""
        return {
            "split_index": self.shape.split_index,
            "sizes": list(self.shape.sizes),
            "header_rows": [[c.to_dict() for c in row] for row in self.header_rows],
            "body_rows": [[c.to_dict() for c in row] for row in self.body_rows],
        }
