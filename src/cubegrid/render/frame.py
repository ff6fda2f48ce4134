"""
DataFrame renderer: exports a grid as a pandas DataFrame.
"""

from typing import List, Optional

import pandas as pd

from cubegrid.layout.grid import GridModel
from cubegrid.render.base import GridRenderer


class DataFrameRenderer(GridRenderer):
    """
    Render a grid as a DataFrame.

    Column header rows become the column index (a MultiIndex when there is
    more than one header row), row labels become the row index named by the
    corner labels. Cells hold the rendered value text.
    """

    def __init__(self, value_column: str = "value"):
        self.value_column = value_column

    def _columns(self, grid: GridModel) -> pd.Index:
        n_label = grid.shape.num_label_cols
        header_texts: List[List[Optional[str]]] = [
            [c.text for c in row[n_label:]] for row in grid.header_rows
        ]
        if not header_texts:
            return pd.Index([self.value_column] * grid.shape.num_value_cols)
        if len(header_texts) == 1:
            return pd.Index(header_texts[0])
        return pd.MultiIndex.from_arrays(header_texts)

    def _index(self, grid: GridModel) -> Optional[pd.Index]:
        n_label = grid.shape.num_label_cols
        if n_label == 0:
            return None
        names = grid.corner_labels()
        labels = [grid.row_labels(r) for r in range(len(grid.body_rows))]
        if n_label == 1:
            return pd.Index([row[0] for row in labels], name=names[0])
        return pd.MultiIndex.from_arrays(
            [[row[k] for row in labels] for k in range(n_label)], names=names
        )

    def render(self, grid: GridModel) -> pd.DataFrame:
        data = [grid.row_values(r) for r in range(len(grid.body_rows))]
        return pd.DataFrame(data, index=self._index(grid), columns=self._columns(grid))
