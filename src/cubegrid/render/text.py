"""
Plain-text grid renderer for terminals and logs.
"""

import pandas as pd

from cubegrid.layout.grid import GridModel
from cubegrid.render.base import GridRenderer


class TextGridRenderer(GridRenderer):
    """
    Render a grid as aligned text columns via DataFrame.to_string().

    Header rows (blank cells as empty strings) come first and are separated
    from the body rows by a rule of dashes.
    """

    def __init__(self, rule: str = "-"):
        self.rule = rule

    def render(self, grid: GridModel) -> str:
        header = [[c.text or "" for c in row] for row in grid.header_rows]
        body = [[c.text for c in row] for row in grid.body_rows]

        table = pd.DataFrame(header + body, dtype=object)
        lines = [line.rstrip() for line in table.to_string(index=False, header=False).splitlines()]

        if header and self.rule:
            width = max(len(line) for line in lines)
            lines.insert(len(header), self.rule * width)
        return "\n".join(lines)
