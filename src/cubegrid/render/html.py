"""
HTML table renderer.

Produces <table class="jst-viz"> with a <thead> holding the header rows and
a <tbody> holding the body rows. Header and row-label cells are <th>
elements scoped by their axis; values are <td> elements.
"""

from html import escape
from typing import List, Optional

from cubegrid.layout.grid import Axis, GridModel
from cubegrid.render.base import GridRenderer


def _th(text: Optional[str], scope: Optional[Axis] = None, colspan: int = 1) -> str:
    attrs = ""
    if scope is not None:
        attrs += f' scope="{scope.value}"'
    if colspan > 1:
        attrs += f' colspan="{colspan}"'
    content = escape(text) if text is not None else ""
    return f"<th{attrs}>{content}</th>"


class HtmlTableRenderer(GridRenderer):
    """
    Render a grid as an HTML table string.

    Args:
        css_class: Class attribute of the <table> element
        merge_headers: Merge consecutive column header cells with the same
            text into one cell with a colspan
        indent: Indentation unit; empty string renders on a single line
    """

    def __init__(self, css_class: str = "jst-viz", merge_headers: bool = False,
                 indent: str = "  "):
        self.css_class = css_class
        self.merge_headers = merge_headers
        self.indent = indent

    def _header_row(self, grid: GridModel, r: int) -> List[str]:
        row = grid.header_rows[r]
        corner = row[:grid.shape.num_label_cols]
        cells = [_th(c.text, c.axis) for c in corner]
        if self.merge_headers:
            cells.extend(
                _th(span.text, Axis.COL, span.length) for span in grid.header_spans(r)
            )
        else:
            cells.extend(_th(c.text, c.axis) for c in row[grid.shape.num_label_cols:])
        return cells

    def render(self, grid: GridModel) -> str:
        nl = "\n" if self.indent else ""
        i1, i2, i3 = self.indent, self.indent * 2, self.indent * 3

        lines = [f'<table class="{escape(self.css_class)}">']
        lines.append(f"{i1}<thead>")
        for r in range(len(grid.header_rows)):
            lines.append(f"{i2}<tr>")
            lines.extend(f"{i3}{cell}" for cell in self._header_row(grid, r))
            lines.append(f"{i2}</tr>")
        lines.append(f"{i1}</thead>")

        lines.append(f"{i1}<tbody>")
        for row in grid.body_rows:
            lines.append(f"{i2}<tr>")
            for cell in row:
                if cell.is_label:
                    lines.append(f"{i3}{_th(cell.text, cell.axis)}")
                else:
                    lines.append(f"{i3}<td>{escape(cell.text)}</td>")
            lines.append(f"{i2}</tr>")
        lines.append(f"{i1}</tbody>")
        lines.append("</table>")
        return nl.join(lines)
