"""
Render module: turn a GridModel into HTML, text or a DataFrame.
"""

from cubegrid.render.base import GridRenderer
from cubegrid.render.html import HtmlTableRenderer
from cubegrid.render.text import TextGridRenderer
from cubegrid.render.frame import DataFrameRenderer

__all__ = [
    "GridRenderer", "HtmlTableRenderer", "TextGridRenderer", "DataFrameRenderer",
]
