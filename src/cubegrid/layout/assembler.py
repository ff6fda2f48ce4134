"""
Layout assembler: turns a cube into a GridModel.

    shape  = split_dimensions(sizes, split_index, len(values))
    header = build_header_rows(cube, shape, header_mode)
    body   = iter_body_rows(cube, shape)

The computation is pure: nothing is cached between calls and the returned
GridModel holds no reference to the cube.
"""

import logging
from typing import Any, Optional

from cubegrid.layout.config import LayoutConfig
from cubegrid.layout.grid import GridModel
from cubegrid.layout.headers import build_header_rows
from cubegrid.layout.rows import iter_body_rows
from cubegrid.layout.splitter import split_dimensions

logger = logging.getLogger(__name__)


def build_grid(cube: Any, config: Optional[LayoutConfig] = None) -> GridModel:
    """
    Lay out a cube as a two-dimensional grid.

    Args:
        cube: A Cube, or any object with `sizes`, `values`,
            `category_label(dim, cat)` and `dimension_label(dim)`
        config: Layout configuration (defaults to LayoutConfig())

    Returns:
        The complete GridModel

    Raises:
        ConfigurationError: Invalid sizes, split index or config
        ShapeMismatchError: Value count disagrees with sizes
        LabelResolutionError: A label could not be resolved
    """
    config = config or LayoutConfig()
    config.validate()

    validate = getattr(cube, "validate", None)
    if callable(validate):
        validate()
    shape = split_dimensions(cube.sizes, config.split_index, num_values=len(cube.values))

    header_rows = build_header_rows(cube, shape, config.header_mode)
    body_rows = tuple(iter_body_rows(cube, shape, config.missing_text))

    logger.info(
        f"Built grid of {len(header_rows)} header rows and {len(body_rows)} body rows "
        f"x {shape.num_cols} columns"
    )
    return GridModel(shape=shape, header_rows=header_rows, body_rows=body_rows)


class PivotTable:
    """
    Pivot table entry point bound to one layout configuration.

    Example:
        >>> table = PivotTable(LayoutConfig(split_index=1))
        >>> grid = table.layout(cube)
        >>> html = table.render(cube, HtmlTableRenderer())
    """

    def __init__(self, config: LayoutConfig = None):
        self.config = config or LayoutConfig()

    def layout(self, cube: Any) -> GridModel:
        return build_grid(cube, self.config)

    def render(self, cube: Any, renderer) -> Any:
        """Lay out the cube and hand the grid to a renderer."""
        return renderer.render(self.layout(cube))
