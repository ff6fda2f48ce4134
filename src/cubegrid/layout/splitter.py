"""
Dimension splitter: partitions the cube's dimensions into row dimensions
(the low-index prefix) and column dimensions (the suffix), and derives the
structural constants of the grid.
"""

import logging
import numbers
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from cubegrid.errors import ConfigurationError, ShapeMismatchError
from cubegrid.layout.strides import product

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridShape:
    """
    Structural constants of one layout.

    Attributes:
        sizes: All dimension sizes
        split_index: First column dimension
        row_dims: sizes[:split_index]
        col_dims: sizes[split_index:]
    """
    sizes: Tuple[int, ...]
    split_index: int
    row_dims: Tuple[int, ...]
    col_dims: Tuple[int, ...]

    @property
    def num_label_cols(self) -> int:
        return len(self.row_dims)

    @property
    def num_value_cols(self) -> int:
        return product(self.col_dims)

    @property
    def num_header_rows(self) -> int:
        # two header rows per column dimension
        return 2 * len(self.col_dims)

    @property
    def num_body_rows(self) -> int:
        return product(self.row_dims)

    @property
    def num_values(self) -> int:
        return product(self.sizes)

    @property
    def num_cols(self) -> int:
        return self.num_label_cols + self.num_value_cols


def validate_sizes(sizes: Sequence[int]):
    """Raise ConfigurationError unless sizes is a non-empty list of integers >= 1."""
    if len(sizes) == 0:
        raise ConfigurationError("A cube needs at least one dimension")
    for idx, size in enumerate(sizes):
        if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size < 1:
            raise ConfigurationError(
                f"Dimension {idx} has size {size!r}; sizes must be integers >= 1"
            )


def split_dimensions(sizes: Sequence[int], split_index: int,
                     num_values: Optional[int] = None) -> GridShape:
    """
    Split sizes at split_index and derive the grid's structural constants.

    Args:
        sizes: Dimension sizes in canonical order
        split_index: Number of leading dimensions used as row dimensions
        num_values: Length of the value sequence, checked against product(sizes)

    Raises:
        ConfigurationError: Invalid sizes or split_index outside [0, len(sizes)]
        ShapeMismatchError: num_values != product(sizes)
    """
    validate_sizes(sizes)
    if (isinstance(split_index, bool) or not isinstance(split_index, numbers.Integral)
            or not 0 <= split_index <= len(sizes)):
        raise ConfigurationError(
            f"split_index must be an integer in [0, {len(sizes)}], got {split_index!r}"
        )

    sizes = tuple(int(s) for s in sizes)
    split_index = int(split_index)
    if num_values is not None and num_values != product(sizes):
        raise ShapeMismatchError(
            f"Got {num_values} values but sizes {list(sizes)} require {product(sizes)}",
            expected=product(sizes),
            actual=num_values,
        )

    shape = GridShape(
        sizes=sizes,
        split_index=split_index,
        row_dims=sizes[:split_index],
        col_dims=sizes[split_index:],
    )
    logger.debug(
        f"Split {list(sizes)} at {split_index}: {shape.num_body_rows} body rows, "
        f"{shape.num_label_cols} label cols, {shape.num_value_cols} value cols, "
        f"{shape.num_header_rows} header rows"
    )
    return shape
