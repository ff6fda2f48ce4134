"""
Stride arithmetic for row-major flat-index decomposition.

For a group of dimension sizes v, the category of dimension idx at flat
offset o is:

    category_index(v, idx, o) = (o % product_from(v, idx)) // product_from(v, idx + 1)

product_from(v, idx) is the size of the block spanned by dimension idx and
every faster-varying dimension after it; product_from(v, idx + 1) is the
stride of one step along dimension idx.
"""

from typing import Sequence, Tuple

import numpy as np


def _check_index(name: str, value: int):
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def product(values: Sequence[int]) -> int:
    """Product of all elements; 1 for an empty group."""
    return int(np.prod(np.asarray(values, dtype=np.int64)))


def product_from(values: Sequence[int], idx: int) -> int:
    """Product of elements at positions idx..end (1 when idx >= len(values))."""
    _check_index("idx", idx)
    return product(values[idx:])


def product_before(values: Sequence[int], idx: int) -> int:
    """Product of elements at positions 0..idx-1."""
    _check_index("idx", idx)
    return product(values[:idx])


def category_index(values: Sequence[int], idx: int, offset: int) -> int:
    """Category index of dimension idx at a flat offset within the group."""
    _check_index("offset", offset)
    return (offset % product_from(values, idx)) // product_from(values, idx + 1)


def category_indices(values: Sequence[int], offset: int) -> Tuple[int, ...]:
    """
    Decompose a flat offset into one category index per dimension.

    Example:
        >>> category_indices([2, 3], 5)
        (1, 2)
    """
    return tuple(category_index(values, idx, offset) for idx in range(len(values)))


def flat_offset(values: Sequence[int], indices: Sequence[int]) -> int:
    """Inverse of category_indices: row-major offset of a category combination."""
    if len(indices) != len(values):
        raise ValueError(
            f"Expected {len(values)} category indices, got {len(indices)}"
        )
    offset = 0
    for idx, (size, cat) in enumerate(zip(values, indices)):
        if not 0 <= cat < size:
            raise ValueError(f"Category index {cat} out of range for dimension {idx} of size {size}")
        offset += cat * product_from(values, idx + 1)
    return offset
