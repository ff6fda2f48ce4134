"""
Label resolution against a cube's label callbacks.

Failures are never papered over with placeholder text: any exception from
the cube, or a missing label, surfaces as LabelResolutionError.
"""

from typing import Any

from cubegrid.errors import LabelResolutionError


def resolve_category_label(cube: Any, dim_index: int, category_index: int) -> str:
    try:
        label = cube.category_label(dim_index, category_index)
    except LabelResolutionError:
        raise
    except Exception as e:
        raise LabelResolutionError(
            f"Failed to resolve label of category {category_index} "
            f"in dimension {dim_index}: {e}",
            dim_index=dim_index,
            category_index=category_index,
        ) from e
    if label is None:
        raise LabelResolutionError(
            f"No label for category {category_index} in dimension {dim_index}",
            dim_index=dim_index,
            category_index=category_index,
        )
    return str(label)


def resolve_dimension_label(cube: Any, dim_index: int) -> str:
    try:
        label = cube.dimension_label(dim_index)
    except LabelResolutionError:
        raise
    except Exception as e:
        raise LabelResolutionError(
            f"Failed to resolve name of dimension {dim_index}: {e}",
            dim_index=dim_index,
        ) from e
    if label is None:
        raise LabelResolutionError(
            f"No name for dimension {dim_index}", dim_index=dim_index
        )
    return str(label)
