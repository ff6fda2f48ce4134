"""
pandas adapters: build cubes from Series/DataFrames and back.

A Series indexed by a MultiIndex is a sparse cube: each index level is a
dimension, its distinct values (in order of first appearance) are the
categories. Combinations missing from the Series become None values.
"""

import logging
from typing import List, Optional

import pandas as pd

from cubegrid.cube.schema import Cube, Dimension
from cubegrid.errors import ShapeMismatchError
from cubegrid.values import is_missing

logger = logging.getLogger(__name__)


def cube_from_series(series: pd.Series) -> Cube:
    """
    Build a dense cube from a Series with one index level per dimension.

    Raises:
        ShapeMismatchError: The index contains duplicate category combinations
    """
    index = series.index
    if index.has_duplicates:
        raise ShapeMismatchError(
            "Series index has duplicate entries; each category combination "
            "must appear at most once"
        )

    if isinstance(index, pd.MultiIndex):
        level_values = [index.get_level_values(i) for i in range(index.nlevels)]
    else:
        level_values = [index]

    dimensions = []
    for i, (values, name) in enumerate(zip(level_values, index.names)):
        dim_id = str(name) if name is not None else f"dim{i}"
        dimensions.append(Dimension(id=dim_id, categories=pd.unique(values).tolist()))

    categories = [d.categories for d in dimensions]
    if isinstance(index, pd.MultiIndex):
        full_index = pd.MultiIndex.from_product(categories, names=index.names)
    else:
        full_index = pd.Index(categories[0], name=index.name)

    dense = series.astype(object).reindex(full_index)
    values = [None if is_missing(v) else v for v in dense.tolist()]

    n_missing = len(full_index) - len(series)
    if n_missing:
        logger.debug(f"Filled {n_missing} missing category combinations with None")

    return Cube.from_dimensions(dimensions, values)


def cube_from_frame(df: pd.DataFrame, dimensions: List[str], measure: str) -> Cube:
    """
    Build a cube from a long-form table.

    Args:
        df: One row per category combination
        dimensions: Columns used as dimensions, slowest-varying first
        measure: Column holding the cube values
    """
    series = df.set_index(dimensions)[measure]
    return cube_from_series(series)


def cube_to_series(cube: Cube, name: Optional[str] = None) -> pd.Series:
    """Inverse of cube_from_series: values indexed by the full category product."""
    cube.validate()
    if not cube.dimensions:
        raise ShapeMismatchError("Cube has no dimension metadata to build an index from")
    index = pd.MultiIndex.from_product(
        [d.categories for d in cube.dimensions],
        names=[d.id for d in cube.dimensions],
    )
    return pd.Series(list(cube.values), index=index, name=name, dtype=object)
