"""
Unit tests for the cube module.
"""

import pytest
import pandas as pd
import numpy as np
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from cubegrid.cube.schema import Cube, Dimension
from cubegrid.cube.frame import cube_from_series, cube_from_frame, cube_to_series
from cubegrid.errors import ConfigurationError, ShapeMismatchError
from cubegrid.layout.assembler import build_grid
from cubegrid.layout.config import LayoutConfig
from cubegrid.values import is_missing, format_value
from configs.cubes import create_population_cube, create_tiny_cube, get_cube


@pytest.fixture
def sales_frame():
    """Long-form sales table with one missing combination."""
    return pd.DataFrame({
        'region': ['North', 'North', 'South', 'South', 'South'],
        'quarter': ['Q1', 'Q2', 'Q1', 'Q2', 'Q3'],
        'units': [100, 200, 150, 250, 120],
    })


class TestCube:
    def test_cube_creation(self):
        cube = create_population_cube()
        assert cube.sizes == [2, 3, 2, 2]
        assert cube.ndim == 4
        assert len(cube.values) == 24

    def test_get_dimension(self):
        cube = create_population_cube()
        age = cube.get_dimension("age")
        assert age is not None
        assert age.label == "Age group"
        assert cube.get_dimension("NonExistent") is None

    def test_labels(self):
        cube = create_population_cube()
        assert cube.dimension_label(1) == "Age group"
        assert cube.category_label(1, 2) == "65+"
        with pytest.raises(IndexError):
            cube.category_label(1, 3)

    def test_dimension_name_falls_back_to_id(self):
        cube = create_tiny_cube()
        assert cube.dimension_label(0) == "row"

    def test_validate(self):
        create_population_cube().validate()
        with pytest.raises(ShapeMismatchError):
            Cube(sizes=[2, 3], values=[0] * 5).validate()
        with pytest.raises(ConfigurationError):
            Cube(sizes=[2, 0], values=[]).validate()
        with pytest.raises(ConfigurationError):
            Cube(sizes=[], values=[]).validate()

    def test_validate_dimension_count(self):
        cube = Cube(
            sizes=[2, 1],
            values=[1, 2],
            dimensions=[Dimension(id="a", categories=["x", "y"])],
        )
        with pytest.raises(ShapeMismatchError):
            cube.validate()

    def test_describe(self):
        desc = create_population_cube().describe()
        assert "24 values" in desc
        assert "Age group[3]" in desc

    def test_dict_round_trip(self):
        cube = create_population_cube()
        restored = Cube.from_dict(cube.to_dict())
        assert restored.sizes == cube.sizes
        assert restored.values == cube.values
        assert restored.dimensions == cube.dimensions

    def test_from_dict_derives_sizes(self):
        cube = Cube.from_dict({
            "values": [1, 2, 3],
            "dimensions": [{"id": "d", "categories": ["a", "b", "c"]}],
        })
        assert cube.sizes == [3]

    def test_get_cube(self):
        assert get_cube("tiny").sizes == [2, 2]
        with pytest.raises(ValueError):
            get_cube("unknown")


class TestPandasAdapters:
    def test_cube_from_frame(self, sales_frame):
        cube = cube_from_frame(sales_frame, ["region", "quarter"], "units")
        assert cube.sizes == [2, 3]
        assert [d.id for d in cube.dimensions] == ["region", "quarter"]
        assert cube.dimensions[1].categories == ["Q1", "Q2", "Q3"]
        assert cube.values == [100, 200, None, 150, 250, 120]

    def test_cube_from_series_single_level(self):
        series = pd.Series([1.0, np.nan, 3.0], index=pd.Index(["a", "b", "c"], name="k"))
        cube = cube_from_series(series)
        assert cube.sizes == [3]
        assert cube.values == [1.0, None, 3.0]

    def test_unnamed_levels(self):
        index = pd.MultiIndex.from_tuples([("a", 1), ("b", 2)])
        cube = cube_from_series(pd.Series([5, 6], index=index))
        assert [d.id for d in cube.dimensions] == ["dim0", "dim1"]
        assert cube.values == [5, None, None, 6]

    def test_duplicate_index_rejected(self):
        index = pd.MultiIndex.from_tuples([("a", "x"), ("a", "x")], names=["r", "c"])
        with pytest.raises(ShapeMismatchError):
            cube_from_series(pd.Series([1, 2], index=index))

    def test_cube_to_series(self):
        series = cube_to_series(create_tiny_cube(), name="v")
        assert series.tolist() == [10, 20, 30, 40]
        assert list(series.index.names) == ["row", "col"]
        assert series.loc[("B", "x")] == 30

    def test_series_round_trip(self):
        cube = create_population_cube()
        restored = cube_from_series(cube_to_series(cube))
        assert restored.sizes == cube.sizes
        assert restored.values == cube.values

    def test_layout_of_frame_cube(self, sales_frame):
        cube = cube_from_frame(sales_frame, ["region", "quarter"], "units")
        grid = build_grid(cube, LayoutConfig(split_index=1))
        assert grid.row_labels(0) == ["North"]
        assert grid.row_values(0) == ["100", "200", ""]
        assert grid.corner_labels() == ["region"]


class TestValues:
    def test_is_missing(self):
        assert is_missing(None)
        assert is_missing(float("nan"))
        assert is_missing(np.float64("nan"))
        assert not is_missing(0)
        assert not is_missing("")
        assert not is_missing(np.int64(3))

    def test_format_value(self):
        assert format_value(None) == ""
        assert format_value(np.nan, missing_text="-") == "-"
        assert format_value(12) == "12"
        assert format_value("x", missing_text="-") == "x"

    def test_frame_adapters_share_missing_check(self):
        series = pd.Series([1.0, np.nan], index=pd.Index(["a", "b"], name="d"))
        assert cube_from_series(series).values[1] is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
