#!/usr/bin/env python3
"""
Simple test runner without pytest dependency.
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from cubegrid.cube.schema import Cube
from cubegrid.errors import ShapeMismatchError
from cubegrid.layout.assembler import build_grid
from cubegrid.layout.config import LayoutConfig, HeaderMode
from cubegrid.layout.strides import category_index
from cubegrid.render import HtmlTableRenderer, TextGridRenderer
from configs.cubes import create_population_cube, create_tiny_cube


def test_decomposition():
    """Test row-major decomposition of a flat offset."""
    assert category_index([2, 3], 0, 5) == 1
    assert category_index([2, 3], 1, 5) == 2
    print("✓ test_decomposition passed")


def test_end_to_end():
    """Test the 2 x 2 example."""
    grid = build_grid(create_tiny_cube(), LayoutConfig(split_index=1))
    assert grid.shape.num_body_rows == 2
    assert grid.shape.num_value_cols == 2
    assert grid.shape.num_header_rows == 2
    assert [c.text for c in grid.body_rows[0]] == ["A", "10", "20"]
    assert [c.text for c in grid.body_rows[1]] == ["B", "30", "40"]
    print("✓ test_end_to_end passed")


def test_boundaries():
    """Test split index 0 and split index = number of dimensions."""
    cube = create_population_cube()
    grid = build_grid(cube, LayoutConfig(split_index=0))
    assert grid.shape.num_label_cols == 0
    assert len(grid.body_rows) == 1

    grid = build_grid(cube, LayoutConfig(split_index=4))
    assert grid.shape.num_value_cols == 1
    assert len(grid.body_rows) == 24
    print("✓ test_boundaries passed")


def test_round_trip():
    """Test every flat offset lands on its own value cell."""
    cube = create_population_cube()
    grid = build_grid(cube, LayoutConfig(split_index=2))
    for offset, value in enumerate(cube.values):
        assert grid.value_at(offset).text == str(value)
    print("✓ test_round_trip passed")


def test_shape_mismatch():
    """Test value count mismatch is rejected."""
    cube = Cube(sizes=[2, 3], values=[1, 2, 3, 4, 5],
                category_label_fn=lambda d, c: str(c),
                dimension_label_fn=lambda d: str(d))
    try:
        build_grid(cube)
    except ShapeMismatchError:
        print("✓ test_shape_mismatch passed")
        return
    raise AssertionError("ShapeMismatchError not raised")


def test_nested_headers():
    """Test nested header mode labels every column dimension."""
    config = LayoutConfig(split_index=2, header_mode=HeaderMode.NESTED)
    grid = build_grid(create_population_cube(), config)
    assert [c.text for c in grid.header_rows[0][2:]] == ["Area"] * 4
    assert [c.text for c in grid.header_rows[3][2:]] == ["2022", "2023", "2022", "2023"]
    print("✓ test_nested_headers passed")


def test_renderers():
    """Test HTML and text output."""
    grid = build_grid(create_tiny_cube(), LayoutConfig(split_index=1))
    assert "<td>40</td>" in HtmlTableRenderer().render(grid)
    assert "40" in TextGridRenderer().render(grid)
    print("✓ test_renderers passed")


def run_all_tests():
    """Run all tests."""
    print("Running cubegrid tests...\n")

    tests = [
        test_decomposition,
        test_end_to_end,
        test_boundaries,
        test_round_trip,
        test_shape_mismatch,
        test_nested_headers,
        test_renderers,
    ]

    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
        except AssertionError as e:
            print(f"✗ {test.__name__} FAILED: {e}")
            failed += 1
        except Exception as e:
            print(f"✗ {test.__name__} ERROR: {e}")
            failed += 1

    print(f"\n{'='*40}")
    print(f"Results: {passed} passed, {failed} failed")
    print(f"{'='*40}")

    return failed == 0


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
