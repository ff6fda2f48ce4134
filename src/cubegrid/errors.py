"""
Error types raised while laying out a cube as a grid.

Every error derives from CubeGridError, which is itself a ValueError: all of
them describe bad input rather than a runtime failure.
"""

from typing import Optional


class CubeGridError(ValueError):
    """Base class for all cubegrid errors."""


class ShapeMismatchError(CubeGridError):
    """The value count or label metadata disagrees with the cube sizes."""

    def __init__(self, message: str, expected: Optional[int] = None,
                 actual: Optional[int] = None):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ConfigurationError(CubeGridError):
    """Invalid split index, dimension sizes or layout option."""


class LabelResolutionError(CubeGridError):
    """
    A label callback failed or returned no value.

    Attributes:
        dim_index: Dimension whose label was requested
        category_index: Category within the dimension (None for dimension names)
    """

    def __init__(self, message: str, dim_index: int,
                 category_index: Optional[int] = None):
        super().__init__(message)
        self.dim_index = dim_index
        self.category_index = category_index
