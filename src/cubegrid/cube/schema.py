"""
Cube definitions: an N-dimensional array of values stored flat in row-major
order, with labels for each dimension and each of its categories.

The value at flat offset o corresponds to the category combination obtained
by row-major decomposition of o over `sizes`: earlier dimensions vary
slower, the last dimension varies fastest.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from cubegrid.errors import ShapeMismatchError
from cubegrid.layout.splitter import validate_sizes
from cubegrid.layout.strides import product


@dataclass
class Dimension:
    """
    A cube dimension with ordered categories.

    Attributes:
        id: Dimension identifier (e.g., 'geo', 'time')
        categories: Category labels (any printable value), ordered by category index
        label: Human-readable name; falls back to id
    """
    id: str
    categories: List[Any]
    label: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.categories)

    @property
    def name(self) -> str:
        """Label used for the dimension in corner cells."""
        return self.label if self.label is not None else self.id

    def get_category_label(self, index: int) -> Any:
        """Label of the category at the given position."""
        if not 0 <= index < len(self.categories):
            raise IndexError(
                f"Category index {index} out of range for dimension "
                f"'{self.id}' with {len(self.categories)} categories"
            )
        return self.categories[index]


@dataclass
class Cube:
    """
    A labeled data cube.

    Labels are resolved from `dimensions`, unless `category_label_fn` /
    `dimension_label_fn` are supplied, in which case those callables win.

    Attributes:
        sizes: Cardinality of each dimension, in canonical dimension order
        values: Flat value sequence, len(values) == product(sizes)
        dimensions: Optional per-dimension label metadata
        category_label_fn: Optional callable (dim_index, category_index) -> label
        dimension_label_fn: Optional callable (dim_index) -> label
    """
    sizes: List[int]
    values: Sequence[Any]
    dimensions: List[Dimension] = field(default_factory=list)
    category_label_fn: Optional[Callable[[int, int], str]] = None
    dimension_label_fn: Optional[Callable[[int], str]] = None

    @classmethod
    def from_dimensions(cls, dimensions: List[Dimension], values: Sequence[Any]) -> "Cube":
        """Build a cube whose sizes are the category counts of its dimensions."""
        return cls(
            sizes=[d.size for d in dimensions],
            values=values,
            dimensions=list(dimensions),
        )

    @property
    def ndim(self) -> int:
        return len(self.sizes)

    def validate(self):
        """
        Check the cube invariants.

        Raises:
            ConfigurationError: no dimensions, or a size below 1
            ShapeMismatchError: value count or label metadata disagrees with sizes
        """
        validate_sizes(self.sizes)
        expected = product(self.sizes)
        if len(self.values) != expected:
            raise ShapeMismatchError(
                f"Cube has {len(self.values)} values but sizes {list(self.sizes)} "
                f"require {expected}",
                expected=expected,
                actual=len(self.values),
            )
        if self.dimensions:
            if len(self.dimensions) != len(self.sizes):
                raise ShapeMismatchError(
                    f"Cube has {len(self.dimensions)} dimensions but "
                    f"{len(self.sizes)} sizes",
                    expected=len(self.sizes),
                    actual=len(self.dimensions),
                )
            for dim, size in zip(self.dimensions, self.sizes):
                if dim.size != size:
                    raise ShapeMismatchError(
                        f"Dimension '{dim.id}' has {dim.size} categories, size is {size}",
                        expected=size,
                        actual=dim.size,
                    )

    def get_dimension(self, id: str) -> Optional[Dimension]:
        """Get dimension by id."""
        for dim in self.dimensions:
            if dim.id == id:
                return dim
        return None

    def category_label(self, dim_index: int, category_index: int) -> str:
        if self.category_label_fn is not None:
            return self.category_label_fn(dim_index, category_index)
        return self.dimensions[dim_index].get_category_label(category_index)

    def dimension_label(self, dim_index: int) -> str:
        if self.dimension_label_fn is not None:
            return self.dimension_label_fn(dim_index)
        return self.dimensions[dim_index].name

    def describe(self) -> str:
        """Generate human-readable description of the cube."""
        if self.dimensions:
            dims = ", ".join(f"{d.name}[{d.size}]" for d in self.dimensions)
        else:
            dims = ", ".join(f"dim{i}[{s}]" for i, s in enumerate(self.sizes))
        return f"Cube of {len(self.values)} values over {dims}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize cube to dictionary (label callables are not serialized)."""
        return {
            "sizes": list(self.sizes),
            "values": list(self.values),
            "dimensions": [
                {"id": d.id, "label": d.label, "categories": list(d.categories)}
                for d in self.dimensions
            ],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Cube":
        """Deserialize cube from dictionary."""
        dimensions = [
            Dimension(id=d["id"], categories=list(d["categories"]), label=d.get("label"))
            for d in data.get("dimensions", [])
        ]
        sizes = data.get("sizes")
        if sizes is None:
            sizes = [d.size for d in dimensions]
        return cls(sizes=list(sizes), values=list(data["values"]), dimensions=dimensions)

