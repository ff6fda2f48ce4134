"""
Sample cubes used by the example script and the tests.

- PopulationCube: population by sex, age group, area and year (2 x 3 x 2 x 2)
- SalesCube: units sold by region, quarter and channel (2 x 4 x 2)
- TinyCube: 2 x 2 cube used in the documentation
"""

from cubegrid.cube.schema import Cube, Dimension


def create_population_cube() -> Cube:
    """
    PopulationCube with four dimensions.

    Dimensions:
    - sex: male, female
    - age: 0-19, 20-64, 65+
    - area: urban, rural
    - year: 2022, 2023
    """
    sex_dim = Dimension(id="sex", label="Sex", categories=["Male", "Female"])
    age_dim = Dimension(id="age", label="Age group", categories=["0-19", "20-64", "65+"])
    area_dim = Dimension(id="area", label="Area", categories=["Urban", "Rural"])
    year_dim = Dimension(id="year", label="Year", categories=["2022", "2023"])

    # row-major: year varies fastest, sex slowest
    values = [
        1210, 1198, 402, 415,
        3620, 3655, 1130, 1121,
        820, 851, 330, 342,
        1150, 1141, 381, 379,
        3540, 3562, 1102, 1098,
        1030, 1066, 405, 419,
    ]
    return Cube.from_dimensions([sex_dim, age_dim, area_dim, year_dim], values)


def create_sales_cube() -> Cube:
    """
    SalesCube with three dimensions and one missing value.

    Dimensions:
    - region: North, South
    - quarter: Q1 .. Q4
    - channel: Online, Store
    """
    region_dim = Dimension(id="region", label="Region", categories=["North", "South"])
    quarter_dim = Dimension(id="quarter", label="Quarter", categories=["Q1", "Q2", "Q3", "Q4"])
    channel_dim = Dimension(id="channel", label="Channel", categories=["Online", "Store"])

    values = [
        120, 340, 135, 310, 150, 295, 210, 400,
        80, 190, 95, None, 101, 170, 160, 260,
    ]
    return Cube.from_dimensions([region_dim, quarter_dim, channel_dim], values)


def create_tiny_cube() -> Cube:
    """2 x 2 cube: rows A/B, columns x/y."""
    return Cube.from_dimensions(
        [
            Dimension(id="row", categories=["A", "B"]),
            Dimension(id="col", categories=["x", "y"]),
        ],
        [10, 20, 30, 40],
    )


CUBE_FACTORIES = {
    "population": create_population_cube,
    "sales": create_sales_cube,
    "tiny": create_tiny_cube,
}


def get_cube(name: str) -> Cube:
    """Get sample cube by name."""
    if name not in CUBE_FACTORIES:
        raise ValueError(f"Unknown cube: {name}. Available: {list(CUBE_FACTORIES.keys())}")
    return CUBE_FACTORIES[name]()
