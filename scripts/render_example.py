#!/usr/bin/env python3
"""
Example: Rendering a sample cube as a pivot table.

This script demonstrates how to:
1. Load a sample cube
2. Lay it out with a chosen split index and header mode
3. Render the grid as text, HTML or a DataFrame
"""

import argparse
import logging
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from cubegrid.layout.config import LayoutConfig, HeaderMode
from cubegrid.layout.assembler import PivotTable
from cubegrid.render import HtmlTableRenderer, TextGridRenderer, DataFrameRenderer
from configs.cubes import get_cube, CUBE_FACTORIES


RENDERERS = {
    "text": lambda args: TextGridRenderer(),
    "html": lambda args: HtmlTableRenderer(merge_headers=args.merge),
    "frame": lambda args: DataFrameRenderer(),
}


def main():
    parser = argparse.ArgumentParser(description="Render a sample cube as a pivot table")
    parser.add_argument("--cube", choices=sorted(CUBE_FACTORIES), default="population",
                        help="Sample cube to render")
    parser.add_argument("--split", type=int, default=2,
                        help="Number of leading dimensions used as row labels")
    parser.add_argument("--header-mode", choices=[m.value for m in HeaderMode],
                        default=HeaderMode.PAIRED.value, help="Column header scheme")
    parser.add_argument("--format", choices=sorted(RENDERERS), default="text",
                        help="Output format")
    parser.add_argument("--merge", action="store_true",
                        help="Merge identical adjacent column headers (html only)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cube = get_cube(args.cube)
    print("=" * 60)
    print(cube.describe())
    print("=" * 60)

    config = LayoutConfig(split_index=args.split, header_mode=args.header_mode)
    table = PivotTable(config)
    output = table.render(cube, RENDERERS[args.format](args))

    if args.format == "frame":
        print(output.to_string())
    else:
        print(output)


if __name__ == "__main__":
    main()
