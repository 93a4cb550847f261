#!/usr/bin/env python3
"""
Simple demo script showing how the walk fraction shapes a mosaic.
"""

import numpy as np
from py_mosaic.config import MosaicParams
from py_mosaic.core import MosaicGenerator
from py_mosaic.render import save_image, to_image


def main():
    """Grow small mosaics with different walk fractions."""
    print("Py-Mosaic Growth Demo")
    print("=" * 40)

    for circle_frac in [0.01, 0.05, 0.2, 1.0]:
        params = MosaicParams(
            size=128,
            num_samples=50,
            num_seeds=10,
            circle_frac=circle_frac,
            timeout=2000,
            seed=1,
        )
        print(f"\ncircle_frac={circle_frac}:")
        print("-" * 30)

        run = MosaicGenerator(params).generate()
        grid = run.grid

        print(f"  Placed: {len(grid)} of {grid.area} cells ({grid.percent_filled()}%)")
        print(f"  Attempts: {run.state.attempts}")
        print(f"  Longest miss streak: {run.state.max_misses}")
        if len(grid):
            mean_color = grid.colors[grid.filled].mean(axis=0)
            print(f"  Mean color: {np.round(mean_color).astype(int).tolist()}")

        path = save_image(to_image(grid), params.filename())
        print(f"  Saved {path}")


if __name__ == "__main__":
    main()
