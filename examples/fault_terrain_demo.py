#!/usr/bin/env python3
"""
Demo script comparing fault-line generation across thread counts.
"""

from fault_terrain.core import TerrainEngine
from fault_terrain.render import save_png


def main():
    """Generate the same terrain size with 1, 2 and 4 threads."""
    print("Fault-Line Terrain Demo")
    print("=" * 40)

    width, height = 128, 128
    faults = 200
    engine = TerrainEngine()

    for threads in (1, 2, 4):
        print(f"\n{threads} thread(s):")
        print("-" * 30)

        result = engine.generate(width, height, threads, faults)
        stats = result.grid.stats()

        print(f"  Faults applied: {result.faults_applied}/{result.faults_requested}")
        print(f"  Time: {result.elapsed_ms:.1f} ms")
        print(f"  Height range: {stats.min_height}-{stats.max_height}")
        print(f"  Average height: {stats.mean_height:.1f}")

        output = save_png(result.grid, f"fault_terrain_{threads}_threads.png")
        print(f"  Saved: {output}")


if __name__ == "__main__":
    main()
