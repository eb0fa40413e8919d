"""
Demo: Plotting rotations.

Close each plot window to proceed to the next demo.
"""

import sys
from pathlib import Path
import numpy as np

# Add src to path (go up to project root, then into src)
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from planar_rotations import Angle2D, RotationMatrix2D
from planar_rotations.visualization import RotationPlotter, quick_plot_rotation


def demo_single_rotation():
    """Demo 1: Rotated basis frame."""
    print("\n" + "="*60)
    print("DEMO 1: Rotated basis frame")
    print("="*60)

    quick_plot_rotation(RotationMatrix2D(np.pi / 6))


def demo_composed_rotation():
    """Demo 2: Composition applied to vectors."""
    print("\n" + "="*60)
    print("DEMO 2: Composed rotation applied to vectors")
    print("="*60)

    r = Angle2D(np.pi / 8) ** 3
    plotter = RotationPlotter()
    plotter.plot_rotation(r, vectors=[[1.5, 0.5], [-0.5, 1.0]],
                          title="A(pi/8) ** 3 applied to two vectors")
    plotter.show()
    plotter.close()


def main():
    """Run all visualization demos."""
    demo_single_rotation()
    demo_composed_rotation()
    print("\n✓ ALL VISUALIZATION DEMOS COMPLETED\n")


if __name__ == "__main__":
    main()
