"""
Demo: 2D rotation representations.

Builds rotations as matrices and as angles, composes them, converts between
the two and rotates unitful vectors.
"""

import sys
from pathlib import Path
import numpy as np
import pint

# Add src to path (go up to project root, then into src)
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from planar_rotations import (
    Angle2D,
    RotationMatrix2D,
    inverse,
    is_rotation,
    isapprox,
    nearest_rotation,
    rotation_angle,
)


def demo_construction(ureg):
    """Demo 1: Construction and element types."""
    print("=" * 60)
    print("DEMO 1: Construction")
    print("=" * 60)

    for label, r in [
        ("components (1, 0, 0, 1)", RotationMatrix2D((1, 0, 0, 1))),
        ("angle pi/4", RotationMatrix2D(np.pi / 4)),
        ("float32 angle", RotationMatrix2D(np.float32(np.pi / 4))),
        ("30 degrees", Angle2D(30 * ureg.degree)),
    ]:
        print(f"  {label:<24} -> {r!r}")
    print()


def demo_composition():
    """Demo 2: Composition, division and powers."""
    print("=" * 60)
    print("DEMO 2: Composition")
    print("=" * 60)

    r = RotationMatrix2D(np.pi / 4)
    print(f"  R(pi/4) * R(pi/4)   = {(r * r).matrix.round(12).tolist()}")

    a, b = Angle2D(0.7), Angle2D(0.2)
    print(f"  A(0.7) / A(0.2)     = {a / b!r}")
    print(f"  A(0.7).ldiv(A(0.2)) = {a.ldiv(b)!r}")
    print(f"  A(0.7) ** 3         = {a ** 3!r}")
    print(f"  inverse(A(0.7))     = {inverse(a)!r}")
    print()


def demo_conversion():
    """Demo 3: Conversion between representations."""
    print("=" * 60)
    print("DEMO 3: Conversion")
    print("=" * 60)

    rng = np.random.default_rng(0)
    r = RotationMatrix2D.random(rng)
    a = Angle2D(r)
    print(f"  random matrix:        {r!r}")
    print(f"  as angle:             {a!r}")
    print(f"  back to matrix equal: {isapprox(RotationMatrix2D(a), r)}")
    print(f"  matrix angle (atan2): {rotation_angle(r):.15f}")
    print()


def demo_vectors(ureg):
    """Demo 4: Rotating vectors, with and without units."""
    print("=" * 60)
    print("DEMO 4: Vectors")
    print("=" * 60)

    r = Angle2D(90 * ureg.degree)
    v = ureg.Quantity(np.array([1.5, 0.0]), "meter")
    print(f"  rotate {v} by 90° -> {r * v}")

    noisy = RotationMatrix2D(0.3).matrix + 1e-3
    fixed = nearest_rotation(noisy)
    print(f"  noisy matrix is rotation:     {is_rotation(noisy)}")
    print(f"  nearest rotation is rotation: {is_rotation(fixed)}")
    print()


def main():
    """Run all rotation demos."""
    print("\n")
    print("╔" + "=" * 58 + "╗")
    print("║" + " " * 58 + "║")
    print("║" + "  PLANAR ROTATIONS - DEMO  ".center(58) + "║")
    print("║" + " " * 58 + "║")
    print("╚" + "=" * 58 + "╝")
    print()

    ureg = pint.UnitRegistry()

    demo_construction(ureg)
    demo_composition()
    demo_conversion()
    demo_vectors(ureg)

    print("=" * 60)
    print("✓ ALL ROTATION DEMOS COMPLETED")
    print("=" * 60)


if __name__ == "__main__":
    main()
