#!/usr/bin/env python
"""
Convenience launcher for demos.

Run specific demo:
  python run_demo.py rotations
  python run_demo.py visualization

Or run from demos folder:
  python demos/demo_rotations.py
"""

import argparse
import runpy
import sys
from pathlib import Path

DEMO_DIR = Path(__file__).parent / "demos"

DEMOS = {
    "rotations": DEMO_DIR / "demo_rotations.py",
    "visualization": DEMO_DIR / "demo_visualization.py",
}


def main():
    parser = argparse.ArgumentParser(description="Run a planar-rotations demo")
    parser.add_argument("demo", choices=sorted(DEMOS), help="Demo to run")
    args = parser.parse_args()

    demo_file = DEMOS[args.demo]
    if not demo_file.exists():
        print(f"Demo file not found: {demo_file}")
        sys.exit(1)

    runpy.run_path(str(demo_file), run_name="__main__")


if __name__ == "__main__":
    main()
