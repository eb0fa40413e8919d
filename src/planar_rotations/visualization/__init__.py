"""Visualization of rotations."""

from .rotation_plot import RotationPlotter, quick_plot_rotation

__all__ = [
    'RotationPlotter',
    'quick_plot_rotation',
]
