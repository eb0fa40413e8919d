"""
Matplotlib-based visualization for 2D rotations.
"""

from typing import Optional, Sequence, Tuple
import logging
import numpy as np
import matplotlib.pyplot as plt

from ..geometry import Rotation2D

logger = logging.getLogger(__name__)


class RotationPlotter:
    """
    Draws a rotation as the image of the unit basis frame.
    """

    def __init__(self, figsize: Tuple[float, float] = (6, 6)):
        """
        Initialize plotter.

        Args:
            figsize: Figure size (width, height) in inches
        """
        self.figsize = figsize
        self.fig = None
        self.ax = None

    def _setup_figure(self, title: str = ""):
        """Create figure and axis."""
        self.fig, self.ax = plt.subplots(figsize=self.figsize)
        self.ax.set_aspect('equal')
        self.ax.grid(True, alpha=0.3, linestyle='--')
        self.ax.set_xlabel('X')
        self.ax.set_ylabel('Y')
        if title:
            self.ax.set_title(title, fontsize=14, fontweight='bold')

    def _arrow(self, vector: np.ndarray, color: str, alpha: float = 1.0):
        self.ax.arrow(0.0, 0.0, vector[0], vector[1],
                      head_width=0.05, head_length=0.05, length_includes_head=True,
                      fc=color, ec=color, alpha=alpha)

    def plot_rotation(self,
                      rotation: Rotation2D,
                      vectors: Optional[Sequence[Sequence[float]]] = None,
                      show_reference: bool = True,
                      title: Optional[str] = None) -> plt.Figure:
        """
        Plot a rotation.

        Args:
            rotation: Rotation to draw
            vectors: Extra 2-vectors drawn before (faded) and after rotation
            show_reference: Draw the unrotated basis frame
            title: Plot title (default: angle in degrees)

        Returns:
            Matplotlib figure
        """
        if title is None:
            title = f"Rotation by {np.degrees(float(rotation.rotation_angle())):.1f}°"

        self._setup_figure(title)

        basis = np.eye(2)
        rotated = rotation * basis

        if show_reference:
            self._arrow(basis[:, 0], 'tab:red', alpha=0.3)
            self._arrow(basis[:, 1], 'tab:green', alpha=0.3)
        self._arrow(rotated[:, 0], 'tab:red')
        self._arrow(rotated[:, 1], 'tab:green')

        points = [basis.T, rotated.T]
        if vectors is not None:
            original = np.asarray(vectors, dtype=np.float64).T
            moved = rotation * original
            for i in range(original.shape[1]):
                self._arrow(original[:, i], 'tab:blue', alpha=0.3)
                self._arrow(moved[:, i], 'tab:blue')
            points.extend([original.T, moved.T])

        # Unit circle for reference
        t = np.linspace(0.0, 2 * np.pi, 200)
        self.ax.plot(np.cos(t), np.sin(t), 'k:', linewidth=1, alpha=0.5)

        self._auto_scale_axis(np.vstack(points + [np.zeros((1, 2))]), padding=0.3)

        return self.fig

    def _auto_scale_axis(self, points: np.ndarray, padding: float = 0.5):
        """Auto-scale axis with padding."""
        extent = max(np.abs(points).max(), 1.0)
        self.ax.set_xlim(-extent - padding, extent + padding)
        self.ax.set_ylim(-extent - padding, extent + padding)

    def save(self, filepath: str, dpi: int = 150):
        """
        Save figure to file.

        Args:
            filepath: Output file path
            dpi: Resolution (dots per inch)
        """
        if self.fig is None:
            raise ValueError("No figure to save. Call a plot method first.")

        self.fig.savefig(filepath, dpi=dpi, bbox_inches='tight')
        logger.info("Saved figure to %s", filepath)

    def show(self):
        """Display the figure."""
        if self.fig is None:
            raise ValueError("No figure to show. Call a plot method first.")

        plt.show()

    def close(self):
        """Close the figure."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None


def quick_plot_rotation(rotation: Rotation2D, vectors=None):
    """Quick plot of a rotation (convenience function)."""
    plotter = RotationPlotter()
    plotter.plot_rotation(rotation, vectors=vectors)
    plotter.show()
