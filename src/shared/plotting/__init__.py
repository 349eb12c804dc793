"""Plotting utilities for mesh visualization."""

from .mesh import plot_mesh, save_mesh_plot

# Import style module to trigger sns.set_theme() on package import
from . import style  # noqa: F401

__all__ = [
    "plot_mesh",
    "save_mesh_plot",
]
