"""
Mesh Visualization.

Draws face lines and cell centers of structured meshes (any mode).
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt

from meshing import MeshStructure

log = logging.getLogger(__name__)


def plot_mesh(mesh: MeshStructure, ax=None, show_centers: bool = True):
    """Plot face lines (blue) and cell centers (red circles).

    Parameters
    ----------
    mesh : MeshStructure
        Mesh to draw.
    ax : matplotlib.axes.Axes, optional
        Target axes. A new figure is created if None.
    show_centers : bool
        Also mark the cell centers.

    Returns
    -------
    matplotlib.axes.Axes
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    Xf, Yf = mesh.face_grid()
    # Columns of the ij arrays are lines of constant j, rows of constant i
    ax.plot(Xf, Yf, "-b", linewidth=0.8)
    ax.plot(Xf.T, Yf.T, "-b", linewidth=0.8)

    if show_centers:
        Xc, Yc = mesh.cell_grid()
        ax.plot(Xc.ravel(), Yc.ravel(), "or", markersize=3)

    ax.set_xlabel(r"$x$")
    ax.set_ylabel(r"$y$")
    ax.set_aspect("equal")
    kind = "tilted" if mesh.tilted else "rectangular"
    ax.set_title(f"{kind} mesh, $N_x={mesh.nx}$, $N_y={mesh.ny}$")
    return ax


def save_mesh_plot(mesh: MeshStructure, output_path: Path, **kwargs) -> Path:
    """Plot a mesh to ``output_path`` and close the figure."""
    output_path = Path(output_path)
    fig, ax = plt.subplots(figsize=(6, 6))
    plot_mesh(mesh, ax=ax, **kwargs)
    plt.tight_layout()
    fig.savefig(output_path, dpi=300, bbox_inches="tight")
    plt.close(fig)
    log.info(f"Saved mesh plot to {output_path}")
    return output_path
