"""Geometric quality measures for structured meshes."""

from __future__ import annotations

import numpy as np

from .mesh_data import MeshStructure


def quadrilateral_areas(X: np.ndarray, Y: np.ndarray) -> np.ndarray:
    """Signed areas of the cells spanned by a vertex grid.

    Vertices (i, j), (i+1, j), (i+1, j+1), (i, j+1) are taken counter-clockwise,
    so a grid with x growing along axis 0 and y along axis 1 has positive areas.
    The area of a planar quadrilateral is half the cross product of its diagonals.
    """
    d1x = X[1:, 1:] - X[:-1, :-1]
    d1y = Y[1:, 1:] - Y[:-1, :-1]
    d2x = X[:-1, 1:] - X[1:, :-1]
    d2y = Y[:-1, 1:] - Y[1:, :-1]
    return 0.5 * (d1x * d2y - d1y * d2x)


def cell_areas(mesh: MeshStructure) -> np.ndarray:
    """Areas of the interior cells, shape (nx, ny)."""
    if mesh.tilted:
        return quadrilateral_areas(*mesh.face_grid())
    return np.outer(mesh.cell_size.x[1:-1], mesh.cell_size.y[1:-1])


def aspect_ratios(mesh: MeshStructure) -> np.ndarray:
    """max(dx, dy) / min(dx, dy) per interior cell."""
    DX, DY = mesh.interior_cell_sizes()
    return np.maximum(DX, DY) / np.minimum(DX, DY)


def expansion_ratios(mesh: MeshStructure):
    """Ratios of consecutive interior cell sizes along each axis.

    Returns
    -------
    rx : np.ndarray
        dx[i+1] / dx[i], shape (nx-1, ny)
    ry : np.ndarray
        dy[j+1] / dy[j], shape (nx, ny-1)
    """
    DX, DY = mesh.interior_cell_sizes()
    return DX[1:, :] / DX[:-1, :], DY[:, 1:] / DY[:, :-1]


def _max_symmetric(ratios: np.ndarray) -> float:
    # a shrinking ratio of 0.5 is as strong as a growing one of 2
    if ratios.size == 0:
        return 1.0
    return float(np.max(np.maximum(ratios, 1.0 / ratios)))


def quality_report(mesh: MeshStructure) -> dict:
    """Scalar quality summary of a mesh."""
    areas = cell_areas(mesh)
    rx, ry = expansion_ratios(mesh)
    return {
        "total_area": float(np.sum(areas)),
        "min_cell_area": float(np.min(areas)),
        "max_cell_area": float(np.max(areas)),
        "max_aspect_ratio": float(np.max(aspect_ratios(mesh))),
        "max_expansion_ratio_x": _max_symmetric(rx),
        "max_expansion_ratio_y": _max_symmetric(ry),
    }
