"""Flat numbering of the ghost-padded cell grid."""

import numpy as np

from .validation import check_count


def cell_numbering(nx: int, ny: int) -> np.ndarray:
    """Return the (nx+2, ny+2) array of flat cell indices.

    Indices are 0-based and row-major, i.e. ``G[i, j] == i * (ny + 2) + j``,
    with i = 0 and i = nx+1 (j = 0 and j = ny+1) being the ghost layers.
    """
    nx = check_count("nx", nx)
    ny = check_count("ny", ny)
    return np.arange((nx + 2) * (ny + 2)).reshape(nx + 2, ny + 2)


def ghost_corner_indices(nx: int, ny: int) -> np.ndarray:
    """Flat indices of the four corner ghost cells.

    Order: (0, 0), (nx+1, 0), (0, ny+1), (nx+1, ny+1), i.e. bottom-left,
    bottom-right, top-left, top-right.
    """
    G = cell_numbering(nx, ny)
    return G[np.ix_([0, -1], [0, -1])].ravel(order="F")
