"""Builders for structured 2D finite volume meshes.

Three input modes are supported, each with its own entry point:

- ``build_uniform_mesh_2d(nx, ny, width, height)``: rectangle with constant spacing
- ``build_nonuniform_mesh_2d(face_locations_x, face_locations_y)``: explicit faces
- ``build_tilted_mesh_2d(nx, ny, p1, p2, p3, p4)``: general quadrilateral

``create_mesh_2d(mode, **kwargs)`` dispatches on an explicit mode name and is the
target used by the Hydra mesh configs.

Tilted domain corners::

    p2 -----------p3
     |            |
     |            |
    p1 -----------p4
"""

from __future__ import annotations

import logging

import numpy as np

from .cell_numbering import ghost_corner_indices
from .errors import InvalidArgument, ShapeMismatch
from .mesh_data import AxisData, MeshStructure
from .quality import quadrilateral_areas
from .validation import check_count, check_face_locations, check_length, check_point

log = logging.getLogger(__name__)


# =============================================================================
# Rectangular meshes
# =============================================================================


def _ghost_padded(sizes: np.ndarray) -> np.ndarray:
    """Pad interior cell sizes with one ghost on each side (edge replication)."""
    return np.concatenate([sizes[:1], sizes, sizes[-1:]])


def build_uniform_mesh_2d(nx: int, ny: int, width: float, height: float) -> MeshStructure:
    """Build a uniform rectangular mesh on [0, width] x [0, height].

    Parameters
    ----------
    nx, ny : int
        Number of cells in x and y directions.
    width, height : float
        Domain size in x and y directions.

    Returns
    -------
    MeshStructure
        Cell sizes are ``width/nx`` and ``height/ny`` everywhere, ghost cells included.

    Raises
    ------
    InvalidArgument
        If a count or a length is not positive.
    """
    nx = check_count("nx", nx)
    ny = check_count("ny", ny)
    width = check_length("width", width)
    height = check_length("height", height)

    dx = width / nx
    dy = height / ny

    mesh = MeshStructure(
        dimensions=2,
        number_of_cells=(nx, ny),
        cell_size=AxisData(x=np.full(nx + 2, dx), y=np.full(ny + 2, dy)),
        cell_centers=AxisData(
            x=np.arange(1, nx + 1) * dx - dx / 2,
            y=np.arange(1, ny + 1) * dy - dy / 2,
        ),
        face_centers=AxisData(x=np.arange(nx + 1) * dx, y=np.arange(ny + 1) * dy),
        ghost_cell_indices=ghost_corner_indices(nx, ny),
    )
    log.debug(f"Built uniform mesh: nx={nx}, ny={ny}, dx={dx:.4g}, dy={dy:.4g}")
    return mesh


def build_nonuniform_mesh_2d(
    face_locations_x,
    face_locations_y,
    nx: int | None = None,
    ny: int | None = None,
) -> MeshStructure:
    """Build a rectangular mesh from explicit face locations.

    Parameters
    ----------
    face_locations_x, face_locations_y : array_like
        Strictly increasing face coordinates (at least 2 each).
    nx, ny : int, optional
        Expected cell counts. When given they must match ``len(faces) - 1``.

    Returns
    -------
    MeshStructure
        Interior cell sizes are the face spacings; ghost cells copy the size of
        the adjacent boundary cell.

    Raises
    ------
    InvalidArgument
        If a sequence is too short, not numeric, not finite or not strictly
        increasing, or if ``nx``/``ny`` is not a positive integer.
    ShapeMismatch
        If a sequence is not 1D or disagrees with ``nx``/``ny``.
    """
    fx = check_face_locations("face_locations_x", face_locations_x)
    fy = check_face_locations("face_locations_y", face_locations_y)

    for name, expected, faces in (("nx", nx, fx), ("ny", ny, fy)):
        if expected is not None and check_count(name, expected) != faces.size - 1:
            raise ShapeMismatch(
                f"{name}={expected} does not match {faces.size} face locations"
            )

    nx, ny = fx.size - 1, fy.size - 1

    mesh = MeshStructure(
        dimensions=2,
        number_of_cells=(nx, ny),
        cell_size=AxisData(x=_ghost_padded(np.diff(fx)), y=_ghost_padded(np.diff(fy))),
        cell_centers=AxisData(x=0.5 * (fx[1:] + fx[:-1]), y=0.5 * (fy[1:] + fy[:-1])),
        face_centers=AxisData(x=fx, y=fy),
        ghost_cell_indices=ghost_corner_indices(nx, ny),
    )
    log.debug(f"Built non-uniform mesh: nx={nx}, ny={ny}")
    return mesh


# =============================================================================
# Tilted (quadrilateral) meshes
# =============================================================================


def _polygon_area(points: np.ndarray) -> float:
    """Signed shoelace area of a closed polygon (counter-clockwise positive)."""
    x, y = points[:, 0], points[:, 1]
    return 0.5 * float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def tilted_vertices(nx: int, ny: int, p1, p2, p3, p4) -> np.ndarray:
    """Vertex coordinates of a quadrilateral domain, shape (nx+1, ny+1, 2).

    Boundary vertices are spaced evenly along each edge; interior vertices are
    obtained by transfinite (Coons) interpolation of the four edges.
    """
    left = np.linspace(p1, p2, ny + 1)
    right = np.linspace(p4, p3, ny + 1)
    bottom = np.linspace(p1, p4, nx + 1)
    top = np.linspace(p2, p3, nx + 1)

    s = np.linspace(0.0, 1.0, nx + 1)[:, None, None]
    t = np.linspace(0.0, 1.0, ny + 1)[None, :, None]

    edges = (1 - s) * left[None] + s * right[None] + (1 - t) * bottom[:, None] + t * top[:, None]
    corners = (1 - s) * (1 - t) * p1 + (1 - s) * t * p2 + s * t * p3 + s * (1 - t) * p4
    return edges - corners


def build_tilted_mesh_2d(nx: int, ny: int, p1, p2, p3, p4) -> MeshStructure:
    """Build a structured mesh on a general quadrilateral.

    Parameters
    ----------
    nx, ny : int
        Number of cells along the p1-p4 (x) and p1-p2 (y) directions.
    p1, p2, p3, p4 : array_like
        Corners ordered bottom-left, top-left, top-right, bottom-right.

    Returns
    -------
    MeshStructure
        With 2D coordinate fields in "ij" layout: ``face_centers`` hold the
        (nx+1, ny+1) vertices, ``cell_centers`` the (nx, ny) vertex averages and
        ``cell_size`` the (nx+2, ny+2) distances between opposite face midpoints.

    Raises
    ------
    InvalidArgument
        If a count is not positive, the corners are collinear, or their ordering
        folds the grid.
    ShapeMismatch
        If a corner is not a 2-vector.
    """
    nx = check_count("nx", nx)
    ny = check_count("ny", ny)
    corners = np.array(
        [check_point(name, p) for name, p in zip(("p1", "p2", "p3", "p4"), (p1, p2, p3, p4))]
    )

    # tolerance scales with the bounding box area
    width, height = np.ptp(corners, axis=0)
    area = _polygon_area(corners)
    if width == 0.0 or height == 0.0 or abs(area) <= 1e-12 * width * height:
        raise InvalidArgument("Corner points are collinear (zero-area quadrilateral)")

    V = tilted_vertices(nx, ny, *corners)
    X, Y = V[..., 0], V[..., 1]

    if np.any(quadrilateral_areas(X, Y) <= 0):
        raise InvalidArgument(
            "Corners must be ordered bottom-left, top-left, top-right, bottom-right "
            "and form a non-self-intersecting quadrilateral"
        )

    centers = 0.25 * (V[:-1, :-1] + V[1:, :-1] + V[:-1, 1:] + V[1:, 1:])

    west = 0.5 * (V[:-1, :-1] + V[:-1, 1:])
    east = 0.5 * (V[1:, :-1] + V[1:, 1:])
    south = 0.5 * (V[:-1, :-1] + V[1:, :-1])
    north = 0.5 * (V[:-1, 1:] + V[1:, 1:])
    dx = np.linalg.norm(east - west, axis=-1)
    dy = np.linalg.norm(north - south, axis=-1)

    mesh = MeshStructure(
        dimensions=2,
        number_of_cells=(nx, ny),
        cell_size=AxisData(x=np.pad(dx, 1, mode="edge"), y=np.pad(dy, 1, mode="edge")),
        cell_centers=AxisData(x=centers[..., 0], y=centers[..., 1]),
        face_centers=AxisData(x=X, y=Y),
        ghost_cell_indices=ghost_corner_indices(nx, ny),
    )
    log.debug(f"Built tilted mesh: nx={nx}, ny={ny}, area={abs(area):.4g}")
    return mesh


# =============================================================================
# Dispatch
# =============================================================================


MESH_BUILDERS = {
    "uniform": build_uniform_mesh_2d,
    "nonuniform": build_nonuniform_mesh_2d,
    "tilted": build_tilted_mesh_2d,
}


def create_mesh_2d(mode: str, **kwargs) -> MeshStructure:
    """Build a mesh with the builder registered under ``mode``.

    Examples
    --------
    >>> mesh = create_mesh_2d("uniform", nx=5, ny=7, width=10.0, height=20.0)
    >>> mesh.face_centers.x
    array([ 0.,  2.,  4.,  6.,  8., 10.])
    """
    try:
        builder = MESH_BUILDERS[mode]
    except KeyError:
        raise InvalidArgument(
            f"Unknown mesh mode '{mode}'. Choose from {sorted(MESH_BUILDERS)}"
        ) from None
    return builder(**kwargs)
