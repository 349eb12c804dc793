"""
MeshStructure: geometric description of a structured 2D finite volume grid.

This module defines the immutable record produced by the mesh builders. It only
holds geometry; connectivity is implied by the structured (i, j) layout.

Indexing Conventions:
- Per-axis arrays are stored in AxisData(x, y, z). z is the placeholder [0.0] in 2D.
- cell_size arrays include one ghost cell on each side (length N+2 along the axis).
- cell_centers have length N, face_centers length N+1 along the axis.
- Rectangular meshes (uniform/non-uniform) store 1D arrays per axis.
- Tilted meshes store 2D coordinate fields in "ij" layout:
    * face_centers.x/.y have shape (nx+1, ny+1) (cell vertices)
    * cell_centers.x/.y have shape (nx, ny)
    * cell_size.x/.y have shape (nx+2, ny+2)
  The length invariants then hold along the axis's own array dimension
  (axis 0 for x, axis 1 for y).

Ghost Numbering:
- The padded grid of (nx+2) x (ny+2) cells is numbered row-major, 0-based:
  flat = i * (ny + 2) + j
- ghost_cell_indices holds the four outer corner cells, see cell_numbering.py.

All arrays are flagged read-only on construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
import pandas as pd


def _frozen(values) -> np.ndarray:
    """Return a read-only float copy of ``values``."""
    arr = np.array(values, dtype=np.float64)
    arr.setflags(write=False)
    return arr


def _array_key(arr: np.ndarray):
    """Hashable key of an array, consistent with np.array_equal."""
    # adding 0.0 maps -0.0 to 0.0, which compares equal
    return arr.shape, (arr + 0.0).tobytes()


@dataclass(frozen=True, eq=False)
class AxisData:
    """Per-axis array triple (x, y, z)."""

    x: np.ndarray
    y: np.ndarray
    z: np.ndarray = field(default_factory=lambda: np.zeros(1))

    def __post_init__(self):
        # frozen dataclass: bypass __setattr__ to store read-only copies
        for name in ("x", "y", "z"):
            object.__setattr__(self, name, _frozen(getattr(self, name)))

    def __eq__(self, other):
        if not isinstance(other, AxisData):
            return NotImplemented
        return all(
            np.array_equal(getattr(self, name), getattr(other, name))
            for name in ("x", "y", "z")
        )

    def __hash__(self):
        return hash(tuple(_array_key(getattr(self, name)) for name in ("x", "y", "z")))


@dataclass(frozen=True, eq=False)
class MeshStructure:
    """Immutable geometry of a structured 2D mesh.

    Parameters
    ----------
    dimensions : int
        Always 2 for meshes built by this package.
    number_of_cells : tuple of int
        Interior cells (nx, ny).
    cell_size : AxisData
        Cell widths including one ghost cell per side.
    cell_centers : AxisData
        Interior cell center coordinates.
    face_centers : AxisData
        Interface coordinates; the first and last entries along an axis are the
        domain boundaries.
    ghost_cell_indices : np.ndarray
        Flat indices of the four corner ghost cells of the padded grid.
    """

    dimensions: int
    number_of_cells: tuple
    cell_size: AxisData
    cell_centers: AxisData
    face_centers: AxisData
    ghost_cell_indices: np.ndarray

    def __post_init__(self):
        object.__setattr__(
            self, "number_of_cells", tuple(int(n) for n in self.number_of_cells)
        )
        corners = np.array(self.ghost_cell_indices, dtype=np.int64)
        corners.setflags(write=False)
        object.__setattr__(self, "ghost_cell_indices", corners)

    def __eq__(self, other):
        if not isinstance(other, MeshStructure):
            return NotImplemented
        return (
            self.dimensions == other.dimensions
            and self.number_of_cells == other.number_of_cells
            and self.cell_size == other.cell_size
            and self.cell_centers == other.cell_centers
            and self.face_centers == other.face_centers
            and np.array_equal(self.ghost_cell_indices, other.ghost_cell_indices)
        )

    def __hash__(self):
        return hash(
            (
                self.dimensions,
                self.number_of_cells,
                self.cell_size,
                self.cell_centers,
                self.face_centers,
                self.ghost_cell_indices.tobytes(),
            )
        )

    # --- Convenience accessors ---

    @property
    def nx(self) -> int:
        return self.number_of_cells[0]

    @property
    def ny(self) -> int:
        return self.number_of_cells[1]

    @property
    def tilted(self) -> bool:
        """True when coordinates are stored as 2D fields (tilted domain)."""
        return self.face_centers.x.ndim == 2

    def face_grid(self):
        """Vertex coordinates (X, Y), each of shape (nx+1, ny+1)."""
        if self.tilted:
            return self.face_centers.x, self.face_centers.y
        return np.meshgrid(self.face_centers.x, self.face_centers.y, indexing="ij")

    def cell_grid(self):
        """Cell center coordinates (X, Y), each of shape (nx, ny)."""
        if self.tilted:
            return self.cell_centers.x, self.cell_centers.y
        return np.meshgrid(self.cell_centers.x, self.cell_centers.y, indexing="ij")

    def interior_cell_sizes(self):
        """Interior cell widths (DX, DY), each of shape (nx, ny)."""
        if self.tilted:
            return self.cell_size.x[1:-1, 1:-1], self.cell_size.y[1:-1, 1:-1]
        return np.meshgrid(
            self.cell_size.x[1:-1], self.cell_size.y[1:-1], indexing="ij"
        )

    # --- Export ---

    def to_dataframe(self) -> pd.DataFrame:
        """One row per interior cell (row-major over i, j)."""
        I, J = np.meshgrid(np.arange(self.nx), np.arange(self.ny), indexing="ij")
        X, Y = self.cell_grid()
        DX, DY = self.interior_cell_sizes()
        return pd.DataFrame(
            {
                "i": I.ravel(),
                "j": J.ravel(),
                "x": X.ravel(),
                "y": Y.ravel(),
                "dx": DX.ravel(),
                "dy": DY.ravel(),
            }
        )

    def to_vtk(self):
        """Face vertices as a PyVista StructuredGrid with a ``cell_id`` array."""
        import pyvista as pv

        X, Y = self.face_grid()
        grid = pv.StructuredGrid(X, Y, np.zeros_like(X))
        # VTK orders cells with i fastest
        ids = np.arange(self.nx * self.ny).reshape(self.nx, self.ny)
        grid.cell_data["cell_id"] = ids.ravel(order="F")
        return grid

    def summary(self) -> dict:
        """Scalar descriptors, used for logging and run tracking."""
        X, Y = self.face_grid()
        DX, DY = self.interior_cell_sizes()
        return {
            "nx": self.nx,
            "ny": self.ny,
            "tilted": self.tilted,
            "x_min": float(X.min()),
            "x_max": float(X.max()),
            "y_min": float(Y.min()),
            "y_max": float(Y.max()),
            "dx_min": float(DX.min()),
            "dx_max": float(DX.max()),
            "dy_min": float(DY.min()),
            "dy_max": float(DY.max()),
        }
