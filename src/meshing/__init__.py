"""Structured 2D mesh generation for finite volume discretizations.

Mesh Modes:
-----------
create_mesh_2d (explicit dispatch on mode name)
├── build_uniform_mesh_2d     (nx, ny, width, height)
├── build_nonuniform_mesh_2d  (face_locations_x, face_locations_y)
└── build_tilted_mesh_2d      (nx, ny, p1, p2, p3, p4)
"""

from .builders import (
    MESH_BUILDERS,
    build_nonuniform_mesh_2d,
    build_tilted_mesh_2d,
    build_uniform_mesh_2d,
    create_mesh_2d,
    tilted_vertices,
)
from .cell_numbering import cell_numbering, ghost_corner_indices
from .errors import InvalidArgument, MeshError, ShapeMismatch
from .mesh_data import AxisData, MeshStructure
from .quality import aspect_ratios, cell_areas, expansion_ratios, quality_report

__all__ = [
    # Data structures
    "AxisData",
    "MeshStructure",
    # Builders
    "MESH_BUILDERS",
    "create_mesh_2d",
    "build_uniform_mesh_2d",
    "build_nonuniform_mesh_2d",
    "build_tilted_mesh_2d",
    "tilted_vertices",
    # Numbering
    "cell_numbering",
    "ghost_corner_indices",
    # Quality
    "cell_areas",
    "aspect_ratios",
    "expansion_ratios",
    "quality_report",
    # Errors
    "MeshError",
    "InvalidArgument",
    "ShapeMismatch",
]
