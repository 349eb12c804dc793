"""Tests for meshes on tilted quadrilateral domains."""

import numpy as np
import pytest

from meshing import (
    InvalidArgument,
    ShapeMismatch,
    build_tilted_mesh_2d,
    build_uniform_mesh_2d,
    cell_areas,
    tilted_vertices,
)


class TestTiltedVertices:
    """Boundary and interior vertex placement."""

    def test_boundary_follows_edges(self, trapezoid_params):
        p = trapezoid_params
        nx, ny = p["nx"], p["ny"]
        corners = [np.asarray(p[k]) for k in ("p1", "p2", "p3", "p4")]
        V = tilted_vertices(nx, ny, *corners)

        assert V.shape == (nx + 1, ny + 1, 2)
        assert np.allclose(V[0, :], np.linspace(p["p1"], p["p2"], ny + 1))  # left
        assert np.allclose(V[-1, :], np.linspace(p["p4"], p["p3"], ny + 1))  # right
        assert np.allclose(V[:, 0], np.linspace(p["p1"], p["p4"], nx + 1))  # bottom
        assert np.allclose(V[:, -1], np.linspace(p["p2"], p["p3"], nx + 1))  # top

    def test_interior_is_bilinear(self, trapezoid_params):
        """With straight edges the blend equals bilinear corner interpolation."""
        p = trapezoid_params
        nx, ny = p["nx"], p["ny"]
        p1, p2, p3, p4 = (np.asarray(p[k]) for k in ("p1", "p2", "p3", "p4"))
        V = tilted_vertices(nx, ny, p1, p2, p3, p4)

        for i in range(nx + 1):
            for j in range(ny + 1):
                s, t = i / nx, j / ny
                expected = (
                    (1 - s) * (1 - t) * p1 + (1 - s) * t * p2 + s * t * p3 + s * (1 - t) * p4
                )
                assert np.allclose(V[i, j], expected)


class TestTiltedMesh:
    """Tests for build_tilted_mesh_2d."""

    def test_shapes(self, parallelogram_params):
        nx, ny = parallelogram_params["nx"], parallelogram_params["ny"]
        mesh = build_tilted_mesh_2d(**parallelogram_params)

        assert mesh.tilted
        assert mesh.dimensions == 2
        assert mesh.number_of_cells == (nx, ny)
        assert mesh.face_centers.x.shape == (nx + 1, ny + 1)
        assert mesh.face_centers.y.shape == (nx + 1, ny + 1)
        assert mesh.cell_centers.x.shape == (nx, ny)
        assert mesh.cell_size.x.shape == (nx + 2, ny + 2)
        assert mesh.cell_size.y.shape == (nx + 2, ny + 2)

        # Length invariants along each axis's own dimension
        assert len(mesh.cell_centers.x) == nx
        assert mesh.cell_centers.y.shape[1] == ny
        assert len(mesh.face_centers.x) == nx + 1
        assert mesh.face_centers.y.shape[1] == ny + 1

    def test_corners(self, parallelogram_params):
        p = parallelogram_params
        mesh = build_tilted_mesh_2d(**p)
        X, Y = mesh.face_centers.x, mesh.face_centers.y

        assert np.allclose([X[0, 0], Y[0, 0]], p["p1"])
        assert np.allclose([X[0, -1], Y[0, -1]], p["p2"])
        assert np.allclose([X[-1, -1], Y[-1, -1]], p["p3"])
        assert np.allclose([X[-1, 0], Y[-1, 0]], p["p4"])

    def test_cell_centers_average_vertices(self, trapezoid_params):
        mesh = build_tilted_mesh_2d(**trapezoid_params)
        X, Y = mesh.face_centers.x, mesh.face_centers.y

        Xc = 0.25 * (X[:-1, :-1] + X[1:, :-1] + X[:-1, 1:] + X[1:, 1:])
        Yc = 0.25 * (Y[:-1, :-1] + Y[1:, :-1] + Y[:-1, 1:] + Y[1:, 1:])
        assert np.allclose(mesh.cell_centers.x, Xc)
        assert np.allclose(mesh.cell_centers.y, Yc)

    def test_parallelogram_cell_sizes(self, parallelogram_params):
        """Every parallelogram cell has the same edge lengths."""
        p = parallelogram_params
        mesh = build_tilted_mesh_2d(**p)

        dx = np.linalg.norm(np.subtract(p["p4"], p["p1"])) / p["nx"]
        dy = np.linalg.norm(np.subtract(p["p2"], p["p1"])) / p["ny"]
        assert np.allclose(mesh.cell_size.x, dx)
        assert np.allclose(mesh.cell_size.y, dy)

    def test_ghost_sizes_replicate_boundary(self, trapezoid_params):
        mesh = build_tilted_mesh_2d(**trapezoid_params)
        DX = mesh.cell_size.x

        assert np.allclose(DX[0, 1:-1], DX[1, 1:-1])
        assert np.allclose(DX[-1, 1:-1], DX[-2, 1:-1])
        assert np.allclose(DX[1:-1, 0], DX[1:-1, 1])
        assert np.allclose(DX[1:-1, -1], DX[1:-1, -2])

    def test_areas_tile_domain(self, parallelogram_params, trapezoid_params):
        parallelogram = build_tilted_mesh_2d(**parallelogram_params)
        trapezoid = build_tilted_mesh_2d(**trapezoid_params)

        assert np.all(cell_areas(parallelogram) > 0)
        assert np.sum(cell_areas(parallelogram)) == pytest.approx(5.5)
        assert np.sum(cell_areas(trapezoid)) == pytest.approx(2.875)

    def test_axis_aligned_matches_uniform(self):
        """A rectangle given by its corners reproduces the uniform mesh."""
        tilted = build_tilted_mesh_2d(5, 7, [0, 0], [0, 20], [10, 20], [10, 0])
        uniform = build_uniform_mesh_2d(5, 7, 10.0, 20.0)
        Xf, Yf = uniform.face_grid()
        Xc, Yc = uniform.cell_grid()

        assert np.allclose(tilted.face_centers.x, Xf)
        assert np.allclose(tilted.face_centers.y, Yf)
        assert np.allclose(tilted.cell_centers.x, Xc)
        assert np.allclose(tilted.cell_centers.y, Yc)
        assert np.allclose(tilted.cell_size.x, 2.0)
        assert np.allclose(tilted.cell_size.y, 20.0 / 7)
        assert np.array_equal(tilted.ghost_cell_indices, uniform.ghost_cell_indices)

    def test_single_cell(self):
        mesh = build_tilted_mesh_2d(1, 1, [0, 0], [1, 1], [3, 1], [2, 0])

        assert mesh.face_centers.x.shape == (2, 2)
        assert np.allclose(mesh.cell_centers.x, [[1.5]])
        assert np.allclose(mesh.cell_centers.y, [[0.5]])

    @pytest.mark.parametrize(
        "corners",
        [
            ([0, 0], [1, 1], [2, 2], [3, 3]),  # collinear
            ([0, 0], [0, 0], [0, 0], [0, 0]),  # single point
            ([0, 0], [0, 1], [0, 2], [0, 3]),  # vertical line
        ],
    )
    def test_rejects_collinear_corners(self, corners):
        with pytest.raises(InvalidArgument, match="collinear"):
            build_tilted_mesh_2d(4, 4, *corners)

    def test_rejects_wrong_ordering(self):
        """Swapping left and right folds the grid."""
        with pytest.raises(InvalidArgument):
            build_tilted_mesh_2d(3, 3, [1, 0], [1, 1], [0, 1], [0, 0])

    def test_rejects_self_intersecting(self):
        """Bow-tie corners have zero net area or folded cells."""
        with pytest.raises(InvalidArgument):
            build_tilted_mesh_2d(3, 3, [0, 0], [1, 1], [0, 1], [1, 0])

    @pytest.mark.parametrize("nx,ny", [(0, 3), (3, 0), (-2, 2)])
    def test_rejects_non_positive_counts(self, nx, ny):
        with pytest.raises(InvalidArgument):
            build_tilted_mesh_2d(nx, ny, [0, 0], [0, 1], [1, 1], [1, 0])

    def test_thin_domain(self):
        """A long thin rectangle is valid, not collinear."""
        mesh = build_tilted_mesh_2d(4, 2, [0, 0], [0, 1e-7], [1e6, 1e-7], [1e6, 0])

        assert np.all(cell_areas(mesh) > 0)
        assert np.sum(cell_areas(mesh)) == pytest.approx(0.1)

    def test_rejects_non_numeric_point(self):
        with pytest.raises(InvalidArgument, match="p3"):
            build_tilted_mesh_2d(2, 2, [0, 0], [0, 1], ["a", "b"], [1, 0])

    def test_rejects_bad_point_shape(self):
        with pytest.raises(ShapeMismatch):
            build_tilted_mesh_2d(2, 2, [0, 0, 0], [0, 1], [1, 1], [1, 0])
