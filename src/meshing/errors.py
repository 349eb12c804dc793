"""Exceptions raised while building meshes."""


class MeshError(ValueError):
    """Base class for mesh construction failures."""


class InvalidArgument(MeshError):
    """Non-positive counts or lengths, non-monotonic faces, degenerate corners."""


class ShapeMismatch(MeshError):
    """Input arrays whose shape disagrees with what the builder expects."""
