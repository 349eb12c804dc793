"""Argument checks shared by the mesh builders."""

import numpy as np

from .errors import InvalidArgument, ShapeMismatch


def check_count(name: str, n) -> int:
    """Return ``n`` as int if it is a positive integer (bools rejected)."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidArgument(f"{name} must be an integer, got {n!r}")
    if n <= 0:
        raise InvalidArgument(f"{name} must be positive, got {n}")
    return int(n)


def check_length(name: str, value) -> float:
    """Return ``value`` as float if it is positive and finite."""
    try:
        value = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"{name} must be a number, got {value!r}") from exc
    if not np.isfinite(value) or value <= 0:
        raise InvalidArgument(f"{name} must be a positive finite number, got {value}")
    return value


def _as_float_array(name: str, values) -> np.ndarray:
    try:
        return np.asarray(values, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"{name} must contain numbers, got {values!r}") from exc


def check_face_locations(name: str, faces) -> np.ndarray:
    """Return strictly increasing 1D face coordinates as a float array."""
    faces = _as_float_array(name, faces)
    if faces.ndim != 1:
        raise ShapeMismatch(f"{name} must be one-dimensional, got shape {faces.shape}")
    if faces.size < 2:
        raise InvalidArgument(f"{name} needs at least 2 face locations, got {faces.size}")
    if not np.all(np.isfinite(faces)):
        raise InvalidArgument(f"{name} contains non-finite values")
    if np.any(np.diff(faces) <= 0):
        raise InvalidArgument(f"{name} must be strictly increasing")
    return faces


def check_point(name: str, p) -> np.ndarray:
    """Return a finite (x, y) point as a float array."""
    p = _as_float_array(name, p)
    if p.shape != (2,):
        raise ShapeMismatch(f"{name} must be a 2D point (x, y), got shape {p.shape}")
    if not np.all(np.isfinite(p)):
        raise InvalidArgument(f"{name} contains non-finite values")
    return p
