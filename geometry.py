"""Low-level 2D geometric helpers for the two-segment limb solver."""
from __future__ import annotations

from typing import Tuple

import numpy as np

from errors import NotANumberError

Vec2 = Tuple[float, float]


class Geometry:
    """Namespace-style container for low-level geometric helper methods."""

    @staticmethod
    def as_array(p) -> np.ndarray:
        return np.asarray(p, dtype=float).reshape(2)

    @staticmethod
    def as_vec(v) -> Vec2:
        return (float(v[0]), float(v[1]))

    @staticmethod
    def rotation(angle: float) -> np.ndarray:
        """Counter-clockwise rotation matrix for ``angle`` radians."""
        c = np.cos(angle)
        s = np.sin(angle)
        return np.array([[c, -s], [s, c]], dtype=float)

    @staticmethod
    def distance(p0, p1) -> float:
        return float(np.linalg.norm(Geometry.as_array(p1) - Geometry.as_array(p0)))

    @staticmethod
    def as_finite_vec(p, name: str = "point") -> Vec2:
        """Like as_vec, but rejects NaN and infinite coordinates."""
        v = Geometry.as_vec(p)
        if not (np.isfinite(v[0]) and np.isfinite(v[1])):
            raise ValueError(f"{name} must have finite coordinates, got {v!r}")
        return v

    @staticmethod
    def bearing(p0, p1) -> float:
        """Full-circle bearing of p1 seen from p0, radians in (-pi, pi]."""
        v = Geometry.as_array(p1) - Geometry.as_array(p0)
        return float(np.arctan2(v[1], v[0]))

    @staticmethod
    def clamp(value: float, lo: float, hi: float) -> float:
        return max(lo, min(hi, value))

    @staticmethod
    def safe_acos(ratio: float, *, clamp: bool = True) -> float:
        """acos that never returns NaN.

        Rounding can push a law-of-cosines ratio a hair outside [-1, 1] even
        for a valid triangle. With ``clamp`` the ratio is pulled back into
        range; without it an out-of-range ratio raises ``NotANumberError``.
        """
        if clamp:
            ratio = Geometry.clamp(ratio, -1.0, 1.0)
        with np.errstate(invalid="ignore"):
            angle = float(np.arccos(ratio))
        if np.isnan(angle):
            raise NotANumberError("acos", ratio)
        return angle

    @staticmethod
    def safe_asin(ratio: float, *, clamp: bool = True) -> float:
        if clamp:
            ratio = Geometry.clamp(ratio, -1.0, 1.0)
        with np.errstate(invalid="ignore"):
            angle = float(np.arcsin(ratio))
        if np.isnan(angle):
            raise NotANumberError("asin", ratio)
        return angle


# Module-level helpers

def rotation(angle: float) -> np.ndarray:
    return Geometry.rotation(angle)


def distance(p0, p1) -> float:
    return Geometry.distance(p0, p1)


def bearing(p0, p1) -> float:
    return Geometry.bearing(p0, p1)


def safe_acos(ratio: float, *, clamp: bool = True) -> float:
    return Geometry.safe_acos(ratio, clamp=clamp)


def safe_asin(ratio: float, *, clamp: bool = True) -> float:
    return Geometry.safe_asin(ratio, clamp=clamp)


def as_vec(v) -> Vec2:
    return Geometry.as_vec(v)


def as_finite_vec(p, name: str = "point") -> Vec2:
    return Geometry.as_finite_vec(p, name)


__all__ = [
    "Vec2",
    "Geometry",
    "rotation",
    "distance",
    "bearing",
    "safe_acos",
    "safe_asin",
    "as_vec",
    "as_finite_vec",
]
