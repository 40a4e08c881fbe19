"""Inverse kinematics (law-of-cosines triangle) core module.

Solves one two-segment limb at a time. The anchor (hip), knee and target
form a triangle with sides

    a = distal length   (opposite the anchor)
    b = |target - anchor| (opposite the knee)
    c = proximal length (opposite the target)

Angles are measured counter-clockwise; the proximal angle is absolute and
the distal angle is relative to the proximal segment, which is the order
`forward_kinematics.evaluate` composes them in.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

import geometry as gm
from errors import DegenerateTargetError, LimbIKError, NonFiniteTargetError, NotANumberError

logger = logging.getLogger(__name__)

Vec2 = gm.Vec2

# ---------------------------------------------------------------------------
# Public enums and dataclasses
# ---------------------------------------------------------------------------

class BearingMode(Enum):
    """How the anchor->target bearing enters the proximal angle.

    ASIN keeps the historical ``asin(dx / b)`` form, which is only correct
    while the target lies in the upper half-plane (dy >= 0) relative to the
    anchor. ATAN2 uses the full-circle bearing.
    """
    ASIN = "asin"
    ATAN2 = "atan2"


class Reach(Enum):
    REACHABLE = "reachable"
    # b > a + c: chain fully extended toward the target.
    BEYOND = "beyond"
    # b < |a - c|: chain folded as far as it goes, foot short of the target.
    INSIDE = "inside"


@dataclass(frozen=True)
class LimbSolution:
    proximal_angle: float
    distal_angle: float
    reach: Reach
    distance: float

    @property
    def reachable(self) -> bool:
        return self.reach is Reach.REACHABLE

    @property
    def angles(self) -> Tuple[float, float]:
        return self.proximal_angle, self.distal_angle

    def __iter__(self) -> Iterator[float]:
        return iter(self.angles)

# ---------------------------------------------------------------------------
# Solver
# ---------------------------------------------------------------------------

def solve(anchor: Vec2, target: Vec2, proximal_len: float, distal_len: float,
          *, clamp: bool = True, bearing_mode: BearingMode = BearingMode.ASIN) -> LimbSolution:
    """Return the (proximal, distal) angles that put the foot on ``target``.

    Raises DegenerateTargetError when target == anchor and NonFiniteTargetError
    when either point has a NaN or infinite coordinate. With ``clamp=False``
    the law-of-cosines ratios are passed to acos unguarded and an
    out-of-range ratio raises NotANumberError instead of yielding NaN.
    """
    a = float(distal_len)
    c = float(proximal_len)
    delta = gm.Geometry.as_array(target) - gm.Geometry.as_array(anchor)
    b = float(np.linalg.norm(delta))
    if not np.isfinite(b):
        raise NonFiniteTargetError(anchor, target)
    if b == 0.0:
        raise DegenerateTargetError(anchor, target)

    if b > a + c:
        # Triangle is degenerate: point the straight chain along the bearing.
        heading = gm.bearing(anchor, target)
        return LimbSolution(heading, 0.0, Reach.BEYOND, b)

    if a == 0.0 or c == 0.0:
        # One segment has no length, so the chain is a single rod.
        heading = gm.bearing(anchor, target)
        reach = Reach.REACHABLE if np.isclose(b, a + c) else Reach.INSIDE
        return LimbSolution(heading, 0.0, reach, b)

    alpha = gm.safe_acos((b * b + c * c - a * a) / (2.0 * b * c), clamp=clamp)
    beta = gm.safe_acos((a * a + c * c - b * b) / (2.0 * a * c), clamp=clamp)

    if bearing_mode is BearingMode.ATAN2:
        proximal = gm.bearing(anchor, target) - alpha
    else:
        s = gm.safe_asin(float(delta[0]) / b, clamp=clamp)
        proximal = np.pi / 2.0 - s - alpha
    distal = np.pi - beta

    reach = Reach.INSIDE if b < abs(a - c) else Reach.REACHABLE
    return LimbSolution(float(proximal), float(distal), reach, b)


class IKSolver:
    """Two-segment limb solver bound to fixed segment lengths.

    Coordinate System:
        - Angles are radians, counter-clockwise from +X.
        - With the default ASIN bearing the solver is only exact for targets
          with y >= anchor y; use BearingMode.ATAN2 for full-circle targets.
    """
    def __init__(self, proximal_len: float, distal_len: float,
                 *, bearing_mode: BearingMode = BearingMode.ASIN) -> None:
        if proximal_len < 0 or distal_len < 0:
            raise ValueError("segment lengths must be >= 0")
        self.proximal_len = float(proximal_len)
        self.distal_len = float(distal_len)
        self.bearing_mode = bearing_mode

    @property
    def max_reach(self) -> float:
        return self.proximal_len + self.distal_len

    def solve(self, anchor: Vec2, target: Vec2) -> LimbSolution:
        return solve(anchor, target, self.proximal_len, self.distal_len,
                     bearing_mode=self.bearing_mode)

    def solve_or_none(self, anchor: Vec2, target: Vec2) -> Optional[LimbSolution]:
        try:
            return self.solve(anchor, target)
        except LimbIKError as exc:
            logger.warning("IK failed for anchor=%s target=%s: %s", anchor, target, exc)
            return None

    def batch_solve(self, anchor: Vec2, targets: Iterable[Vec2]) -> List[LimbSolution]:
        return [self.solve(anchor, t) for t in targets]

    def angles(self, anchor: Vec2, target: Vec2) -> Optional[Tuple[float, float]]:
        sol = self.solve_or_none(anchor, target)
        if sol is None:
            return None
        return sol.angles


__all__ = [
    "BearingMode",
    "Reach",
    "LimbSolution",
    "solve",
    "IKSolver",
    "DegenerateTargetError",
    "NonFiniteTargetError",
    "NotANumberError",
    "LimbIKError",
]
