"""Forward kinematics for the two-segment limb.

The distal segment is expressed in the proximal joint's frame, then the
whole assembly is rotated by the proximal angle and moved to the anchor:

    knee = anchor + R(p) @ (c, 0)
    foot = anchor + R(p) @ (R(d) @ (a, 0) + (c, 0))

Swapping the rotation order gives a plausible looking but wrong foot.
"""
from __future__ import annotations

from typing import Tuple

import numpy as np

import geometry as gm
from limb import Limb

Vec2 = gm.Vec2


def evaluate(anchor: Vec2, proximal_angle: float, proximal_len: float,
             distal_angle: float, distal_len: float) -> Tuple[Vec2, Vec2]:
    """Return world-space (knee, foot) for the given joint angles."""
    origin = gm.Geometry.as_array(anchor)
    upper = np.array([float(proximal_len), 0.0])
    lower = np.array([float(distal_len), 0.0])
    hip_rot = gm.rotation(proximal_angle)
    knee = origin + hip_rot @ upper
    foot = origin + hip_rot @ (gm.rotation(distal_angle) @ lower + upper)
    return gm.as_vec(knee), gm.as_vec(foot)


def limb_pose(anchor: Vec2, limb: Limb) -> Tuple[Vec2, Vec2]:
    """(knee, foot) for a limb's current angles."""
    return evaluate(anchor, limb.proximal.angle, limb.proximal_len,
                    limb.distal.angle, limb.distal_len)


def foot_error(anchor: Vec2, limb: Limb) -> float:
    """Distance between where the foot is drawn and where it was asked to go."""
    _, foot = limb_pose(anchor, limb)
    return gm.distance(foot, limb.target)


__all__ = ["evaluate", "limb_pose", "foot_error"]
