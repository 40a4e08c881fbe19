"""Reach-limited stepping trigger.

A limb whose target has drifted out of reach of the body gets a fresh
target at ``body_center + offset``. This is a single threshold, not a gait
scheduler: several limbs may step on the same tick and LimbState is not
consulted.
"""
from __future__ import annotations

import logging

import geometry as gm
from limb import Limb

logger = logging.getLogger(__name__)

Vec2 = gm.Vec2


def needs_retarget(body_center: Vec2, limb: Limb) -> bool:
    return gm.distance(body_center, limb.target) > limb.max_reach


def retarget(body_center: Vec2, limb: Limb, offset: Vec2) -> Limb:
    """Return ``limb`` with a new target if its current one is out of reach.

    The limb is returned unchanged (same object) when the target is within
    reach, including exactly at max reach.
    """
    if not needs_retarget(body_center, limb):
        return limb
    new_target = gm.Geometry.as_array(body_center) + gm.Geometry.as_array(offset)
    logger.debug("retarget %s -> %s (center %s, reach %.3f)",
                 limb.target, gm.as_vec(new_target), body_center, limb.max_reach)
    return limb.with_target(new_target)


__all__ = ["needs_retarget", "retarget"]
