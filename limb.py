"""Joint-chain model: joints, two-segment limbs and the body carrying them.

All records are frozen; the "mutators" return updated copies so a
simulation tick can be written as a pure state transition.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Tuple

import numpy as np

import geometry as gm

Vec2 = gm.Vec2


class LimbState(Enum):
    """Whether the foot is planted or mid-step.

    Carried as plain data: nothing in the update or solve path reads or
    transitions it yet.
    """
    GROUNDED = "grounded"
    MOVING = "moving"


class LimbMode(Enum):
    """Who owns a limb's joint angles.

    DERIVED: the solver recomputes the angles every tick.
    MANUAL_OVERRIDE: the caller wrote the angles; the solver leaves them alone.
    """
    DERIVED = "derived"
    MANUAL_OVERRIDE = "manual_override"


@dataclass(frozen=True)
class Joint:
    angle: float
    length: float

    def __post_init__(self) -> None:
        length = float(self.length)
        if not np.isfinite(length) or length < 0:
            raise ValueError(f"joint length must be finite and >= 0, got {self.length!r}")
        object.__setattr__(self, "length", length)
        object.__setattr__(self, "angle", float(self.angle))

    def with_angle(self, angle: float) -> "Joint":
        return replace(self, angle=float(angle))


@dataclass(frozen=True)
class Limb:
    """Two-segment chain: proximal joint at the body, distal joint at the knee."""
    proximal: Joint
    distal: Joint
    target: Vec2
    state: LimbState = LimbState.GROUNDED
    mode: LimbMode = LimbMode.DERIVED

    def __post_init__(self) -> None:
        object.__setattr__(self, "target", gm.as_finite_vec(self.target, "target"))

    @classmethod
    def from_lengths(cls, proximal_len: float, distal_len: float, target: Vec2,
                     *, state: LimbState = LimbState.GROUNDED) -> "Limb":
        return cls(Joint(0.0, proximal_len), Joint(0.0, distal_len), target, state=state)

    @property
    def proximal_len(self) -> float:
        return self.proximal.length

    @property
    def distal_len(self) -> float:
        return self.distal.length

    @property
    def max_reach(self) -> float:
        return self.proximal.length + self.distal.length

    @property
    def angles(self) -> Tuple[float, float]:
        return self.proximal.angle, self.distal.angle

    def with_target(self, target: Vec2) -> "Limb":
        return replace(self, target=gm.as_vec(target))

    def with_target_x(self, x: float) -> "Limb":
        return replace(self, target=(float(x), self.target[1]))

    def with_angles(self, proximal_angle: float, distal_angle: float) -> "Limb":
        return replace(
            self,
            proximal=self.proximal.with_angle(proximal_angle),
            distal=self.distal.with_angle(distal_angle),
        )

    def with_override(self, proximal_angle: float, distal_angle: float) -> "Limb":
        """Write the angles directly and keep the solver off this limb."""
        limb = self.with_angles(proximal_angle, distal_angle)
        return replace(limb, mode=LimbMode.MANUAL_OVERRIDE)

    def released(self) -> "Limb":
        return replace(self, mode=LimbMode.DERIVED)


@dataclass(frozen=True)
class Body:
    """Body center plus its limbs. Limb order only matters for display."""
    center: Vec2
    limbs: Tuple[Limb, ...] = field(default_factory=tuple)
    retarget_offset: Vec2 = (0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "center", gm.as_finite_vec(self.center, "center"))
        object.__setattr__(self, "limbs", tuple(self.limbs))
        object.__setattr__(self, "retarget_offset",
                           gm.as_finite_vec(self.retarget_offset, "retarget_offset"))

    def with_center(self, center: Vec2) -> "Body":
        return replace(self, center=gm.as_vec(center))

    def with_center_x(self, x: float) -> "Body":
        return replace(self, center=(float(x), self.center[1]))

    def with_limbs(self, limbs) -> "Body":
        return replace(self, limbs=tuple(limbs))

    def with_limb(self, index: int, limb: Limb) -> "Body":
        limbs = list(self.limbs)
        limbs[index] = limb
        return replace(self, limbs=tuple(limbs))


__all__ = ["Vec2", "LimbState", "LimbMode", "Joint", "Limb", "Body"]
