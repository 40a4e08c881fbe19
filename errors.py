"""Exception types raised by the limb IK core."""
from __future__ import annotations


class LimbIKError(ValueError):
    """Base class for failures reported by the limb solver."""


class DegenerateTargetError(LimbIKError):
    """The target coincides with the anchor, so there is no direction to solve for."""

    def __init__(self, anchor, target) -> None:
        super().__init__(f"target {tuple(target)} coincides with anchor {tuple(anchor)}")
        self.anchor = anchor
        self.target = target


class NonFiniteTargetError(LimbIKError):
    """Anchor or target has a NaN or infinite coordinate."""

    def __init__(self, anchor, target) -> None:
        super().__init__(f"non-finite anchor {tuple(anchor)} or target {tuple(target)}")
        self.anchor = anchor
        self.target = target


class NotANumberError(LimbIKError, ArithmeticError):
    """An inverse trig argument left [-1, 1] and would have produced NaN."""

    def __init__(self, name: str, ratio: float) -> None:
        super().__init__(f"{name} argument {ratio!r} is outside [-1, 1]")
        self.name = name
        self.ratio = ratio


__all__ = ["LimbIKError", "DegenerateTargetError", "NonFiniteTargetError", "NotANumberError"]
