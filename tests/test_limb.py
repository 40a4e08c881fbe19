import dataclasses

import pytest

from limb import Body, Joint, Limb, LimbMode, LimbState


def test_joint_rejects_negative_length():
    with pytest.raises(ValueError):
        Joint(0.0, -1.0)


def test_joint_rejects_non_finite_length():
    with pytest.raises(ValueError):
        Joint(0.0, float("nan"))


def test_joint_length_is_fixed():
    joint = Joint(0.5, 80)
    with pytest.raises(dataclasses.FrozenInstanceError):
        joint.length = 10.0
    assert joint.with_angle(1.0) == Joint(1.0, 80.0)


def test_limb_defaults_and_reach():
    limb = Limb.from_lengths(80, 60, [1, 2])
    assert limb.state is LimbState.GROUNDED
    assert limb.mode is LimbMode.DERIVED
    assert limb.target == (1.0, 2.0)
    assert limb.max_reach == 140.0
    assert limb.angles == (0.0, 0.0)


def test_override_switches_mode_and_release_restores_it():
    limb = Limb.from_lengths(80, 60, (0, 100)).with_override(0.3, 0.7)
    assert limb.mode is LimbMode.MANUAL_OVERRIDE
    assert limb.angles == (0.3, 0.7)
    released = limb.released()
    assert released.mode is LimbMode.DERIVED
    assert released.angles == (0.3, 0.7)


def test_target_x_keeps_y():
    limb = Limb.from_lengths(80, 60, (0, 100)).with_target_x(42)
    assert limb.target == (42.0, 100.0)


def test_body_updates_return_copies():
    limbs = [Limb.from_lengths(80, 60, (0, 100)), Limb.from_lengths(80, 60, (80, 100))]
    body = Body(center=(50, 0), limbs=limbs, retarget_offset=(80, 100))
    assert isinstance(body.limbs, tuple)

    moved = body.with_center_x(15)
    assert moved.center == (15.0, 0.0)
    assert body.center == (50.0, 0.0)

    swapped = body.with_limb(1, limbs[1].with_target((5, 5)))
    assert swapped.limbs[1].target == (5.0, 5.0)
    assert body.limbs[1].target == (80.0, 100.0)
    assert swapped.limbs[0] is body.limbs[0]


@pytest.mark.parametrize("make", [
    lambda: Limb.from_lengths(80, 60, (float("nan"), 100)),
    lambda: Limb.from_lengths(80, 60, (0, 100)).with_target((float("inf"), 0)),
    lambda: Limb.from_lengths(80, 60, (0, 100)).with_target_x(float("nan")),
    lambda: Body(center=(float("nan"), 0)),
    lambda: Body(center=(0, 0)).with_center_x(float("inf")),
    lambda: Body(center=(0, 0), retarget_offset=(0, float("inf"))),
])
def test_non_finite_coordinates_are_rejected(make):
    with pytest.raises(ValueError):
        make()
