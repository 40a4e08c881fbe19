import logging

import pytest

from limb import Limb, LimbState
from retarget import needs_retarget, retarget

OFFSET = (80.0, 100.0)


def make_limb(target, state=LimbState.GROUNDED):
    return Limb.from_lengths(80.0, 60.0, target, state=state)


def test_out_of_reach_target_moves_to_center_plus_offset():
    limb = make_limb((0.0, 150.0))
    assert needs_retarget((0.0, 0.0), limb)
    moved = retarget((0.0, 0.0), limb, OFFSET)
    assert moved.target == (80.0, 100.0)
    assert limb.target == (0.0, 150.0)


def test_in_reach_target_is_left_alone():
    limb = make_limb((0.0, 100.0))
    assert not needs_retarget((0.0, 0.0), limb)
    assert retarget((0.0, 0.0), limb, OFFSET) is limb


def test_exactly_at_max_reach_does_not_retarget():
    limb = make_limb((0.0, 140.0))
    assert retarget((0.0, 0.0), limb, OFFSET) is limb


def test_offset_is_applied_to_the_current_center():
    limb = make_limb((0.0, 370.0))
    moved = retarget((300.0, 270.0), limb, OFFSET)
    assert moved.target == pytest.approx((380.0, 370.0))


@pytest.mark.parametrize("state", list(LimbState))
def test_retarget_does_not_touch_limb_state(state):
    moved = retarget((0.0, 0.0), make_limb((0.0, 500.0), state=state), OFFSET)
    assert moved.state is state


def test_retarget_keeps_angles_and_lengths():
    limb = make_limb((0.0, 500.0)).with_angles(0.4, 1.2)
    moved = retarget((0.0, 0.0), limb, OFFSET)
    assert moved.angles == (0.4, 1.2)
    assert (moved.proximal_len, moved.distal_len) == (80.0, 60.0)


def test_retarget_is_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="retarget"):
        retarget((0.0, 0.0), make_limb((0.0, 500.0)), OFFSET)
    assert "retarget" in caplog.text
