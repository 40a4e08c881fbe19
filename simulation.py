"""Per-tick body/limb update and the frame loop that drives it.

``step`` is a pure transition ``(SimulationState, StepInput) -> SimulationState``
so it can be tested without any window. ``RunLoop`` repeats it until an
external stop signal is set.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from typing import Callable, Optional

import geometry as gm
import ik_solver as ik
from limb import Body, Limb, LimbMode
from retarget import retarget

logger = logging.getLogger(__name__)

Vec2 = gm.Vec2


@dataclass(frozen=True)
class StepInput:
    """External inputs for one tick.

    move_body:   advance the body center by ``velocity * dt``.
    solve_limbs: run retarget + solve; False freezes the pose for manual posing.
    """
    dt: float
    velocity: Vec2 = (0.0, 0.0)
    move_body: bool = True
    solve_limbs: bool = True


@dataclass(frozen=True)
class SimulationState:
    body: Body
    tick: int = 0


def advance_body(body: Body, velocity: Vec2, dt: float) -> Body:
    center = gm.Geometry.as_array(body.center) + gm.Geometry.as_array(velocity) * float(dt)
    return body.with_center(center)


def update_limb(center: Vec2, limb: Limb, offset: Vec2,
                *, bearing_mode: ik.BearingMode = ik.BearingMode.ASIN) -> Limb:
    """Retarget, then solve unless the limb is under manual override.

    A solver failure keeps the previous angles for this tick.
    """
    limb = retarget(center, limb, offset)
    if limb.mode is LimbMode.MANUAL_OVERRIDE:
        return limb
    try:
        sol = ik.solve(center, limb.target, limb.proximal_len, limb.distal_len,
                       bearing_mode=bearing_mode)
    except ik.LimbIKError as exc:
        logger.warning("skipping limb update: %s", exc)
        return limb
    return limb.with_angles(sol.proximal_angle, sol.distal_angle)


def update_limbs(body: Body, *, bearing_mode: ik.BearingMode = ik.BearingMode.ASIN) -> Body:
    return body.with_limbs(
        update_limb(body.center, limb, body.retarget_offset, bearing_mode=bearing_mode)
        for limb in body.limbs
    )


def step(state: SimulationState, inputs: StepInput,
         *, bearing_mode: ik.BearingMode = ik.BearingMode.ASIN) -> SimulationState:
    body = state.body
    if inputs.move_body:
        body = advance_body(body, inputs.velocity, inputs.dt)
    if inputs.solve_limbs:
        body = update_limbs(body, bearing_mode=bearing_mode)
    return SimulationState(body=body, tick=state.tick + 1)

# ---------------------------------------------------------------------------
# Write access for the UI layer
# ---------------------------------------------------------------------------

def set_center_x(state: SimulationState, x: float) -> SimulationState:
    return replace(state, body=state.body.with_center_x(x))


def set_target_x(state: SimulationState, index: int, x: float) -> SimulationState:
    limb = state.body.limbs[index].with_target_x(x)
    return replace(state, body=state.body.with_limb(index, limb))


def override_angles(state: SimulationState, index: int,
                    proximal_angle: float, distal_angle: float) -> SimulationState:
    limb = state.body.limbs[index].with_override(proximal_angle, distal_angle)
    return replace(state, body=state.body.with_limb(index, limb))


def release_override(state: SimulationState, index: int) -> SimulationState:
    limb = state.body.limbs[index].released()
    return replace(state, body=state.body.with_limb(index, limb))


def reset(state: SimulationState, center_x: float = 15.0) -> SimulationState:
    return set_center_x(state, center_x)

# ---------------------------------------------------------------------------
# Frame loop
# ---------------------------------------------------------------------------

class RunLoop:
    """Repeatedly steps the simulation until told to stop.

    Each tick: ``apply_ui(state)`` returns the state with any UI writes
    applied (center x, targets, manual angles); ``input_source(state)``
    supplies the StepInput; ``on_frame`` receives the new state, e.g. to
    render it.
    """
    def __init__(self, state: SimulationState,
                 input_source: Callable[[SimulationState], StepInput],
                 on_frame: Optional[Callable[[SimulationState], None]] = None,
                 *, apply_ui: Optional[Callable[[SimulationState], SimulationState]] = None,
                 bearing_mode: ik.BearingMode = ik.BearingMode.ASIN) -> None:
        self.state = state
        self.input_source = input_source
        self.on_frame = on_frame
        self.apply_ui = apply_ui
        self.bearing_mode = bearing_mode

    def tick(self) -> SimulationState:
        state = self.state
        if self.apply_ui is not None:
            state = self.apply_ui(state)
        inputs = self.input_source(state)
        self.state = step(state, inputs, bearing_mode=self.bearing_mode)
        if self.on_frame is not None:
            self.on_frame(self.state)
        return self.state

    def run(self, stop: threading.Event, max_ticks: Optional[int] = None) -> SimulationState:
        logger.info("run loop started at tick %d", self.state.tick)
        ticks = 0
        while not stop.is_set():
            if max_ticks is not None and ticks >= max_ticks:
                break
            self.tick()
            ticks += 1
        logger.info("run loop stopped at tick %d", self.state.tick)
        return self.state


__all__ = [
    "StepInput",
    "SimulationState",
    "advance_body",
    "update_limb",
    "update_limbs",
    "step",
    "set_center_x",
    "set_target_x",
    "override_angles",
    "release_override",
    "reset",
    "RunLoop",
]
