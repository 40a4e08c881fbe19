"""Interactive visualization of a body walking on two IK legs.

This script uses pygame to:
  - Move the body to the right at a constant velocity while simulation runs.
  - Retarget each foot once its target falls out of reach of the body.
  - Draw body, targets, knees and feet from the solved joint angles.

Prerequisites:
    pip install pygame numpy pyyaml

Run from project root:
    python examples/limb_demo_with_vis.py [config.yaml]

Controls:
    SPACE       toggle simulation (body motion)
    F           freeze / unfreeze solving (manual posing)
    LEFT/RIGHT  move body center x
    A/D         move the first leg's target x
    Q/W         rotate the first leg's hip (manual override)
    O           release the manual override
    R           reset body x
    ESC         quit (or close the window)
"""
from __future__ import annotations
import logging
import math
import sys
import threading
from pathlib import Path
from typing import Tuple

sys.path.append(str(Path(__file__).resolve().parents[1]))

try:
    import pygame  # type: ignore
except ImportError as e:  # pragma: no cover
    print("pygame not installed. Install with: pip install pygame")
    sys.exit(1)

import simulation as sim
from config import DemoConfig, initial_state, load_config
from forward_kinematics import limb_pose
from limb import LimbMode
from logging_config import setup_logging

logger = logging.getLogger("limb_demo")

Color = Tuple[int, int, int]

# ---------------- Appearance ----------------
BG_COLOR: Color = (255, 255, 255)
BODY_COLOR: Color = (30, 240, 30)
TARGET_COLOR: Color = (200, 30, 30)
KNEE_COLOR: Color = (30, 30, 200)
FOOT_COLOR: Color = (200, 30, 200)
LEG_COLOR: Color = (120, 120, 120)
TEXT_COLOR: Color = (20, 20, 20)
BODY_SIZE = 30
TARGET_SIZE = 20
JOINT_SIZE = 12
NUDGE = 4.0                 # pixels per key press
ANGLE_NUDGE = math.radians(3.0)

# ---------------- Helper drawing functions ----------------

def to_screen(p) -> Tuple[int, int]:
    return (int(p[0]), int(p[1]))

def draw_with_center(surface: pygame.Surface, center, width: int, color: Color):
    half = width // 2
    rect = pygame.Rect(int(center[0]) - half, int(center[1]) - half, width, width)
    pygame.draw.rect(surface, color, rect, border_radius=max(2, width // 4))

def draw_body(surface: pygame.Surface, state: sim.SimulationState):
    body = state.body
    for limb in body.limbs:
        knee, foot = limb_pose(body.center, limb)
        pygame.draw.line(surface, LEG_COLOR, to_screen(body.center), to_screen(knee), 3)
        pygame.draw.line(surface, LEG_COLOR, to_screen(knee), to_screen(foot), 3)
        draw_with_center(surface, limb.target, TARGET_SIZE, TARGET_COLOR)
        draw_with_center(surface, knee, JOINT_SIZE, KNEE_COLOR)
        draw_with_center(surface, foot, JOINT_SIZE, FOOT_COLOR)
    draw_with_center(surface, body.center, BODY_SIZE, BODY_COLOR)

# ---------------- Main loop ----------------

def main() -> None:
    setup_logging(logging.INFO)
    config = load_config(sys.argv[1]) if len(sys.argv) > 1 else DemoConfig()

    pygame.init()
    pygame.display.set_caption("Limb IK Demo")
    screen = pygame.display.set_mode(config.viewport)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 18)

    stop = threading.Event()
    flags = {"simulate": False, "solve": True}

    def apply_ui(state: sim.SimulationState) -> sim.SimulationState:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                stop.set()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    stop.set()
                elif event.key == pygame.K_SPACE:
                    flags["simulate"] = not flags["simulate"]
                elif event.key == pygame.K_f:
                    flags["solve"] = not flags["solve"]
                elif event.key == pygame.K_r:
                    state = sim.reset(state, config.reset_center_x)
                elif event.key == pygame.K_o:
                    state = sim.release_override(state, 0)

        keys = pygame.key.get_pressed()
        body = state.body
        if keys[pygame.K_LEFT] or keys[pygame.K_RIGHT]:
            dx = NUDGE if keys[pygame.K_RIGHT] else -NUDGE
            state = sim.set_center_x(state, body.center[0] + dx)
        if body.limbs and (keys[pygame.K_a] or keys[pygame.K_d]):
            dx = NUDGE if keys[pygame.K_d] else -NUDGE
            state = sim.set_target_x(state, 0, state.body.limbs[0].target[0] + dx)
        if body.limbs and (keys[pygame.K_q] or keys[pygame.K_w]):
            da = ANGLE_NUDGE if keys[pygame.K_w] else -ANGLE_NUDGE
            proximal, distal = state.body.limbs[0].angles
            state = sim.override_angles(state, 0, proximal + da, distal)
        return state

    def input_source(state: sim.SimulationState) -> sim.StepInput:
        return config.step_input(move_body=flags["simulate"], solve_limbs=flags["solve"])

    def on_frame(state: sim.SimulationState) -> None:
        screen.fill(BG_COLOR)
        draw_body(screen, state)
        manual = any(limb.mode is LimbMode.MANUAL_OVERRIDE for limb in state.body.limbs)
        status = (f"tick {state.tick}  sim={'on' if flags['simulate'] else 'off'}"
                  f"  solve={'on' if flags['solve'] else 'frozen'}"
                  f"  override={'yes' if manual else 'no'}"
                  f"  x={state.body.center[0]:.1f}")
        screen.blit(font.render(status, True, TEXT_COLOR), (10, 10))
        pygame.display.flip()
        clock.tick(config.fps)

    loop = sim.RunLoop(initial_state(config), input_source, on_frame,
                       apply_ui=apply_ui, bearing_mode=config.bearing_mode)
    loop.run(stop)
    logger.info("Demo closed after %d ticks", loop.state.tick)
    pygame.quit()

if __name__ == "__main__":
    main()
