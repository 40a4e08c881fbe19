"""Scene and demo configuration.

Defaults reproduce the walking-legs demo scene: an 800x600 view, a body
that starts near the left edge slightly above the vertical middle, and two
identical 80/60 legs. Any field can be overridden from a YAML file:

    viewport: [1024, 768]
    velocity: [2.0, 0.0]
    bearing_mode: atan2
    limbs:
      - {proximal_len: 80, distal_len: 60, target_x: 0, target_dy: 100}
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml

import geometry as gm
import ik_solver as ik
from limb import Body, Limb
from simulation import SimulationState, StepInput

logger = logging.getLogger(__name__)

Vec2 = gm.Vec2


@dataclass(frozen=True)
class LimbConfig:
    """One leg. The initial target is given relative to (0, body y)."""
    proximal_len: float = 80.0
    distal_len: float = 60.0
    target_x: float = 0.0
    target_dy: float = 100.0


@dataclass(frozen=True)
class DemoConfig:
    viewport: Tuple[int, int] = (800, 600)
    body_x: float = 50.0
    body_y_offset: float = -30.0          # body y = viewport_h / 2 + offset
    retarget_offset: Vec2 = (80.0, 100.0)
    limbs: Tuple[LimbConfig, ...] = field(default_factory=lambda: (
        LimbConfig(target_x=0.0),
        LimbConfig(target_x=80.0),
    ))
    velocity: Vec2 = (1.0, 0.0)
    dt: float = 1.0
    fps: int = 60
    reset_center_x: float = 15.0
    bearing_mode: ik.BearingMode = ik.BearingMode.ASIN

    @property
    def body_y(self) -> float:
        return float(self.viewport[1] // 2) + self.body_y_offset

    def step_input(self, *, move_body: bool = True, solve_limbs: bool = True) -> StepInput:
        return StepInput(dt=self.dt, velocity=self.velocity,
                         move_body=move_body, solve_limbs=solve_limbs)


def build_body(config: DemoConfig) -> Body:
    y = config.body_y
    limbs = [
        Limb.from_lengths(lc.proximal_len, lc.distal_len, (lc.target_x, y + lc.target_dy))
        for lc in config.limbs
    ]
    return Body(center=(config.body_x, y), limbs=limbs, retarget_offset=config.retarget_offset)


def initial_state(config: DemoConfig) -> SimulationState:
    return SimulationState(body=build_body(config))


def _number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    return float(value)


def _pair(name: str, value: Any) -> Tuple[float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{name} must be a two-element list, got {value!r}")
    return (_number(name, value[0]), _number(name, value[1]))


def _limb_config(raw: Any) -> LimbConfig:
    if not isinstance(raw, dict):
        raise ValueError(f"each limb must be a mapping, got {raw!r}")
    known = {f.name for f in fields(LimbConfig)}
    unknown = set(raw) - known
    if unknown:
        raise ValueError(f"unknown limb config keys: {sorted(unknown)}")
    lc = LimbConfig(**{k: _number(f"limbs.{k}", v) for k, v in raw.items()})
    if lc.proximal_len < 0 or lc.distal_len < 0:
        raise ValueError("limb lengths must be >= 0")
    return lc


def config_from_dict(raw: Dict[str, Any], base: DemoConfig = DemoConfig()) -> DemoConfig:
    known = {f.name for f in fields(DemoConfig)}
    unknown = set(raw) - known
    if unknown:
        raise ValueError(f"unknown config keys: {sorted(unknown)}")

    updates: Dict[str, Any] = {}
    for key, value in raw.items():
        if key == "viewport":
            w, h = _pair(key, value)
            updates[key] = (int(w), int(h))
        elif key in ("retarget_offset", "velocity"):
            updates[key] = _pair(key, value)
        elif key == "limbs":
            if not isinstance(value, (list, tuple)):
                raise ValueError(f"limbs must be a list, got {value!r}")
            updates[key] = tuple(_limb_config(item) for item in value)
        elif key == "bearing_mode":
            updates[key] = ik.BearingMode(str(value).lower())
        elif key == "fps":
            updates[key] = int(_number(key, value))
        else:
            updates[key] = _number(key, value)
    cfg = replace(base, **updates)
    if cfg.dt < 0:
        raise ValueError("dt must be >= 0")
    return cfg


def load_config(path: Union[str, Path]) -> DemoConfig:
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at top level")
    cfg = config_from_dict(raw)
    logger.info("Loaded config from %s", path)
    return cfg


__all__ = [
    "LimbConfig",
    "DemoConfig",
    "build_body",
    "initial_state",
    "config_from_dict",
    "load_config",
]
