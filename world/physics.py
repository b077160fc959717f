"""
particle_life module: world/physics.py

Point-disc kinematics:
- unit-per-tick Euler integration (LifeForm.move)
- walls reflect by clamping to the edge and flipping the velocity component
- seeking overwrites velocity with a full-speed vector toward the target
"""

from __future__ import annotations
import math
import random
from typing import Tuple

import config
from organism.lifeform import LifeForm


def distance_sq(x1: float, y1: float, x2: float, y2: float) -> float:
    dx = x1 - x2
    dy = y1 - y2
    return dx * dx + dy * dy


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def random_velocity(rng: random.Random, speed_factor: float) -> Tuple[float, float]:
    """
    Uniform per-axis velocity in [-0.5, 0.5) * MAX_SPEED * speed_factor.
    """
    scale = config.MAX_SPEED * speed_factor
    return ((rng.random() - 0.5) * scale, (rng.random() - 0.5) * scale)


def bounce_off_walls(lf: LifeForm, w: float, h: float, radius: float = config.LIFE_FORM_RADIUS) -> None:
    if lf.x - radius < 0:
        lf.x = radius
        lf.vx = -lf.vx
    elif lf.x + radius > w:
        lf.x = w - radius
        lf.vx = -lf.vx

    if lf.y - radius < 0:
        lf.y = radius
        lf.vy = -lf.vy
    elif lf.y + radius > h:
        lf.y = h - radius
        lf.vy = -lf.vy


def steer_towards(lf: LifeForm, tx: float, ty: float) -> None:
    """
    Point the velocity straight at (tx, ty) at the life form's top speed.
    A target at the exact same position falls back to heading +x.
    """
    speed = lf.max_speed
    dx = tx - lf.x
    dy = ty - lf.y
    dist = math.hypot(dx, dy)
    if dist <= 0.0:
        lf.vx = speed
        lf.vy = 0.0
        return
    lf.vx = dx / dist * speed
    lf.vy = dy / dist * speed
