from __future__ import annotations

import math
from typing import Tuple

Vector2 = Tuple[float, float]


def flip_y(v: Vector2) -> Vector2:
    x, y = v
    return (x, -y)


def rot_screen(angle_rad: float, v: Vector2) -> Vector2:
    """
    Rotate into the local/screen frame.

    Uses x' = x cos + y sin, y' = y cos - x sin, i.e. the transpose of the usual
    right-handed rotation matrix. Rendering code relies on this sign convention.
    """
    c = math.cos(angle_rad)
    s = math.sin(angle_rad)
    x, y = v
    return (x * c + y * s, y * c - x * s)


def dot(a: Vector2, b: Vector2) -> float:
    return a[0]*b[0] + a[1]*b[1]


def sub(a: Vector2, b: Vector2) -> Vector2:
    return (a[0]-b[0], a[1]-b[1])


def norm(a: Vector2) -> float:
    return math.sqrt(dot(a, a))


def ieee_div(num: float, den: float) -> float:
    """
    Float division that follows IEEE-754 instead of raising ZeroDivisionError:
    x/0 -> +/-inf, 0/0 -> nan.
    """
    if den != 0.0:
        return num / den
    if num == 0.0 or math.isnan(num):
        return math.nan
    return math.copysign(math.inf, num) * math.copysign(1.0, den)
