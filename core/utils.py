# core/utils.py
import math


def clamp(value: float, lo: float, hi: float) -> float:
    return lo if value < lo else hi if value > hi else value


def circles_overlap(ax: float, ay: float, ar: float, bx: float, by: float, br: float) -> bool:
    # strict: touching circles do not collide
    return math.hypot(ax - bx, ay - by) < ar + br


def angle_to(x: float, y: float, tx: float, ty: float) -> float:
    return math.atan2(ty - y, tx - x)
