"""
Utility functions for game mechanics
"""

from __future__ import annotations
from typing import Optional
import numpy as np

# Float slack for timers built by summing per-tick dt
TIME_EPSILON = 1e-9


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def aabb_overlap(x1, y1, hw1, hh1, x2, y2, hw2, hh2) -> bool:
    """Check if two boxes given by center and half-extents overlap"""
    return abs(x1 - x2) < hw1 + hw2 and abs(y1 - y2) < hh1 + hh2


def reached(elapsed: float, threshold: float) -> bool:
    """True once an accumulated duration has reached ``threshold``"""
    return elapsed + TIME_EPSILON >= threshold


def make_rng(seed: Optional[int]) -> np.random.Generator:
    """Dedicated numpy Generator; global random state is left alone"""
    return np.random.default_rng(seed)
