"""
Golf Biomechanics - per-frame measurements in overlay pixel space

Measurements:
- spine_angle: hip midpoint -> shoulder midpoint against vertical
- head_drift_px / pelvis_drift_px: horizontal drift from the address baseline
- knee_flex: 180 minus the average thigh/shank angle of both legs
- x_factor: shoulder line vs hip line separation

A measurement whose landmarks are missing stays None ("unknown", not zero).
"""

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from ..constants import LANDMARK_INDICES


@dataclass(frozen=True)
class Baseline:
    """Zero reference for drift, captured once per session."""
    head_x: float
    pelvis_x: float
    t: float


@dataclass(frozen=True)
class Measurements:
    spine_angle: Optional[float] = None
    head_drift_px: Optional[float] = None
    pelvis_drift_px: Optional[float] = None
    knee_flex: Optional[float] = None
    x_factor: Optional[float] = None

# ============================================
# HELPERS
# ============================================

def _point(points: Sequence, name: str):
    idx = LANDMARK_INDICES[name]
    if idx < len(points):
        return points[idx]
    return None


def midpoint(a, b):
    """Midpoint of two points as (x, y), or None if either is missing"""
    if a is None or b is None:
        return None
    return ((a.x + b.x) / 2, (a.y + b.y) / 2)


def calculate_line_angle(p1, p2) -> float:
    """
    Direction of the line p1 -> p2 in degrees (-180 to 180).

    Args:
        p1, p2: (x, y) tuples
    """
    return math.degrees(math.atan2(p2[1] - p1[1], p2[0] - p1[0]))


def calculate_angle_from_vertical(lower, upper) -> float:
    """
    Angle of lower -> upper against the image vertical.

    Uses atan2(dx, dy) in image coordinates (y grows downward), so an
    upright torso reads about +/-180 and the sign gives the tilt direction.
    """
    dx = upper[0] - lower[0]
    dy = upper[1] - lower[1]
    return math.degrees(math.atan2(dx, dy))


def _xy(p):
    return (p.x, p.y)


# ============================================
# BASELINE & MEASUREMENTS
# ============================================

def capture_baseline(points: Sequence, t: float) -> Optional[Baseline]:
    """
    Build the drift baseline from the nose and hip midpoint.

    Returns:
        Baseline, or None when either landmark is missing
    """
    nose = _point(points, 'nose')
    hip_mid = midpoint(_point(points, 'left_hip'), _point(points, 'right_hip'))
    if nose is None or hip_mid is None:
        return None
    return Baseline(head_x=nose.x, pelvis_x=hip_mid[0], t=t)


def measure(points: Sequence, baseline: Optional[Baseline] = None) -> Measurements:
    """
    Compute the scalar measurements for one frame.

    Args:
        points: Projected points indexed like MediaPipe landmarks (None = missing)
        baseline: Session baseline for drift; drift stays None without it

    Returns:
        Measurements
    """
    nose = _point(points, 'nose')
    l_sh, r_sh = _point(points, 'left_shoulder'), _point(points, 'right_shoulder')
    l_hip, r_hip = _point(points, 'left_hip'), _point(points, 'right_hip')
    knee_l, knee_r = _point(points, 'left_knee'), _point(points, 'right_knee')
    ankle_l, ankle_r = _point(points, 'left_ankle'), _point(points, 'right_ankle')

    hip_mid = midpoint(l_hip, r_hip)
    sh_mid = midpoint(l_sh, r_sh)

    spine_angle = None
    if hip_mid and sh_mid:
        spine_angle = calculate_angle_from_vertical(hip_mid, sh_mid)

    head_drift = None
    pelvis_drift = None
    if baseline is not None and nose is not None:
        head_drift = nose.x - baseline.head_x
    if baseline is not None and hip_mid:
        pelvis_drift = hip_mid[0] - baseline.pelvis_x

    knee_flex = None
    if hip_mid and None not in (knee_l, knee_r, ankle_l, ankle_r):
        knee_angle_l = _knee_angle(hip_mid, _xy(knee_l), _xy(ankle_l))
        knee_angle_r = _knee_angle(hip_mid, _xy(knee_r), _xy(ankle_r))
        knee_flex = 180 - (knee_angle_l + knee_angle_r) / 2

    x_factor = None
    if None not in (l_sh, r_sh, l_hip, r_hip):
        shoulders = calculate_line_angle(_xy(l_sh), _xy(r_sh))
        hips = calculate_line_angle(_xy(l_hip), _xy(r_hip))
        x_factor = abs(shoulders - hips)

    return Measurements(
        spine_angle=spine_angle,
        head_drift_px=head_drift,
        pelvis_drift_px=pelvis_drift,
        knee_flex=knee_flex,
        x_factor=x_factor
    )


def _knee_angle(hip, knee, ankle) -> float:
    # thigh and shank directions, both via atan2(dy, dx)
    thigh = calculate_line_angle(hip, knee)
    shank = calculate_line_angle(knee, ankle)
    return abs(shank - thigh)
