"""
Naive 5-Phase Swing Tracker
Phases: address, backswing, downswing, impact, follow

Advances exactly one phase per analyzed frame (frame count, not swing
kinematics) and stays in follow. Each phase checks a couple of pixel-space
thresholds and returns canned coaching notes.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..constants import PHASE_NAMES

# Pixel / degree thresholds (overlay canvas space)
HEAD_DRIFT_MAX_PX = 10
PELVIS_DRIFT_MAX_PX = 10
X_FACTOR_MIN_DEG = 30
KNEE_FLEX_MIN_DEG = 10
WEIGHT_SHIFT_MIN_PX = 20
NEUTRAL_SPINE_MAX_DEG = 5


@dataclass(frozen=True)
class Note:
    kind: str
    text: str


def msg(text):
    return Note('neutral', text)


def good(text):
    return Note('good', text)


def warn(text):
    return Note('warn', text)


def bad(text):
    return Note('bad', text)


def _exceeds(value: Optional[float], limit: float) -> bool:
    return value is not None and abs(value) > limit


class PhaseTracker:
    """
    Linear phase state machine.

    Usage:
        tracker = PhaseTracker()
        notes = tracker.step(measurements)  # evaluates current phase, then advances
    """

    PHASE_NAMES = PHASE_NAMES

    def __init__(self):
        self.index = 0

    @property
    def phase(self) -> str:
        return self.PHASE_NAMES[self.index]

    def reset(self):
        self.index = 0

    def step(self, m) -> List[Note]:
        """
        Emit the notes for the current phase and move one phase forward.

        Args:
            m: Measurements of the frame

        Returns:
            List of notes in emission order
        """
        handler = getattr(self, f'_{self.phase}')
        notes = handler(m)
        self.index = min(self.index + 1, len(self.PHASE_NAMES) - 1)
        return notes

    # ============================================
    # PER-PHASE CHECKS
    # ============================================

    def _address(self, m):
        notes = [msg("At address: hold steady head & pelvis. Target < 10px drift.")]
        if _exceeds(m.head_drift_px, HEAD_DRIFT_MAX_PX):
            notes.append(bad("Head swaying at address."))
        if _exceeds(m.pelvis_drift_px, PELVIS_DRIFT_MAX_PX):
            notes.append(warn("Pelvis shifting; quiet lower body."))
        return notes

    def _backswing(self, m):
        notes = []
        if m.x_factor is not None and m.x_factor > X_FACTOR_MIN_DEG:
            notes.append(good("Good shoulder‑hip separation."))
        if m.knee_flex is not None and m.knee_flex < KNEE_FLEX_MIN_DEG:
            notes.append(warn("Maintain some knee flex in backswing."))
        notes.append(msg("Top of backswing: check stable base, growing X‑factor."))
        return notes

    def _downswing(self, m):
        notes = []
        if _exceeds(m.pelvis_drift_px, WEIGHT_SHIFT_MIN_PX):
            notes.append(good("Initiate with hips — weight shift detected."))
        notes.append(msg("Create sequence: hips → torso → arms."))
        return notes

    def _impact(self, m):
        notes = []
        if m.spine_angle is not None and abs(m.spine_angle) < NEUTRAL_SPINE_MAX_DEG:
            notes.append(good("Neutral spine at impact."))
        notes.append(msg("Hands ahead of clubhead (forward shaft lean)."))
        return notes

    def _follow(self, m):
        return [msg("Balanced finish; chest to target.")]
