"""
Session state and the per-frame analysis step.

All mutable session state (running flag, baseline, phase, draw rect,
toggles, current readouts and notes) lives in SessionContext so each
player or test works on its own instance.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .biomechanics import Baseline, Measurements, capture_baseline, measure
from .constants import PLACEHOLDER
from .phase import PhaseTracker, dedupe_notes
from .video.viewport import DrawRect, compute_draw_rect, map_landmarks

logger = logging.getLogger(__name__)

# label -> (measurement field, decimals)
READOUT_FORMATS = {
    'Spine (deg)': ('spine_angle', 1),
    'Head (px)': ('head_drift_px', 0),
    'Pelvis (px)': ('pelvis_drift_px', 0),
    'Knees (deg)': ('knee_flex', 1),
    'X-factor (deg)': ('x_factor', 1),
}

STATUS_READY = "Ready."
STATUS_NO_POSE = "No pose detected"
STATUS_ANALYZING = "Analyzing…"


def format_value(value: Optional[float], decimals: int) -> str:
    if value is None:
        return PLACEHOLDER
    return f'{value:.{decimals}f}'


def format_readouts(m: Optional[Measurements] = None, fps: Optional[float] = None) -> Dict[str, str]:
    """Fixed-precision readouts, placeholder for anything unknown"""
    readouts = {'FPS': format_value(fps, 1)}
    for label, (name, decimals) in READOUT_FORMATS.items():
        readouts[label] = format_value(getattr(m, name) if m is not None else None, decimals)
    return readouts


class FpsMeter:
    """Frames per second, refreshed at most every `interval` seconds."""

    def __init__(self, interval=0.25):
        self.interval = interval
        self.fps = None
        self._last_t = None
        self._frames = 0

    def reset(self):
        self.fps = None
        self._last_t = None
        self._frames = 0

    def tick(self, now: float) -> Optional[float]:
        if self._last_t is None:
            self._last_t = now
            return self.fps
        self._frames += 1
        dt = now - self._last_t
        if dt >= self.interval:
            self.fps = self._frames / dt
            self._frames = 0
            self._last_t = now
        return self.fps


@dataclass
class FrameResult:
    points: List
    measurements: Measurements
    notes: List
    phase: str


@dataclass
class SessionContext:
    overlay_on: bool = True
    mirror: bool = False
    slow: bool = False
    running: bool = False
    baseline: Optional[Baseline] = None
    draw_rect: DrawRect = field(default_factory=DrawRect)
    tracker: PhaseTracker = field(default_factory=PhaseTracker)
    fps_meter: FpsMeter = field(default_factory=FpsMeter)
    status: str = STATUS_READY
    readouts: Dict[str, str] = field(default_factory=format_readouts)
    notes: List = field(default_factory=list)
    points: List = field(default_factory=list)
    landmarks: Optional[List] = None
    video_size: tuple = (0, 0)
    notes_phase: Optional[str] = None
    max_notes: int = 6

    @property
    def phase(self) -> str:
        return self.tracker.phase

    # ============================================
    # LIFECYCLE
    # ============================================

    def load(self, video_w, video_h, area_w, area_h):
        """First decoded frame of a new video: size overlay, start a fresh session"""
        self.draw_rect = compute_draw_rect(area_w, area_h, video_w, video_h)
        self.baseline = None
        self.video_size = (video_w, video_h)
        self.tracker.reset()
        self.running = True
        logger.debug("Loaded %dx%d video into %s", video_w, video_h, self.draw_rect)

    def resize(self, video_w, video_h, area_w, area_h):
        self.draw_rect = compute_draw_rect(area_w, area_h, video_w, video_h)
        self.video_size = (video_w, video_h)
        self.reproject()

    def set_mirror(self, on: bool):
        self.mirror = on
        self.reproject()

    def reproject(self):
        """Re-map the last analyzed landmarks with the current mirror flag and draw rect"""
        if self.landmarks:
            self.points = map_landmarks(self.landmarks, self.draw_rect, *self.video_size,
                                        mirror=self.mirror)

    def reset(self):
        self.running = False
        self.baseline = None
        self.tracker.reset()
        self.fps_meter.reset()
        self.notes = []
        self.points = []
        self.landmarks = None
        self.notes_phase = None
        self.readouts = format_readouts()
        self.status = STATUS_READY

    # ============================================
    # FRAME STEP
    # ============================================

    def update_fps(self, now: float):
        fps = self.fps_meter.tick(now)
        self.readouts['FPS'] = format_value(fps, 1)

    def process_landmarks(self, landmarks: Optional[Sequence], video_w, video_h,
                          now: Optional[float] = None) -> Optional[FrameResult]:
        """
        Run one analysis step on the landmarks of a frame.

        Args:
            landmarks: Normalized landmarks, or None when no pose was found
            video_w, video_h: Native video size
            now: Timestamp recorded with the baseline

        Returns:
            FrameResult, or None when the frame had no pose
        """
        self.points = []
        self.landmarks = None
        if not landmarks:
            self.status = STATUS_NO_POSE
            return None
        self.status = STATUS_ANALYZING

        self.landmarks = list(landmarks)
        self.video_size = (video_w, video_h)
        points = map_landmarks(self.landmarks, self.draw_rect, video_w, video_h, mirror=self.mirror)
        self.points = points

        if self.baseline is None:
            self.baseline = capture_baseline(points, time.monotonic() if now is None else now)

        m = measure(points, self.baseline)
        fps = self.readouts.get('FPS', PLACEHOLDER)
        self.readouts = format_readouts(m)
        self.readouts['FPS'] = fps

        self.notes_phase = self.tracker.phase
        self.notes = dedupe_notes(self.tracker.step(m), limit=self.max_notes)
        return FrameResult(points=points, measurements=m, notes=self.notes, phase=self.notes_phase)
