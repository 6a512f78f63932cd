"""
Swingalyze - Golf Swing Overlay & Coaching Notes
================================================

Modules:
    pose: Pose estimation adapter (MediaPipe) and skeleton drawing
    biomechanics: Per-frame spine / drift / knee / X-factor measurements
    phase: Frame-count phase tracker and coaching notes
    video: Playback source and viewport mapping
    server: Static asset server (FastAPI)
"""

from . import pose
from . import biomechanics
from . import phase
from . import video
