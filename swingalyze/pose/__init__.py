"""
Pose Detection Module
=====================
MediaPipe-based pose estimation behind a two-method adapter.
"""

from .detector import EstimatorUnavailable, Landmark, PoseEstimator, draw_skeleton

__all__ = ['EstimatorUnavailable', 'Landmark', 'PoseEstimator', 'draw_skeleton']
