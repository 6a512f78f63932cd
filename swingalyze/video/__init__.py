"""
Video Module
============
Playback source and viewport ("contain" fit) mapping.
"""

from .source import VideoSource, VideoSourceError
from .viewport import DrawRect, ProjectedPoint, compute_draw_rect, map_landmarks

__all__ = ['VideoSource', 'VideoSourceError', 'DrawRect', 'ProjectedPoint',
           'compute_draw_rect', 'map_landmarks']
