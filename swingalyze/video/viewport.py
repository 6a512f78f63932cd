"""
Viewport mapping: "contain" fit of the video inside the display area,
and projection of normalized landmarks into overlay (canvas) pixels.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence


@dataclass(frozen=True)
class DrawRect:
    """Letterboxed video region inside the display area."""
    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0

    @property
    def canvas_size(self):
        """(width, height) of the overlay canvas in whole pixels"""
        return int(round(self.w)), int(round(self.h))


@dataclass(frozen=True)
class ProjectedPoint:
    x: int
    y: int
    z: float = 0.0


def compute_draw_rect(area_w, area_h, video_w, video_h) -> DrawRect:
    """
    Largest rectangle with the video's aspect ratio that fits the display
    area, centered.

    Args:
        area_w, area_h: Display area size in pixels
        video_w, video_h: Native video size (0 = unknown, assumes 16:9)

    Returns:
        DrawRect with per-axis scale from native to displayed pixels
    """
    vw = video_w or 16
    vh = video_h or 9
    if area_w <= 0 or area_h <= 0:
        return DrawRect(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    aspect_video = vw / vh
    aspect_area = area_w / area_h

    if aspect_video > aspect_area:
        w = float(area_w)
        h = area_w / aspect_video
    else:
        h = float(area_h)
        w = area_h * aspect_video

    x = (area_w - w) / 2
    y = (area_h - h) / 2
    return DrawRect(x, y, w, h, w / vw, h / vh)


def map_landmarks(landmarks: Sequence, rect: DrawRect, video_w, video_h,
                  mirror=False) -> List[Optional[ProjectedPoint]]:
    """
    Project normalized landmarks into canvas pixel space.

    Mirroring negates the horizontal scale and offsets by the displayed
    width; the landmarks themselves are left untouched.
    """
    sign = -1 if mirror else 1
    off_x = rect.w if mirror else 0

    points = []
    for lm in landmarks:
        if lm is None:
            points.append(None)
            continue
        points.append(ProjectedPoint(
            x=int(round(lm.x * video_w * rect.scale_x * sign + off_x)),
            y=int(round(lm.y * video_h * rect.scale_y)),
            z=lm.z
        ))
    return points
