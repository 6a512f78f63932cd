import numpy as np
import pytest

from swingalyze.constants import LANDMARK_INDICES, NUM_LANDMARKS
from swingalyze.pose import Landmark
from swingalyze.video import ProjectedPoint


def make_points(default=(0, 0), **named):
    """33 projected points; named landmarks override, None marks missing"""
    points = [ProjectedPoint(*default) for _ in range(NUM_LANDMARKS)]
    for name, xy in named.items():
        points[LANDMARK_INDICES[name]] = None if xy is None else ProjectedPoint(*xy)
    return points


def make_landmarks(**named):
    """33 normalized landmarks at the frame center; named ones override"""
    landmarks = [Landmark(0.5, 0.5) for _ in range(NUM_LANDMARKS)]
    for name, xy in named.items():
        landmarks[LANDMARK_INDICES[name]] = Landmark(*xy)
    return landmarks


class FakeEstimator:
    def __init__(self, results=None):
        self.results = list(results or [])
        self.calls = []
        self.closed = False

    def detect(self, frame, timestamp_ms):
        self.calls.append(timestamp_ms)
        if self.results:
            return self.results.pop(0)
        return make_landmarks()

    def close(self):
        self.closed = True


class FakeSource:
    """In-memory stand-in for VideoSource"""

    def __init__(self, src, width=640, height=360, frames=10):
        self.src = src
        self.width = width
        self.height = height
        self.fps = 30.0
        self.frames_left = frames
        self.paused = True
        self.ended = False
        self.playback_rate = 1.0
        self.frame = None
        self.released = False

    def read_first(self):
        self.frame = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        return self.frame

    def play(self):
        self.paused = False

    def pause(self):
        self.paused = True

    def toggle(self):
        self.paused = not self.paused

    def next_frame(self, now):
        if self.paused or self.ended:
            return self.frame, False
        if self.frames_left <= 0:
            self.ended = True
            return self.frame, False
        self.frames_left -= 1
        return self.frame, True

    def release(self):
        self.released = True


@pytest.fixture
def fake_estimator():
    return FakeEstimator()
