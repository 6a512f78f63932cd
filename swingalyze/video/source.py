"""
Video source for the frame pump: a local file or a network URL read
through OpenCV, with play/pause, restart and playback-rate pacing.
"""

import cv2


class VideoSourceError(RuntimeError):
    """Raised when a video cannot be opened or decoded."""


class VideoSource:
    """
    Thin playback wrapper around cv2.VideoCapture.

    Usage:
        source = VideoSource('swing.mp4')
        source.read_first()                 # first decoded frame ("loaded")
        frame, is_new = source.next_frame(now)
    """

    def __init__(self, src, realtime=True):
        """
        Args:
            src: File path or URL
            realtime: Pace reads by the video fps (False = every call reads)
        """
        self.src = str(src)
        self.realtime = realtime
        self.cap = cv2.VideoCapture(self.src)
        if not self.cap.isOpened():
            raise VideoSourceError(f"Could not open video: {self.src}")

        self.width = int(self.cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        self.height = int(self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
        fps = self.cap.get(cv2.CAP_PROP_FPS)
        self.fps = fps if fps and fps > 0 else 30.0

        self.paused = True
        self.ended = False
        self.playback_rate = 1.0
        self.frame = None
        self._next_due = None

    def read_first(self):
        """Decode the first frame; its size overrides the container metadata."""
        success, img = self.cap.read()
        if not success:
            raise VideoSourceError(f"Could not decode video: {self.src}")
        self.frame = img
        self.height, self.width = img.shape[:2]
        return img

    def play(self):
        if self.ended:
            self.restart()
        self.paused = False
        self._next_due = None

    def pause(self):
        self.paused = True

    def toggle(self):
        if self.paused or self.ended:
            self.play()
        else:
            self.pause()

    def restart(self):
        self.cap.set(cv2.CAP_PROP_POS_FRAMES, 0)
        self.ended = False
        self._next_due = None

    def next_frame(self, now):
        """
        Current frame for this tick.

        Returns:
            (frame, is_new) - is_new is False while the frame is held
        """
        if self.paused or self.ended:
            return self.frame, False

        if self.realtime and self._next_due is not None and now < self._next_due:
            return self.frame, False

        success, img = self.cap.read()
        if not success:
            self.ended = True
            return self.frame, False

        self.frame = img
        step = 1.0 / (self.fps * self.playback_rate)
        self._next_due = now + step if self._next_due is None else max(self._next_due + step, now)
        return img, True

    def release(self):
        if self.cap is not None:
            self.cap.release()
            self.cap = None
