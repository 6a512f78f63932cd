import logging
import os
import urllib.request
from dataclasses import dataclass
from typing import List, Optional, Sequence

import cv2
import mediapipe as mp
from mediapipe.tasks import python
from mediapipe.tasks.python import vision

from ..config import DISPLAY_CONFIG, MEDIAPIPE_CONFIG
from ..constants import SKELETON_CONNECTIONS

# New API imports
BaseOptions = python.BaseOptions
PoseLandmarker = vision.PoseLandmarker
PoseLandmarkerOptions = vision.PoseLandmarkerOptions
VisionRunningMode = vision.RunningMode

logger = logging.getLogger(__name__)


class EstimatorUnavailable(RuntimeError):
    """Raised when the pose model cannot be loaded."""


@dataclass(frozen=True)
class Landmark:
    """Normalized (0-1) landmark as produced by MediaPipe."""
    x: float
    y: float
    z: float = 0.0
    visibility: float = 0.0


def ensure_model(model_path: str, model_url: Optional[str] = None) -> str:
    """
    Make sure the .task model file exists locally.

    Downloads it once from model_url when missing.

    Returns:
        Path to the model file
    """
    if os.path.exists(model_path):
        return model_path

    if not model_url:
        raise FileNotFoundError(f"Model not found: {model_path}")

    os.makedirs(os.path.dirname(model_path) or '.', exist_ok=True)
    logger.info("Downloading pose model %s -> %s", model_url, model_path)
    tmp_path = model_path + '.part'
    urllib.request.urlretrieve(model_url, tmp_path)
    os.replace(tmp_path, model_path)
    return model_path


class PoseEstimator:
    """
    Single-person pose estimator (MediaPipe PoseLandmarker, VIDEO mode).

    Two-method contract used by the player:
        estimator = PoseEstimator.initialize(config)   # or EstimatorUnavailable
        landmarks = estimator.detect(frame, timestamp_ms)  # or None
    """

    def __init__(self, landmarker):
        self.landmarker = landmarker
        self._last_ts = -1

    @classmethod
    def initialize(cls, config=None):
        """
        Load the pose model.

        Args:
            config: Overrides for MEDIAPIPE_CONFIG keys

        Returns:
            PoseEstimator ready for detect()
        """
        cfg = dict(MEDIAPIPE_CONFIG)
        cfg.update(config or {})

        try:
            model_path = ensure_model(cfg['model_path'], cfg.get('model_url'))
            delegate = (BaseOptions.Delegate.GPU if str(cfg['delegate']).upper() == 'GPU'
                        else BaseOptions.Delegate.CPU)
            options = PoseLandmarkerOptions(
                base_options=BaseOptions(model_asset_path=model_path, delegate=delegate),
                running_mode=VisionRunningMode.VIDEO,
                num_poses=int(cfg['num_poses']),
                min_pose_detection_confidence=float(cfg['min_detection_confidence']),
                min_pose_presence_confidence=float(cfg['min_presence_confidence']),
                min_tracking_confidence=float(cfg['min_tracking_confidence']),
                output_segmentation_masks=False
            )
            landmarker = PoseLandmarker.create_from_options(options)
        except Exception as e:
            raise EstimatorUnavailable(f"Failed to load pose model: {e}") from e

        return cls(landmarker)

    def detect(self, frame, timestamp_ms) -> Optional[List[Landmark]]:
        """
        Detect the pose in a BGR frame.

        Returns:
            33 landmarks of the first person, or None if no pose
        """
        # VIDEO mode rejects non-increasing timestamps
        ts = max(int(timestamp_ms), self._last_ts + 1)
        self._last_ts = ts

        mp_image = mp.Image(image_format=mp.ImageFormat.SRGB,
                            data=cv2.cvtColor(frame, cv2.COLOR_BGR2RGB))
        result = self.landmarker.detect_for_video(mp_image, ts)

        if not result or not result.pose_landmarks:
            return None

        return [Landmark(lm.x, lm.y, lm.z, getattr(lm, 'visibility', 0.0) or 0.0)
                for lm in result.pose_landmarks[0]]

    def close(self):
        if self.landmarker is not None:
            self.landmarker.close()
            self.landmarker = None


def _mid(a, b):
    if a is None or b is None:
        return None
    return ((a.x + b.x) / 2, (a.y + b.y) / 2)


def draw_skeleton(img, points: Sequence, color=None, line_width=None, alpha=None):
    """
    Draw torso, arms, legs and a neck proxy (shoulder midpoint to nose).

    Args:
        img: BGR canvas the points are expressed in
        points: Projected points (x, y attributes), None when missing
    """
    color = color or DISPLAY_CONFIG['skeleton_color']
    line_width = line_width or DISPLAY_CONFIG['line_width']
    alpha = DISPLAY_CONFIG['skeleton_alpha'] if alpha is None else alpha

    def pt(i):
        return points[i] if i < len(points) else None

    layer = img.copy()
    for start_idx, end_idx in SKELETON_CONNECTIONS:
        a, b = pt(start_idx), pt(end_idx)
        if a is None or b is None:
            continue
        cv2.line(layer, (int(a.x), int(a.y)), (int(b.x), int(b.y)), color, line_width, cv2.LINE_AA)

    shoulder_mid = _mid(pt(11), pt(12))
    nose = pt(0)
    if shoulder_mid and nose is not None:
        cv2.line(layer, (int(shoulder_mid[0]), int(shoulder_mid[1])), (int(nose.x), int(nose.y)),
                 color, line_width, cv2.LINE_AA)

    cv2.addWeighted(layer, alpha, img, 1 - alpha, 0, dst=img)
    return img
