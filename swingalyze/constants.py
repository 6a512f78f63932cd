"""
Shared Constants for Swingalyze
===============================
Centralized definitions used across the project.
"""

# 5 coaching phases (linear, one step per analyzed frame)
PHASE_NAMES = [
    "address",
    "backswing",
    "downswing",
    "impact",
    "follow"
]

# Note colors for the HUD (BGR format for OpenCV)
NOTE_COLORS_BGR = {
    "neutral": (230, 230, 230),   # Light grey
    "good": (120, 220, 120),      # Green
    "warn": (60, 200, 255),       # Amber
    "bad": (80, 80, 255)          # Red
}

# MediaPipe Pose Landmark indices
LANDMARK_NAMES = [
    'nose', 'left_eye_inner', 'left_eye', 'left_eye_outer',
    'right_eye_inner', 'right_eye', 'right_eye_outer',
    'left_ear', 'right_ear', 'mouth_left', 'mouth_right',
    'left_shoulder', 'right_shoulder', 'left_elbow', 'right_elbow',
    'left_wrist', 'right_wrist', 'left_pinky', 'right_pinky',
    'left_index', 'right_index', 'left_thumb', 'right_thumb',
    'left_hip', 'right_hip', 'left_knee', 'right_knee',
    'left_ankle', 'right_ankle', 'left_heel', 'right_heel',
    'left_foot_index', 'right_foot_index'
]

LANDMARK_INDICES = {name: idx for idx, name in enumerate(LANDMARK_NAMES)}

NUM_LANDMARKS = 33

# Skeleton drawn over the video (torso, arms, legs)
SKELETON_CONNECTIONS = [
    (11, 12), (11, 23), (12, 24), (23, 24),
    (11, 13), (13, 15),
    (12, 14), (14, 16),
    (23, 25), (25, 27),
    (24, 26), (26, 28)
]

# Readout shown when a measurement is unknown
PLACEHOLDER = "–"
