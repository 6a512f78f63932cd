# config.py
"""
Configuration file for Swingalyze
Modify paths and parameters here
"""

import os

# Package directory
PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

# Downloaded models (created on first download)
MODELS_DIR = os.getenv('SWINGALYZE_MODELS_DIR', os.path.join(os.getcwd(), 'models'))

# Files served by the static asset server, shipped inside the package
STATIC_DIR = os.path.join(PACKAGE_DIR, 'static')

# MediaPipe Parameters
MEDIAPIPE_CONFIG = {
    'model_path': os.path.join(MODELS_DIR, 'pose_landmarker_lite.task'),
    'model_url': ('https://storage.googleapis.com/mediapipe-models/pose_landmarker/'
                  'pose_landmarker_lite/float16/1/pose_landmarker_lite.task'),
    'delegate': 'CPU',  # 'CPU' or 'GPU'
    'num_poses': 1,
    'min_detection_confidence': 0.5,
    'min_presence_confidence': 0.5,
    'min_tracking_confidence': 0.5
}

# Demo clip (just proves playback/fit; not golf)
DEMO_VIDEO_URL = 'https://interactive-examples.mdn.mozilla.net/media/cc0-videos/flower.mp4'

# Display Settings
DISPLAY_CONFIG = {
    'window_name': 'Swingalyze',
    'area_size': (1280, 720),  # Display area used when no window is shown
    'max_notes': 6,
    'skeleton_color': (252, 177, 111),  # BGR of #6fb1fc
    'skeleton_alpha': 0.9,
    'line_width': 2,
    'fps_interval_sec': 0.25
}

# Static Server
SERVER_CONFIG = {
    'host': os.getenv('SWINGALYZE_HOST', '0.0.0.0'),
    'port': int(os.getenv('SWINGALYZE_PORT', '3000')),
    'root': os.getenv('SWINGALYZE_ROOT', STATIC_DIR)
}
