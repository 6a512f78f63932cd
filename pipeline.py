"""
Swingalyze - Live Overlay Pipeline
==================================
Plays a golf swing video with a pose skeleton overlay, live readouts
and phase-based coaching notes.

Per frame:
1. Estimate pose (MediaPipe PoseLandmarker)
2. Map landmarks into the letterboxed video rectangle (optional mirror)
3. Draw skeleton
4. Measure spine angle, head/pelvis drift, knee flex, X-factor
5. Advance the phase tracker and show coaching notes

Usage:
    python pipeline.py <video_path>
    python pipeline.py --demo
    python pipeline.py swing.mp4 --no-display --notes-html swingalyze/static/notes.html
"""

import argparse
import logging
import sys

from swingalyze.config import DISPLAY_CONFIG
from swingalyze.player import SwingPlayer
from swingalyze.video import VideoSource, VideoSourceError


def main(argv=None):
    """
    Main entry point for the live overlay.

    Usage:
        python pipeline.py <video_path> [--mirror] [--slow] [--no-overlay]
        python pipeline.py --demo --no-display
    """
    parser = argparse.ArgumentParser(description='Swingalyze - Golf Swing Overlay')
    parser.add_argument('video', nargs='?', help='Path or URL of the video')
    parser.add_argument('--demo', action='store_true', help='Play the demo clip')
    parser.add_argument('--mirror', action='store_true', help='Mirror the view')
    parser.add_argument('--slow', action='store_true', help='Half-speed playback')
    parser.add_argument('--no-overlay', action='store_true', help='Hide the skeleton')
    parser.add_argument('--no-display', action='store_true',
                        help='Run without a window and print notes to the console')
    parser.add_argument('--notes-html', type=str, default=None,
                        help='Keep a live notes page at this path (e.g. swingalyze/static/notes.html)')
    parser.add_argument('--model', type=str, default=None, help='Path to a pose_landmarker .task file')

    args = parser.parse_args(argv)

    if args.video is None and not args.demo:
        parser.print_help()
        return 0

    logging.basicConfig(level=logging.INFO)

    headless = args.no_display
    player = SwingPlayer(
        source_factory=lambda src: VideoSource(src, realtime=not headless),
        display=not headless,
        area_size=DISPLAY_CONFIG['area_size'],
        notes_html=args.notes_html
    )
    player.session.mirror = args.mirror
    player.session.slow = args.slow
    player.session.overlay_on = not args.no_overlay

    print("\n" + "=" * 70)
    print("🏌️ SWINGALYZE - LIVE OVERLAY")
    print("=" * 70)

    player.init_estimator({'model_path': args.model} if args.model else None)
    print(f"   {player.session.status}")

    try:
        if args.demo:
            player.load_demo()
        else:
            player.load_video(args.video)
    except VideoSourceError as e:
        print(f"\n❌ ERROR: {e}")
        print("Please check the video path and try again.")
        player.close()
        return 1

    player.run()
    print("=" * 70 + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
