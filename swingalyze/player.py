"""
Swingalyze Player - live overlay loop
=====================================
Frame pump that plays a video, estimates the pose on each new frame,
draws the skeleton over the letterboxed video and shows the readouts
and coaching notes.

Keys:
    space  play / pause        r  reset
    o      overlay on/off      m  mirror
    s      half speed          l  reload video
    d      demo clip           q  quit
"""

import logging
import os
import time

import cv2
import numpy as np

from .config import DEMO_VIDEO_URL, DISPLAY_CONFIG
from .constants import NOTE_COLORS_BGR
from .phase import notes_page
from .pose import EstimatorUnavailable, PoseEstimator, draw_skeleton
from .session import SessionContext
from .video import VideoSource, VideoSourceError

logger = logging.getLogger(__name__)

STATUS_LOADING = "Loading models…"
STATUS_MODEL_READY = "Ready. Load a video."
STATUS_MODEL_FAILED = "Failed to load models — check network/model path."

# Hershey fonts are ASCII only
_ASCII = {'–': '-', '—': '-', '‑': '-', '→': '->', '…': '...', '°': ' deg'}


def to_ascii(text):
    for src, dst in _ASCII.items():
        text = text.replace(src, dst)
    return text.encode('ascii', 'replace').decode('ascii')


class SwingPlayer:
    """
    Owns the estimator, the current video source and one SessionContext.

    tick() is one cooperative step; run() pumps it until quit (or until the
    video ends when no window is shown).
    """

    def __init__(self, estimator_factory=PoseEstimator.initialize, source_factory=VideoSource,
                 display=True, area_size=None, notes_html=None, session=None):
        self.estimator_factory = estimator_factory
        self.source_factory = source_factory
        self.display = display
        self.area_size = tuple(area_size or DISPLAY_CONFIG['area_size'])
        self.notes_html = notes_html
        self.session = session or SessionContext(max_notes=DISPLAY_CONFIG['max_notes'])
        self.session.fps_meter.interval = DISPLAY_CONFIG['fps_interval_sec']
        self.window_name = DISPLAY_CONFIG['window_name']

        self.estimator = None
        self.source = None
        self.src = None
        self._area = self.area_size

    # ============================================
    # SETUP
    # ============================================

    def init_estimator(self, config=None):
        """Load the pose model; on failure the loop keeps running without analysis"""
        self.session.status = STATUS_LOADING
        try:
            self.estimator = self.estimator_factory(config)
        except EstimatorUnavailable as e:
            self.estimator = None
            self.session.status = STATUS_MODEL_FAILED
            logger.error("Pose estimator unavailable: %s", e)
            return False
        self.session.status = STATUS_MODEL_READY
        return True

    def load_video(self, src):
        """Reset the session, open src and start playing from the first frame"""
        self.reset()
        if self.source is not None:
            self.source.release()
            self.source = None

        self.src = src
        source = self.source_factory(src)
        try:
            source.read_first()
        except VideoSourceError:
            source.release()
            raise
        self.source = source

        self._area = self._display_area()
        self.session.load(self.source.width, self.source.height, *self._area)
        self.source.play()
        logger.info("Loaded %s (%dx%d @ %.1f fps)", src, self.source.width,
                    self.source.height, self.source.fps)

    def load_demo(self):
        self.load_video(DEMO_VIDEO_URL)

    # ============================================
    # CONTROLS
    # ============================================

    @property
    def play_label(self):
        if self.source is None or self.source.paused or self.source.ended:
            return "Play"
        return "Pause"

    def toggle_play(self):
        if self.source is None:
            return
        self.source.toggle()

    def reset(self):
        self.session.reset()

    def toggle_overlay(self):
        self.session.overlay_on = not self.session.overlay_on

    def toggle_mirror(self):
        self.session.set_mirror(not self.session.mirror)

    def toggle_slow(self):
        self.session.slow = not self.session.slow

    def handle_key(self, key):
        """Returns False when the player should quit"""
        if key in (ord('q'), 27):
            return False
        if key == ord(' '):
            self.toggle_play()
        elif key == ord('r'):
            self.reset()
        elif key == ord('o'):
            self.toggle_overlay()
        elif key == ord('m'):
            self.toggle_mirror()
        elif key == ord('s'):
            self.toggle_slow()
        elif key == ord('l') and self.src is not None:
            self._try_load(self.src)
        elif key == ord('d'):
            self._try_load(DEMO_VIDEO_URL)
        return True

    def _try_load(self, src):
        try:
            self.load_video(src)
        except VideoSourceError as e:
            self.session.status = "Could not load video."
            logger.error("%s", e)

    # ============================================
    # FRAME LOOP
    # ============================================

    def _display_area(self):
        if self.display:
            try:
                _, _, w, h = cv2.getWindowImageRect(self.window_name)
                if w > 0 and h > 0:
                    return (w, h)
            except cv2.error:
                pass
        return self.area_size

    def tick(self, now=None):
        """
        One step of the loop.

        Returns:
            True if a new frame was analyzed
        """
        s = self.session
        if not s.running:
            return False

        now = time.monotonic() if now is None else now
        s.update_fps(now)

        area = self._display_area()
        if area != self._area and self.source is not None:
            self._area = area
            s.resize(self.source.width, self.source.height, *area)

        src = self.source
        if src is None or src.paused or src.ended:
            return False
        src.playback_rate = 0.5 if s.slow else 1.0

        frame, is_new = src.next_frame(now)
        if frame is None or not is_new or self.estimator is None:
            return False

        landmarks = self.estimator.detect(frame, now * 1000)
        s.process_landmarks(landmarks, src.width, src.height, now)
        return True

    def compose(self):
        """Display-area image: letterboxed video, skeleton and HUD"""
        s = self.session
        area_w, area_h = self._area
        stage = np.zeros((area_h, area_w, 3), dtype=np.uint8)

        frame = self.source.frame if self.source is not None else None
        cw, ch = s.draw_rect.canvas_size
        if s.running and frame is not None and cw > 0 and ch > 0:
            view = cv2.resize(frame, (cw, ch))
            if s.mirror:
                view = cv2.flip(view, 1)
            if s.overlay_on and s.points:
                draw_skeleton(view, s.points)

            x0 = max(0, int(round(s.draw_rect.x)))
            y0 = max(0, int(round(s.draw_rect.y)))
            h = min(ch, area_h - y0)
            w = min(cw, area_w - x0)
            stage[y0:y0 + h, x0:x0 + w] = view[:h, :w]

        self._draw_hud(stage)
        return stage

    def _draw_hud(self, img):
        s = self.session
        font = cv2.FONT_HERSHEY_SIMPLEX
        y = 24
        header = f"{s.status}   [space] {self.play_label}"
        flags = [name for name, on in (('overlay', s.overlay_on), ('mirror', s.mirror),
                                       ('0.5x', s.slow)) if on]
        if flags:
            header += "   " + " ".join(flags)
        cv2.putText(img, to_ascii(header), (10, y), font, 0.6, (255, 255, 255), 1, cv2.LINE_AA)

        for label, value in s.readouts.items():
            y += 22
            cv2.putText(img, to_ascii(f"{label}: {value}"), (10, y), font, 0.55,
                        (255, 255, 255), 1, cv2.LINE_AA)

        y = img.shape[0] - 12 - 22 * (len(s.notes) - 1)
        for note in s.notes:
            color = NOTE_COLORS_BGR.get(note.kind, NOTE_COLORS_BGR['neutral'])
            cv2.putText(img, to_ascii(note.text), (10, y), font, 0.6, color, 1, cv2.LINE_AA)
            y += 22

    def write_notes_page(self):
        if not self.notes_html:
            return
        page = notes_page(self.session.notes, self.session.readouts, self.session.status)
        tmp_path = self.notes_html + '.tmp'
        with open(tmp_path, 'w', encoding='utf-8') as f:
            f.write(page)
        os.replace(tmp_path, self.notes_html)

    def run(self):
        """Pump frames until quit (window) or end of video (headless)"""
        if self.display:
            cv2.namedWindow(self.window_name, cv2.WINDOW_NORMAL)
            cv2.resizeWindow(self.window_name, *self.area_size)

        last_status = None
        last_notes = None
        try:
            while True:
                analyzed = self.tick()
                s = self.session

                if analyzed or s.status != last_status:
                    self.write_notes_page()

                if self.display:
                    cv2.imshow(self.window_name, self.compose())
                    key = cv2.waitKey(1) & 0xFF
                    if not self.handle_key(key):
                        break
                else:
                    if s.status != last_status:
                        print(f"   {s.status}")
                    if analyzed and s.notes != last_notes:
                        print(f"   [{s.notes_phase}]")
                        for note in s.notes:
                            print(f"      • ({note.kind}) {note.text}")
                        last_notes = list(s.notes)
                    if not s.running or self.source is None or self.source.ended:
                        break
                last_status = s.status
        finally:
            self.close()

    def close(self):
        if self.source is not None:
            self.source.release()
            self.source = None
        if self.estimator is not None:
            self.estimator.close()
            self.estimator = None
        if self.display:
            cv2.destroyAllWindows()
