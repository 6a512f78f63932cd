import pytest

from swingalyze.pose import Landmark
from swingalyze.video import DrawRect, compute_draw_rect, map_landmarks


@pytest.mark.parametrize("area,video", [
    ((1280, 720), (1920, 1080)),
    ((1000, 500), (640, 480)),
    ((500, 1000), (1920, 1080)),
    ((800, 800), (1080, 1920)),
    ((333, 777), (720, 720)),
    ((1366, 768), (3840, 1600)),
])
def test_draw_rect_preserves_aspect_and_centers(area, video):
    W, H = area
    vw, vh = video
    rect = compute_draw_rect(W, H, vw, vh)

    assert rect.w / rect.h == pytest.approx(vw / vh)
    assert rect.w <= W + 1e-9 and rect.h <= H + 1e-9
    # fills the constraining axis
    assert rect.w == pytest.approx(W) or rect.h == pytest.approx(H)
    # equal margins on both sides
    assert rect.x * 2 + rect.w == pytest.approx(W)
    assert rect.y * 2 + rect.h == pytest.approx(H)
    assert rect.scale_x == pytest.approx(rect.w / vw)
    assert rect.scale_y == pytest.approx(rect.h / vh)


def test_draw_rect_full_hd_into_720p():
    rect = compute_draw_rect(1280, 720, 1920, 1080)
    assert (rect.x, rect.y) == (pytest.approx(0), pytest.approx(0))
    assert (rect.w, rect.h) == (pytest.approx(1280), pytest.approx(720))
    assert rect.scale_x == pytest.approx(2 / 3)
    assert rect.canvas_size == (1280, 720)


def test_draw_rect_pillarbox():
    rect = compute_draw_rect(1000, 500, 640, 480)
    assert rect.h == 500
    assert rect.w == pytest.approx(2000 / 3)
    assert rect.x == pytest.approx((1000 - 2000 / 3) / 2)
    assert rect.y == 0


def test_unknown_video_size_assumes_16_9():
    rect = compute_draw_rect(1600, 1600, 0, 0)
    assert rect.w / rect.h == pytest.approx(16 / 9)


def test_empty_display_area():
    rect = compute_draw_rect(0, 720, 1920, 1080)
    assert rect.canvas_size == (0, 0)


def test_map_landmarks_scales_into_canvas():
    rect = compute_draw_rect(1280, 720, 1920, 1080)
    points = map_landmarks([Landmark(0.25, 0.5, -0.1)], rect, 1920, 1080)
    assert (points[0].x, points[0].y) == (320, 360)
    assert points[0].z == -0.1


def test_missing_landmark_stays_missing():
    rect = DrawRect(0, 0, 100, 100, 1, 1)
    points = map_landmarks([None, Landmark(0.1, 0.2)], rect, 100, 100)
    assert points[0] is None
    assert (points[1].x, points[1].y) == (10, 20)


@pytest.mark.parametrize("x", [0.0, 0.13, 0.5, 0.77, 1.0])
def test_mirror_reflects_about_vertical_center(x):
    rect = compute_draw_rect(1000, 500, 640, 480)
    landmarks = [Landmark(x, 0.4)]
    plain = map_landmarks(landmarks, rect, 640, 480)[0]
    mirrored = map_landmarks(landmarks, rect, 640, 480, mirror=True)[0]

    assert mirrored.y == plain.y
    assert abs((plain.x + mirrored.x) - rect.w) <= 1


def test_mirror_does_not_touch_landmarks():
    rect = DrawRect(0, 0, 200, 100, 2, 2)
    landmarks = [Landmark(0.3, 0.6)]
    map_landmarks(landmarks, rect, 100, 50, mirror=True)
    assert landmarks == [Landmark(0.3, 0.6)]
