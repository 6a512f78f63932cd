import pytest

from swingalyze.biomechanics import Measurements
from swingalyze.phase import Note, PhaseTracker
from swingalyze.phase.tracker import PHASE_NAMES

UNKNOWN = Measurements()


def texts(notes):
    return [n.text for n in notes]


@pytest.mark.parametrize("frames", range(0, 9))
def test_advances_one_phase_per_frame_and_saturates(frames):
    tracker = PhaseTracker()
    for _ in range(frames):
        tracker.step(UNKNOWN)
    assert tracker.phase == PHASE_NAMES[min(frames, 4)]


def test_phases_never_go_backwards():
    tracker = PhaseTracker()
    seen = []
    for _ in range(10):
        seen.append(tracker.index)
        tracker.step(Measurements(head_drift_px=50, spine_angle=0))
    assert seen == sorted(seen)


def test_address_notes():
    tracker = PhaseTracker()
    notes = tracker.step(Measurements(head_drift_px=-15, pelvis_drift_px=12))
    assert notes == [
        Note('neutral', "At address: hold steady head & pelvis. Target < 10px drift."),
        Note('bad', "Head swaying at address."),
        Note('warn', "Pelvis shifting; quiet lower body."),
    ]


def test_address_within_limits_only_reminds():
    notes = PhaseTracker().step(Measurements(head_drift_px=10, pelvis_drift_px=-10))
    assert [n.kind for n in notes] == ['neutral']


def test_unknown_measurements_never_trigger_threshold_notes():
    tracker = PhaseTracker()
    kinds = []
    for _ in range(5):
        kinds.extend(n.kind for n in tracker.step(UNKNOWN))
    assert set(kinds) == {'neutral'}


def test_backswing_notes():
    tracker = PhaseTracker()
    tracker.step(UNKNOWN)
    notes = tracker.step(Measurements(x_factor=45, knee_flex=5))
    assert [n.kind for n in notes] == ['good', 'warn', 'neutral']
    assert texts(notes)[-1] == "Top of backswing: check stable base, growing X‑factor."


def test_downswing_weight_shift_from_pelvis_drift():
    # baseline hip mid x = 100, current = 135
    tracker = PhaseTracker()
    tracker.step(UNKNOWN)
    tracker.step(UNKNOWN)
    assert tracker.phase == 'downswing'
    notes = tracker.step(Measurements(pelvis_drift_px=135 - 100))
    assert Note('good', "Initiate with hips — weight shift detected.") in notes
    assert texts(notes)[-1] == "Create sequence: hips → torso → arms."


def test_downswing_small_drift_gets_reminder_only():
    tracker = PhaseTracker()
    tracker.index = 2
    notes = tracker.step(Measurements(pelvis_drift_px=-20))
    assert [n.kind for n in notes] == ['neutral']


@pytest.mark.parametrize("spine,expect_good", [(3, True), (-4.9, True), (5, False), (None, False)])
def test_impact_neutral_spine(spine, expect_good):
    tracker = PhaseTracker()
    tracker.index = 3
    notes = tracker.step(Measurements(spine_angle=spine))
    assert (Note('good', "Neutral spine at impact.") in notes) is expect_good
    assert tracker.phase == 'follow'


def test_follow_repeats():
    tracker = PhaseTracker()
    tracker.index = 4
    for _ in range(3):
        assert tracker.step(UNKNOWN) == [Note('neutral', "Balanced finish; chest to target.")]
    assert tracker.phase == 'follow'


def test_reset_returns_to_address():
    tracker = PhaseTracker()
    for _ in range(3):
        tracker.step(UNKNOWN)
    tracker.reset()
    assert tracker.phase == 'address'
