import numpy as np
import pytest

from rgbdtrack.geometry import Rect
from rgbdtrack.track import Track


def make_track():
    return Track((12, 34), 20, 60, (255, 0, 0))


def test_new_track_defaults():
    track = make_track()
    assert track.num_detections == 1
    assert track.track_id == -1
    assert track.occluded is False
    assert track.hide is False
    track.get_position()
    assert track.loss_detections() == 0


def test_get_position_returns_initial_state():
    track = make_track()
    assert np.allclose(track.get_position(), [12, 34, 0, 0, 20, 60])


def test_bbox_after_prediction():
    track = make_track()
    track.get_position()
    assert track.bbox() == Rect(12, 34, 20, 60)


def test_bbox_without_prediction_raises():
    with pytest.raises(RuntimeError):
        make_track().bbox()


def test_loss_detections_without_prediction_raises():
    with pytest.raises(RuntimeError):
        make_track().loss_detections()


def test_update_decrements_loss():
    track = make_track()
    track.add_loss_detection()
    track.add_loss_detection()
    track.get_position()
    track.update((12, 34), 20, 60)
    assert track.loss_detections() == 1


def test_update_never_goes_below_zero():
    track = make_track()
    track.get_position()
    track.update((12, 34), 20, 60)
    assert track.loss_detections() == 0


def test_add_detection_and_reset():
    track = make_track()
    track.add_detection()
    track.add_detection()
    track.add_loss_detection()
    assert track.num_detections == 3
    track.reset()
    track.get_position()
    assert track.num_detections == 1
    assert track.loss_detections() == 0


def test_last_detection_is_centre():
    track = Track((0, 0), 30, 40, (0, 0, 0))
    track.detection_corner = (10, 20)
    assert track.last_detection() == (25, 40)


def test_loss_detections_resets_corner_to_prediction():
    track = make_track()
    track.detection_corner = (0, 0)
    track.get_position()
    track.loss_detections()
    assert track.detection_corner == (12, 34)


def test_update_moves_following_prediction():
    track = make_track()
    track.get_position()
    track.update((22, 34), 20, 60)
    position = track.get_position()
    assert 12 < position[0] < 22