import pytest

from wolfpix.controls import HEIGHT, WIDTH, Key, View, pointer_motion


def test_key_codes():
    assert Key(53) is Key.ESCAPE
    assert Key(13) is Key.UP
    assert Key(126) is Key.W_UP
    assert Key(257) is Key.RUN
    assert Key(49) is Key.ACCURACY


def test_window_size():
    assert (WIDTH, HEIGHT) == (1360, 764)
    view = View()
    assert view.window_height == 764
    assert view.mid == 382


def test_centre_pointer_keeps_horizon():
    mid, _ = pointer_motion(0, HEIGHT // 2, HEIGHT)
    assert mid == HEIGHT // 2


def test_horizon_clamped_at_zero():
    mid, _ = pointer_motion(0, 10_000, HEIGHT)
    assert mid == 0


def test_horizon_rises_when_pointer_goes_up():
    high, _ = pointer_motion(0, 100, HEIGHT)
    low, _ = pointer_motion(0, 200, HEIGHT)
    assert high > low


def test_angle_at_left_edge():
    assert pointer_motion(0, 0, HEIGHT)[1] == 180.0


def test_angle_truncates_toward_zero():
    assert pointer_motion(361, 0, HEIGHT)[1] == pointer_motion(360, 0, HEIGHT)[1]
    assert pointer_motion(361, 0, HEIGHT)[1] == 0.0


def test_angle_wraps_past_full_turn():
    assert pointer_motion(-400, 0, HEIGHT)[1] == 20.0


@pytest.mark.parametrize("x", [-2000, -721, -1, 0, 1, 359, 720, 1359, 5000])
def test_angle_within_a_turn(x):
    _, angle = pointer_motion(x, 0, HEIGHT)
    assert -360 < angle < 360
    assert angle == int(angle)


def test_negative_height_rejected():
    with pytest.raises(ValueError):
        pointer_motion(0, 0, -1)


def test_view_defaults():
    view = View()
    assert view.window_height == HEIGHT
    assert view.mid == HEIGHT // 2
    assert view.angle == 0.0


def test_view_follows_pointer():
    view = View(window_height=HEIGHT)
    view.on_pointer_motion(500, 50)
    assert (view.mid, view.angle) == pointer_motion(500, 50, HEIGHT)


def test_view_rejects_negative_height():
    with pytest.raises(ValueError):
        View(window_height=-5)