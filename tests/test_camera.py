import pytest

from blobarena.camera import Camera, CameraMode


def test_instance_is_shared():
    first = Camera.instance()
    second = Camera.instance()
    original = first.mode
    try:
        first.set_mode(CameraMode.FOLLOW_PLAYER)
        assert second.mode is CameraMode.FOLLOW_PLAYER
        assert second.scale == 2.0
        first.set_mode(CameraMode.STATIC_VIEW)
        assert second.mode is CameraMode.STATIC_VIEW
        assert second.scale == 1.0
    finally:
        first.set_mode(original)


def test_defaults_are_static_view_with_unit_scale():
    camera = Camera()
    assert camera.mode is CameraMode.STATIC_VIEW
    assert camera.scale == 1.0


def test_set_mode_changes_scale():
    camera = Camera()
    camera.set_mode(CameraMode.FOLLOW_PLAYER)
    assert camera.scale == 2.0
    camera.set_mode(CameraMode.STATIC_VIEW)
    assert camera.scale == 1.0


@pytest.mark.parametrize(
    "key, expected",
    [
        (0x31, CameraMode.FOLLOW_PLAYER),
        ("1", CameraMode.FOLLOW_PLAYER),
        (0x32, CameraMode.STATIC_VIEW),
        ("2", CameraMode.STATIC_VIEW),
    ],
)
def test_handle_input_selects_mode(key, expected):
    camera = Camera()
    if expected is CameraMode.STATIC_VIEW:
        camera.set_mode(CameraMode.FOLLOW_PLAYER)
    camera.handle_input(key)
    assert camera.mode is expected


def test_handle_input_ignores_other_keys():
    camera = Camera()
    camera.set_mode(CameraMode.FOLLOW_PLAYER)
    camera.handle_input(0x41)
    assert camera.mode is CameraMode.FOLLOW_PLAYER
    assert camera.scale == 2.0


def test_static_view_has_no_offset():
    camera = Camera()
    assert camera.calculate_offset(1500.0, 900.0) == (0.0, 0.0)


def test_follow_with_hero_at_screen_centre_has_no_offset():
    camera = Camera()
    camera.set_mode(CameraMode.FOLLOW_PLAYER)
    assert camera.calculate_offset(960.0, 520.0) == (0.0, 0.0)


def test_follow_offset_eases_towards_clamped_target():
    camera = Camera()
    camera.set_mode(CameraMode.FOLLOW_PLAYER)
    offsets = [camera.calculate_offset(1960.0, 1520.0) for _ in range(5)]
    xs = [x for x, _ in offsets]
    ys = [y for _, y in offsets]
    assert all(x > 0 for x in xs)
    assert all(a > b for a, b in zip(xs, xs[1:]))
    assert all(a > b for a, b in zip(ys, ys[1:]))
    assert xs[0] < 1960.0 - 960.0


def test_static_view_resets_follow_state():
    camera = Camera()
    camera.set_mode(CameraMode.FOLLOW_PLAYER)
    camera.calculate_offset(1960.0, 1520.0)
    camera.set_mode(CameraMode.STATIC_VIEW)
    assert camera.calculate_offset(1960.0, 1520.0) == (0.0, 0.0)
    camera.set_mode(CameraMode.FOLLOW_PLAYER)
    assert camera.calculate_offset(1960.0, 1520.0) == (0.0, 0.0)