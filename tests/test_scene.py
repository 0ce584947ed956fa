import numpy as np
import pytest

from mst import Vector3D
from rendering import Scene, OrbitControls, PointPrimitive, LinePrimitive, HeadlessRenderer
from rendering import to_rgb, gradient_segments, pick_background


def test_scene_keeps_insertion_order():
    scene = Scene()
    p = PointPrimitive(Vector3D(), (1, 0, 0))
    l1 = LinePrimitive(Vector3D(), Vector3D(1, 0, 0), (1, 0, 0), (0, 0, 1))
    l2 = LinePrimitive(Vector3D(), Vector3D(0, 1, 0), (1, 0, 0), (0, 1, 0))
    for handle in (l1, p, l2):
        scene.add(handle)
    assert scene.points == [p]
    assert scene.lines == [l1, l2]
    assert len(scene) == 3
    with pytest.raises(TypeError):
        scene.add("sphere")


def test_auto_rotate_advances_azimuth():
    controls = OrbitControls(auto_rotate_speed=12.0, azimuth=0.0)
    controls.update(1000)
    assert controls.azimuth == 0.0

    controls.auto_rotate = True
    controls.update(1000)
    assert controls.azimuth == pytest.approx(12.0)
    controls.update(30000)
    assert controls.azimuth == pytest.approx(12.0)


def test_zoom_is_clamped_and_damped():
    controls = OrbitControls(damping_factor=0.5)
    controls.zoom_by(100)
    assert controls.target_zoom == controls.max_zoom
    controls.update()
    assert controls.zoom == pytest.approx((1.0 + controls.max_zoom) / 2)

    controls.enable_damping = False
    controls.zoom_by(1e-6)
    controls.update()
    assert controls.zoom == controls.min_zoom


def test_toggle_auto_rotate():
    controls = OrbitControls()
    assert controls.toggle_auto_rotate() is True
    assert controls.toggle_auto_rotate() is False


def test_to_rgb():
    assert to_rgb(0x00FF00) == (0.0, 1.0, 0.0)
    assert to_rgb(np.int64(0xFF0000)) == (1.0, 0.0, 0.0)
    assert to_rgb('white') == (1.0, 1.0, 1.0)
    assert to_rgb((0.5, 0.25, 0.0)) == (0.5, 0.25, 0.0)


def test_gradient_segments_are_contiguous_and_blend():
    segments, colors = gradient_segments((0, 0, 0), (4, 0, 0), (1, 0, 0), (0, 0, 1), 4)
    assert segments.shape == (4, 2, 3)
    assert colors.shape == (4, 3)
    np.testing.assert_allclose(segments[0, 0], [0, 0, 0])
    np.testing.assert_allclose(segments[-1, 1], [4, 0, 0])
    np.testing.assert_allclose(segments[1:, 0], segments[:-1, 1])
    np.testing.assert_allclose(colors[0], [0.875, 0, 0.125])
    np.testing.assert_allclose(colors[-1], [0.125, 0, 0.875])


def test_pick_background():
    picks = {pick_background(np.random.default_rng(seed)) for seed in range(20)}
    assert picks == {'corona', 'redeclipse'}


def test_headless_renderer_records_and_ticks():
    renderer = HeadlessRenderer()
    renderer.add_to_scene(renderer.create_point(Vector3D(1, 2, 3), 0xFFFFFF))
    renderer.add_to_scene(renderer.create_edge_line(Vector3D(), 0xFF0000, Vector3D(1, 1, 1), 'blue'))
    assert renderer.scene.points[0].color == (1.0, 1.0, 1.0)
    assert renderer.scene.lines[0].color_end == (0.0, 0.0, 1.0)

    renderer.controls.auto_rotate = True
    start = renderer.controls.azimuth
    renderer.render_frame(500)
    assert renderer.frame_count == 1
    assert renderer.controls.azimuth == pytest.approx((start + renderer.config.auto_rotate_speed / 2) % 360)
