import pytest
import matplotlib.pyplot as plt

from config import MSTConfig, MSTRenderConfig
from mst import KruskalGraph, EventQueue, VirtualClock, Vector3D
from rendering import MatplotlibRenderer, frames_for_reveal, frame_time_ms


@pytest.fixture
def renderer():
    config = MSTRenderConfig(figsize=(2, 2), dpi=40, fps=10, background='corona', line_segments=4)
    r = MatplotlibRenderer(config, spread_bound=10.0)
    yield r
    r.close()


def test_background_from_config(renderer):
    assert renderer.background == 'corona'


def test_primitives_become_artists(renderer):
    renderer.add_to_scene(renderer.create_point(Vector3D(1, 1, 1), 0xFF0000))
    renderer.add_to_scene(renderer.create_point(Vector3D(-1, 2, 0), 0x0000FF))
    assert renderer._scatter is not None
    assert len(renderer._point_xyz) == 2

    renderer.add_to_scene(renderer.create_edge_line(Vector3D(1, 1, 1), 0xFF0000, Vector3D(-1, 2, 0), 0x0000FF))
    renderer.add_to_scene(renderer.create_edge_line(Vector3D(), 0xFFFFFF, Vector3D(3, 3, 3), 0x000000))
    assert renderer._lines is not None
    assert len(renderer._segments) == 8
    assert len(renderer.scene.lines) == 2


def test_render_frame_rotates_camera(renderer):
    renderer.controls.auto_rotate = True
    start = renderer.controls.azimuth
    artists = renderer.render_frame(1000)
    assert artists == []
    assert renderer.controls.azimuth == pytest.approx((start + 12.0) % 360)
    assert renderer.ax.azim == pytest.approx(renderer.controls.azimuth)


def test_scroll_and_key_events(renderer):
    class Event:
        def __init__(self, button=None, key=None):
            self.button = button
            self.key = key

    renderer._on_scroll(Event(button='up'))
    assert renderer.controls.target_zoom > 1.0
    renderer._on_key(Event(key='t'))
    assert renderer.controls.auto_rotate


def test_save_frame(renderer, tmp_path):
    renderer.add_to_scene(renderer.create_point(Vector3D(0, 0, 0), 0x00FF00))
    path = tmp_path / 'frames' / 'frame.png'
    renderer.save_frame(str(path))
    assert path.exists()


def test_frames_for_reveal():
    assert frames_for_reveal(0, 16, 60) == 1
    assert frames_for_reveal(4, 50, 10) == 3
    assert frames_for_reveal(4, 50, 10, orbit_seconds=1.0) == 13


def test_animation_saves_gif_with_full_reveal(renderer, tmp_path):
    queue = EventQueue(VirtualClock())
    graph = KruskalGraph(MSTConfig(num_points=5, random_seed=0, edge_delay_ms=50), renderer, queue)
    frames = frames_for_reveal(len(graph.edges), 50, renderer.config.fps)

    path = tmp_path / 'reveal.gif'
    renderer.animate(queue, frames=frames, save_path=str(path))

    assert path.exists()
    assert graph.reveal.completed
    assert len(renderer.scene.lines) == 4
    assert renderer.controls.auto_rotate


def test_animate_save_requires_frames(renderer, tmp_path):
    with pytest.raises(ValueError):
        renderer.animate(EventQueue(VirtualClock()), save_path=str(tmp_path / 'x.gif'))


def test_frame_time_is_exact_on_whole_seconds():
    assert frame_time_ms(19, 19) == 1000.0
    assert frame_time_ms(0, 60) == 0.0
    assert frame_time_ms(3, 10) == 300.0


def test_last_edge_lands_on_the_final_frame():
    # 51 edges at 20 ms end at 1000 ms, which is frame 19 at 19 fps
    config = MSTRenderConfig(figsize=(2, 2), dpi=40, fps=19, background='corona', line_segments=2)
    renderer = MatplotlibRenderer(config, spread_bound=104.0)
    try:
        queue = EventQueue(VirtualClock())
        graph = KruskalGraph(MSTConfig(num_points=52, random_seed=0, edge_delay_ms=20), renderer, queue)
        frames = frames_for_reveal(len(graph.edges), 20, 19)
        assert frames == 20

        for k in range(frames):
            renderer._tick(k, queue)

        assert graph.reveal.completed
        assert graph.reveal.revealed == 51
        assert renderer.controls.auto_rotate
    finally:
        renderer.close()


def test_on_start_schedules_reveal_from_first_frame(renderer, tmp_path):
    queue = EventQueue(VirtualClock())
    graph = KruskalGraph(MSTConfig(num_points=5, random_seed=0, edge_delay_ms=50), renderer, queue,
                         start_reveal=False)
    assert graph.reveal is None

    frames = frames_for_reveal(len(graph.edges), 50, renderer.config.fps)
    renderer.animate(queue, frames=frames, save_path=str(tmp_path / 'reveal.gif'), on_start=graph.start_reveal)

    assert graph.reveal.completed
    assert graph.reveal.fired_at[0] == 0.0
    assert len(renderer.scene.lines) == 4
