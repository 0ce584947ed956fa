import json

import pytest

import main_mst


def test_headless_run(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main_mst.main(['--headless', '--points', '12', '--seed', '4', '--delay', '10'])
    out = capsys.readouterr().out
    assert 'Kruskal MST over 12 points' in out
    assert 'Revealed 11/11 edges in 100 ms' in out
    assert 'Spanning tree: True' in out
    assert 'Auto-rotate: True' in out


def test_overrides_apply_to_pipeline():
    args = main_mst.parse_args(['--points', '8', '--no-dedup', '--background', 'corona'])
    pipeline = main_mst.apply_overrides(main_mst.load_config('does/not/exist.json'), args)
    assert pipeline.num_points == 8
    assert pipeline.spread_bound is None
    assert pipeline.dedup_edges is False
    assert pipeline.background == 'corona'


def test_explicit_missing_config_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        main_mst.main(['--headless', '--config', str(tmp_path / 'missing.json')])


def test_save_gif(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config_path = tmp_path / "small.json"
    config_path.write_text(json.dumps({
        "render_size": 1.5, "render_dpi": 30, "render_fps": 5, "orbit_seconds": 0.4,
    }))
    main_mst.main(['--config', str(config_path), '--points', '4', '--seed', '1',
                   '--delay', '100', '--save', 'out.gif', '--snapshot'])
    assert (tmp_path / 'out.gif').exists()
    assert (tmp_path / 'outputs' / 'mst' / 'kruskal_tree.png').exists()


def test_headless_run_writes_nothing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    main_mst.main(['--headless', '--points', '6', '--seed', '2'])
    assert not (tmp_path / 'outputs').exists()
