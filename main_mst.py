"""
Main entry point for the Kruskal MST visualizer.

Scatters random colored points in 3D, builds their minimum spanning tree
with Kruskal's algorithm and reveals the edges one by one in acceptance
order. Once the last edge is drawn the camera starts orbiting.

Configuration is loaded from config/pipeline.json (defaults if missing);
command line flags override it.

Modes:
    (default)   - open an interactive window (drag to rotate, scroll to zoom,
                  't' toggles auto-rotate)
    --save      - write the animation to a GIF instead
    --headless  - build and run the reveal without drawing, print a summary
"""

import argparse
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from config import load_config, MSTConfig, MSTRenderConfig
from mst import KruskalGraph, EventQueue, VirtualClock, WallClock, is_spanning_tree
from mst.profiling import profiler
from mst.visualization import visualize_mst, plot_mst_statistics
from rendering import HeadlessRenderer, MatplotlibRenderer, frames_for_reveal


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Animate Kruskal's MST over a random 3D point cloud.")
    parser.add_argument('--config', type=str, default=None,
                        help='Path to a pipeline JSON config (default: config/pipeline.json if present)')
    parser.add_argument('--points', type=int, default=None, help='Number of points')
    parser.add_argument('--delay', type=float, default=None, help='Delay between edge reveals, in ms')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    parser.add_argument('--background', type=str, default=None, choices=['corona', 'redeclipse'],
                        help='Background theme (default: random)')
    parser.add_argument('--save', nargs='?', const='', default=None, metavar='PATH',
                        help='Save the animation as a GIF (default path derived from the config)')
    parser.add_argument('--snapshot', action='store_true',
                        help='Also save a static picture of the tree and edge statistics')
    parser.add_argument('--headless', action='store_true', help='Run without drawing anything')
    parser.add_argument('--no-dedup', action='store_true',
                        help='Generate candidate edges in both directions')
    parser.add_argument('--profile', action='store_true', help='Print build phase timings at exit')
    return parser.parse_args(argv)


def apply_overrides(pipeline, args):
    if args.points is not None:
        pipeline.num_points = args.points
        pipeline.spread_bound = None
    if args.delay is not None:
        pipeline.edge_delay_ms = args.delay
    if args.seed is not None:
        pipeline.random_seed = args.seed
    if args.background is not None:
        pipeline.background = args.background
    if args.no_dedup:
        pipeline.dedup_edges = False
    if args.profile:
        pipeline.profile = True
    return pipeline


def run_headless(mst_config: MSTConfig, render_config: MSTRenderConfig):
    renderer = HeadlessRenderer(render_config)
    queue = EventQueue(VirtualClock())
    graph = KruskalGraph(mst_config, renderer, queue)
    queue.run_all()

    print(f"Revealed {graph.reveal.revealed}/{graph.reveal.total} edges "
          f"in {graph.reveal.completed_at or 0.0:.0f} ms (virtual)")
    print(f"  Total weight: {graph.total_weight:.3f}")
    print(f"  Spanning tree: {is_spanning_tree(graph.edges, len(graph.points))}")
    print(f"  Auto-rotate: {renderer.controls.auto_rotate}")
    return graph


def main(argv=None):
    args = parse_args(argv)

    if args.config is not None and not Path(args.config).exists():
        raise FileNotFoundError(f"Config file not found: {args.config}")

    pipeline = apply_overrides(load_config(args.config or 'config/pipeline.json'), args)

    mst_config = MSTConfig.from_pipeline(pipeline)
    render_config = MSTRenderConfig.from_pipeline(pipeline)
    profiler.enabled = mst_config.profile

    print(f"Kruskal MST over {mst_config.num_points} points")
    print(f"  Spread: +/-{mst_config.spread_bound}")
    print(f"  Edge delay: {mst_config.edge_delay_ms} ms")
    print(f"  Seed: {mst_config.random_seed}")
    print()

    if args.headless:
        run_headless(mst_config, render_config)
        return

    saving = args.save is not None
    queue = EventQueue(VirtualClock() if saving else WallClock())
    renderer = MatplotlibRenderer(
        render_config,
        spread_bound=mst_config.spread_bound,
        rng=np.random.default_rng(mst_config.random_seed)
    )
    # The live window starts its reveal on the first animation frame
    graph = KruskalGraph(mst_config, renderer, queue, start_reveal=saving)
    print(f"Background: {renderer.background}")
    print(f"MST: {len(graph.edges)} edges, total weight {graph.total_weight:.3f}")

    if args.snapshot:
        pipeline.create_output_dirs()
        tree_fig, _ = visualize_mst(graph.points, graph.edges, save_path=str(pipeline.snapshot_path), show=False)
        stats_fig, _ = plot_mst_statistics(graph.edges, len(graph.points), save_path=str(pipeline.stats_path), show=False)
        plt.close(tree_fig)
        plt.close(stats_fig)

    if saving:
        if not args.save:
            pipeline.create_output_dirs()
        save_path = args.save or str(pipeline.gif_path)
        frames = frames_for_reveal(
            len(graph.edges), mst_config.edge_delay_ms, render_config.fps, pipeline.orbit_seconds
        )
        renderer.animate(queue, frames=frames, save_path=save_path)
        renderer.close()
    else:
        renderer.animate(queue, on_start=graph.start_reveal)


if __name__ == '__main__':
    main()
