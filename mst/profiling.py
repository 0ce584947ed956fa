"""
Opt-in profiling of the MST build phases.
"""

import time
from functools import wraps
from collections import defaultdict
from typing import Dict
import atexit


class Profiler:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return
        self._initialized = True
        self.stats: Dict[str, Dict] = defaultdict(lambda: {
            'calls': 0,
            'total_time': 0.0,
        })
        self.enabled = False
        atexit.register(self.print_stats)

    def record(self, name: str, elapsed: float):
        if not self.enabled:
            return
        self.stats[name]['calls'] += 1
        self.stats[name]['total_time'] += elapsed

    def summary(self) -> Dict[str, Dict]:
        """Per-name calls, total seconds and average milliseconds, slowest first."""
        result = {}
        for name, data in sorted(self.stats.items(), key=lambda x: x[1]['total_time'], reverse=True):
            calls = data['calls']
            total = data['total_time']
            result[name] = {
                'calls': calls,
                'total_time': total,
                'avg_ms': (total / calls * 1000) if calls > 0 else 0.0,
            }
        return result

    def print_stats(self):
        if not self.stats:
            return

        print("\n" + "=" * 70)
        print("MST BUILD PROFILE")
        print("=" * 70)
        print(f"{'Phase':<35} {'Calls':>10} {'Total(s)':>10} {'Avg(ms)':>10}")
        print("-" * 70)

        for name, data in self.summary().items():
            print(f"{name:<35} {data['calls']:>10} {data['total_time']:>10.3f} {data['avg_ms']:>10.3f}")

        print("=" * 70)

    def reset(self):
        self.stats.clear()


profiler = Profiler()


def profile(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        profiler.record(func.__qualname__, time.perf_counter() - start)
        return result
    return wrapper


class profile_block:
    def __init__(self, name: str):
        self.name = name
        self.start = None

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args):
        profiler.record(self.name, time.perf_counter() - self.start)
