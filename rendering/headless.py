"""
Renderer that keeps scene state without drawing anything.
"""

from .base import Renderer


class HeadlessRenderer(Renderer):
    def _draw(self, handle):
        pass

    def _redraw(self):
        return []
