"""Rendering subpackage.

Turns immutable ``World`` snapshots into Pillow images. The renderer only
reads entity pixel positions (already interpolated by the motion system); it
holds no game logic. See :mod:`grid_chase.renderer.canvas`.
"""

from .canvas import CanvasRenderer, render

__all__ = ["CanvasRenderer", "render"]
