# MIT License (see LICENSE)
"""
Frame sinks for simulation state.

The simulations know nothing about drawing. A front end (3D scene, chart
widget, terminal) subclasses RendererAdapter and receives one
begin_frame / draw_simulation / end_frame sequence per stepped frame.

Bundled sinks:
    - DebugRenderer: one text block per frame, handy with ``physics-lab run --render``.
    - NullRenderer: discards frames; used by the benchmark.
    - BufferedRenderer: keeps frames as dicts for tests and export.

Typical usage:
    from physics_lab.renderer import BufferedRenderer

    sink = BufferedRenderer()
    FrameLoop(sim, renderer=sink).run(duration=2.0)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
