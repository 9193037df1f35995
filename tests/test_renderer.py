import io

from physics_lab.renderer import BufferedRenderer, DebugRenderer, NullRenderer
from physics_lab.simulations import PendulumMotion, ProjectileMotion


def test_debug_renderer_writes_state():
    out = io.StringIO()
    sim = PendulumMotion()
    sim.play()
    sim.step(0.01)
    DebugRenderer(output=out).render(sim)

    text = out.getvalue()
    assert text.startswith("=== pendulum-motion t=0.0100 ===")
    assert "angle=" in text
    assert "bob_x=" in text


def test_debug_renderer_formats_flags():
    out = io.StringIO()
    DebugRenderer(output=out, precision=2).render(ProjectileMotion())
    assert "has_landed=False" in out.getvalue()
    assert "vx=7.07" in out.getvalue()


def test_buffered_renderer_records_frames():
    renderer = BufferedRenderer()
    sim = ProjectileMotion()
    sim.play()
    for _ in range(3):
        sim.step(0.016)
        renderer.render(sim)

    assert len(renderer.frames) == 3
    assert renderer.frames[0]["id"] == "projectile-motion"
    assert renderer.frames[2]["time"] == sim.current_time
    assert renderer.frames[2]["state"]["y"] == sim.y

    renderer.clear()
    assert renderer.frames == []


def test_null_renderer():
    NullRenderer().render(PendulumMotion())
