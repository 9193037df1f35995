from physics_lab import FrameLoop, ProjectileMotion
from physics_lab.formulas import mechanics
from physics_lab.renderer import BufferedRenderer
from physics_lab.util import deg_to_rad

sim = ProjectileMotion({"initialSpeed": 18.0, "launchAngle": 35.0, "initialHeight": 2.0})
renderer = BufferedRenderer()
FrameLoop(sim, renderer=renderer).run(duration=10.0, fps=120)

angle = deg_to_rad(35.0)
print("frames:", len(renderer.frames))
print("flight time", sim.flight_time, "analytic", mechanics.projectile_flight_time(18.0, angle, 9.81, 2.0))
print("range", sim.range, "analytic", mechanics.projectile_range(18.0, angle, 9.81, 2.0))
print("apex", sim.max_height, "analytic", mechanics.projectile_max_height(18.0, angle, 9.81, 2.0))
