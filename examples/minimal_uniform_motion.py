# examples/minimal_uniform_motion.py
from physics_lab.simulations import UniformMotion

sim = UniformMotion({"initialVelocity": 3.0, "acceleration": -1.5})
sim.play()

t_end = 2.0
while sim.current_time < t_end:
    sim.step(sim.time_step)

print("t:", sim.current_time)
print("pos:", sim.position)
print("vel:", sim.velocity)
print("energy:", sim.energy.latest)
