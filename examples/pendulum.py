from physics_lab.core import energy_drift, estimate_period
from physics_lab.formulas import mechanics
from physics_lab.simulations import PendulumMotion

L, g = 1.0, 9.81
sim = PendulumMotion({"length": L, "gravity": g, "initialAngle": 8.0, "dampingFactor": 0.0},
                     max_data_points=5000)
sim.play()
for _ in range(4000):
    sim.step(0.002)

t = sim.data.column("time")
theta = sim.data.column("angle")
print("period", estimate_period(t, theta), "small-angle", mechanics.pendulum_period(L, g))
print("energy drift", energy_drift(sim.data.column("total_energy")))
print("bob position:", sim.bob_position)
