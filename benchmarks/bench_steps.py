"""
Microbenchmark: time per frame for each simulation and history capacity.
Run:
  python benchmarks/bench_steps.py
"""
import time

from physics_lab.loop import FrameLoop
from physics_lab.profiler import Profiler
from physics_lab.renderer import NullRenderer
from physics_lab.simulations import SIMULATIONS


def run(sim_id: str, capacity: int, frames: int = 5000):
    prof = Profiler()
    sim = SIMULATIONS[sim_id](max_data_points=capacity)
    loop = FrameLoop(sim, renderer=NullRenderer(), profiler=prof)
    sim.play()

    # warmup
    for i in range(30):
        loop.tick(i * 1e-4)
    loop.reset()

    t0 = time.perf_counter()
    for i in range(frames + 1):
        loop.tick(i * 1e-4)  # tiny frames keep the projectile airborne
    t1 = time.perf_counter()

    per_frame = (t1 - t0) / frames
    return per_frame, prof.stats.summary()


if __name__ == "__main__":
    for sim_id in SIMULATIONS:
        for capacity in [100, 500, 5000]:
            per_frame, summary = run(sim_id, capacity)
            print(f"{sim_id:<18} cap={capacity:5d}  frame={1e6*per_frame:8.2f} us  frames/s={1/per_frame:10.1f}")
            for k in ["step", "render"]:
                if k in summary:
                    print(" ", k, summary[k])
        print()
