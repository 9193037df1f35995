# MIT License (see LICENSE)
"""
Navigation catalog: physics units, their topics and simulation pages.

Each SimulationInfo carries the route the site serves it under. Entries
without a registered implementation are planned pages and are filtered out
by available_simulations().
"""
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class SimulationInfo:
    id: str
    name: str
    description: str
    unit_id: str
    topic_id: str
    path: str


@dataclass(frozen=True)
class PhysicsTopic:
    id: str
    name: str
    description: str
    simulations: tuple[SimulationInfo, ...] = ()


@dataclass(frozen=True)
class PhysicsUnit:
    id: str
    name: str
    description: str
    topics: tuple[PhysicsTopic, ...] = ()


def _sim(sim_id: str, name: str, description: str, unit_id: str, topic_id: str, path: str | None = None) -> SimulationInfo:
    return SimulationInfo(
        id=sim_id,
        name=name,
        description=description,
        unit_id=unit_id,
        topic_id=topic_id,
        path=path or f"/{unit_id}/{topic_id}/{sim_id}",
    )


UNITS: tuple[PhysicsUnit, ...] = (
    PhysicsUnit("mechanics", "Mechanics", "Motion of bodies and the forces that cause it.", (
        PhysicsTopic("kinematics", "Kinematics", "Describing motion by position, velocity and acceleration.", (
            _sim("uniform-motion", "Uniform and Uniformly Accelerated Motion",
                 "Watch a body move at constant velocity or constant acceleration.",
                 "mechanics", "kinematics"),
            _sim("projectile-motion", "Projectile Motion",
                 "Simulate the parabolic flight of an obliquely launched body.",
                 "mechanics", "kinematics"),
        )),
        PhysicsTopic("energy", "Mechanical Energy", "Exchange between kinetic and potential energy.", (
            _sim("inclined-plane", "Motion on an Inclined Plane",
                 "Energy conversion of a body sliding down a slope.",
                 "mechanics", "energy"),
            _sim("spring-oscillation", "Spring Oscillation",
                 "Oscillation and energy exchange of a mass on a spring.",
                 "mechanics", "energy"),
        )),
        PhysicsTopic("circular-motion", "Circular Motion and Oscillation",
                     "Properties of circular motion and simple harmonic motion.", (
            _sim("pendulum-motion", "Simple Pendulum",
                 "Swing of a pendulum under gravity, with optional damping.",
                 "mechanics", "circular-motion", "/mechanics/oscillation/pendulum-motion"),
            _sim("circular-motion", "Circular Motion",
                 "Uniform circular motion and centripetal force.",
                 "mechanics", "circular-motion"),
        )),
    )),
    PhysicsUnit("thermodynamics", "Thermodynamics", "Heat, matter and energy conversion.", (
        PhysicsTopic("kinetic-theory", "Kinetic Theory of Gases", "Molecular motion and gas laws.", (
            _sim("gas-molecules", "Gas Molecules",
                 "Relate temperature, pressure and volume through molecular motion.",
                 "thermodynamics", "kinetic-theory"),
        )),
        PhysicsTopic("processes", "Thermodynamic Processes",
                     "Isothermal, isobaric, isochoric and adiabatic processes.", (
            _sim("thermodynamic-processes", "Thermodynamic Processes",
                 "State changes of a gas along standard processes.",
                 "thermodynamics", "processes"),
        )),
        PhysicsTopic("heat-transfer", "Heat Transfer", "Conduction, convection and radiation.", (
            _sim("heat-conduction", "Heat Conduction",
                 "Heat flow between different materials.",
                 "thermodynamics", "heat-transfer"),
        )),
    )),
    PhysicsUnit("waves", "Waves", "Properties and propagation of waves.", (
        PhysicsTopic("wave-basics", "Wave Basics", "Fundamental properties of waves.", (
            _sim("wave-types", "Transverse and Longitudinal Waves",
                 "Compare transverse and longitudinal waves.",
                 "waves", "wave-basics"),
            _sim("wave-superposition", "Superposition",
                 "Superposition and interference of waves.",
                 "waves", "wave-basics"),
        )),
        PhysicsTopic("sound-waves", "Sound", "Sound waves and acoustic phenomena.", (
            _sim("doppler-effect", "Doppler Effect",
                 "Frequency shift from a moving source or observer.",
                 "waves", "sound-waves"),
            _sim("musical-instruments", "Instruments and Harmonics",
                 "Vibration modes of strings and pipes.",
                 "waves", "sound-waves"),
        )),
        PhysicsTopic("light-waves", "Light", "Wave phenomena of light.", (
            _sim("light-phenomena", "Reflection, Refraction, Diffraction, Interference",
                 "Optical phenomena of light waves.",
                 "waves", "light-waves"),
        )),
    )),
    PhysicsUnit("electromagnetism", "Electromagnetism and Atoms",
                "Electricity, magnetism and atomic physics.", (
        PhysicsTopic("electrostatics", "Electrostatics", "Fields of charges at rest.", (
            _sim("point-charges", "Point Charges",
                 "Electric field and potential of point charges.",
                 "electromagnetism", "electrostatics"),
        )),
        PhysicsTopic("magnetism", "Currents and Magnetic Fields", "Magnetic fields of currents.", (
            _sim("current-magnetic-field", "Magnetic Field of a Current",
                 "Fields produced by currents of various shapes.",
                 "electromagnetism", "magnetism"),
            _sim("electromagnetic-induction", "Electromagnetic Induction",
                 "EMF induced by a changing magnetic flux.",
                 "electromagnetism", "magnetism"),
        )),
        PhysicsTopic("atomic-physics", "Atomic Physics", "Atomic structure and quantum phenomena.", (
            _sim("bohr-model", "Bohr Model",
                 "Electron energy levels and transitions.",
                 "electromagnetism", "atomic-physics"),
            _sim("photoelectric-effect", "Photoelectric Effect",
                 "Emission of electrons by light.",
                 "electromagnetism", "atomic-physics"),
        )),
    )),
)


def iter_simulations():
    """Yield every SimulationInfo in catalog order."""
    for unit in UNITS:
        for topic in unit.topics:
            yield from topic.simulations


def find_simulation(sim_id: str) -> SimulationInfo | None:
    for info in iter_simulations():
        if info.id == sim_id:
            return info
    return None


def route_for(sim_id: str) -> str:
    """
    Page route of a simulation.

    Raises:
        ValueError: If the id is not in the catalog.
    """
    info = find_simulation(sim_id)
    if info is None:
        raise ValueError(f"Unknown simulation: {sim_id!r}")
    return info.path


def available_simulations() -> list[SimulationInfo]:
    """Catalog entries that have a runnable implementation."""
    from .simulations.registry import SIMULATIONS

    return [info for info in iter_simulations() if info.id in SIMULATIONS]
