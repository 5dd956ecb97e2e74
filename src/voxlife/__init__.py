from typing import Optional

from .adapters.executors.local import LocalExecutor
from .config import SimulationConfig, load_config
from .driver import GenerationUpdate, SimulationDriver
from .engine import DEFAULT_RULE, LifeRule, build_index, should_live, transition
from .exceptions import (
    ComputationFault,
    ConfigurationError,
    InvariantViolation,
    VoxlifeError,
)
from .model import (
    Cell,
    Coordinate,
    Extents,
    Generation,
    GenerationDiff,
    MOORE_OFFSETS,
    cell_id,
    coordinate,
    diff_generations,
    make_cell,
    neighbors_of,
    parse_cell_id,
    validate_generation,
)
from .runtime import MessageBus, TransitionCorrelator, TransitionResponse
from .seeding import empty_generation, generation_from_alive, random_generation

__all__ = [
    "Cell",
    "ComputationFault",
    "ConfigurationError",
    "Coordinate",
    "DEFAULT_RULE",
    "Extents",
    "Generation",
    "GenerationDiff",
    "GenerationUpdate",
    "InvariantViolation",
    "LifeRule",
    "MOORE_OFFSETS",
    "MessageBus",
    "SimulationConfig",
    "SimulationDriver",
    "TransitionCorrelator",
    "TransitionResponse",
    "VoxlifeError",
    "build_index",
    "cell_id",
    "coordinate",
    "create_driver",
    "diff_generations",
    "empty_generation",
    "generation_from_alive",
    "load_config",
    "make_cell",
    "neighbors_of",
    "parse_cell_id",
    "random_generation",
    "should_live",
    "transition",
    "validate_generation",
]


def create_driver(
    config: Optional[SimulationConfig] = None, bus: Optional[MessageBus] = None
) -> SimulationDriver:
    """
    Wires a driver with a local executor and random seeding from a config.

    This is the primary entry point for embedding the simulation in a
    render loop: call `driver.tick()` once per frame and listen with
    `driver.on_update`.
    """
    config = config or SimulationConfig()
    correlator = TransitionCorrelator(
        executor=LocalExecutor(mode=config.executor, max_workers=config.max_workers),
        rule=config.rule,
        bus=bus or MessageBus(),
    )
    return SimulationDriver(
        correlator,
        lambda: random_generation(
            config.extents, radius=config.seed_radius, density=config.seed_density
        ),
        tick_interval=config.tick_interval,
    )
