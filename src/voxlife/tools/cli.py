import asyncio
import time
from dataclasses import replace
from enum import Enum
from typing import Any, Dict, Optional

import numpy as np
import typer

from voxlife.adapters.executors.local import LocalExecutor
from voxlife.config import SimulationConfig, load_config
from voxlife.driver import SimulationDriver
from voxlife.engine.transition import transition
from voxlife.exceptions import ConfigurationError
from voxlife.messaging.bus import bus
from voxlife.messaging.renderer import CliRenderer, JsonRenderer
from voxlife.model.cells import Extents
from voxlife.runtime.bus import MessageBus
from voxlife.runtime.correlator import TransitionCorrelator
from voxlife.runtime.subscribers import HumanReadableLogSubscriber
from voxlife.seeding import random_generation
from voxlife.truth.validator import ReferenceVerifier

app = typer.Typer(help="Run and benchmark the 3D Game of Life engine.")


class ExecutorChoice(str, Enum):
    thread = "thread"
    process = "process"


class LogFormat(str, Enum):
    cli = "cli"
    json = "json"


def _build_config(
    config_path: Optional[str],
    overrides: Dict[str, Any],
) -> SimulationConfig:
    config = load_config(config_path) if config_path else SimulationConfig()
    if config_path:
        bus.info("cli.config_loaded", path=config_path)
    changes = {k: v for k, v in overrides.items() if v is not None}
    return replace(config, **changes)


def _setup_renderer(config: SimulationConfig):
    if config.log_format == "json":
        bus.set_renderer(JsonRenderer(min_level=config.log_level))
    else:
        bus.set_renderer(CliRenderer(store=bus.store, min_level=config.log_level))


async def _run_simulation(
    config: SimulationConfig,
    generations: Optional[int],
    duration: Optional[float],
    verify: bool,
) -> int:
    """Core logic for a headless simulation run."""
    event_bus = MessageBus()
    HumanReadableLogSubscriber(event_bus)

    executor = LocalExecutor(mode=config.executor, max_workers=config.max_workers)
    correlator = TransitionCorrelator(executor=executor, rule=config.rule, bus=event_bus)
    rng = np.random.default_rng()

    def seeder():
        return random_generation(
            config.extents, radius=config.seed_radius, density=config.seed_density, rng=rng
        )

    driver = SimulationDriver(
        correlator, seeder, tick_interval=config.tick_interval, bus=event_bus
    )
    if verify:
        driver.on_update(ReferenceVerifier(event_bus, config.rule))

    try:
        return await driver.run(max_generations=generations, duration=duration)
    finally:
        await correlator.close()


@app.command()
def run(
    config_path: str = typer.Option(
        None, "--config", "-c", help="Path to a YAML simulation config."
    ),
    size: int = typer.Option(
        None, "--size", help="Edge length of the cubic lattice (overrides config)."
    ),
    lower: int = typer.Option(None, "--lower", help="Lower survival threshold."),
    upper: int = typer.Option(
        None, "--upper", help="Upper survival threshold, also the birth count."
    ),
    executor: ExecutorChoice = typer.Option(
        None, "--executor", help="Worker context used for transitions."
    ),
    log_format: LogFormat = typer.Option(None, "--log-format", help="Log output format."),
    log_level: str = typer.Option(None, "--log-level", help="Minimum log level."),
    generations: int = typer.Option(
        None, "--generations", "-n", help="Stop after this many adopted generations."
    ),
    duration: float = typer.Option(
        None, "--duration", help="Stop after this many seconds."
    ),
    verify: bool = typer.Option(
        False, "--verify", help="Cross-check every generation with the dense reference."
    ),
):
    """
    Run the simulation headlessly.
    """
    if generations is None and duration is None:
        generations = 10

    try:
        config = _build_config(
            config_path,
            {
                "extents": Extents(size, size, size) if size is not None else None,
                "lower": lower,
                "upper": upper,
                "executor": executor.value if executor else None,
                "log_format": log_format.value if log_format else None,
                "log_level": log_level,
            },
        )
    except ConfigurationError as e:
        bus.error("cli.config_error", error=e)
        raise typer.Exit(code=1)

    _setup_renderer(config)
    try:
        asyncio.run(
            _run_simulation(
                config=config, generations=generations, duration=duration, verify=verify
            )
        )
    except KeyboardInterrupt:
        bus.info("cli.shutdown")


@app.command()
def bench(
    size: int = typer.Option(20, "--size", min=1, help="Edge length of the cubic lattice."),
    iterations: int = typer.Option(
        5, "--iterations", "-i", min=1, help="Number of transitions."
    ),
    density: float = typer.Option(0.2, "--density", help="Share of cells seeded alive."),
):
    """
    Time the transition of a randomly seeded lattice.
    """
    extents = Extents(size, size, size)
    # Seed the whole lattice so every neighbourhood lookup does real work.
    generation = random_generation(extents, radius=float(size), density=density)

    bus.info("bench.started", iterations=iterations, extents=extents)
    timings = []
    for _ in range(iterations):
        start = time.perf_counter()
        generation = transition(generation)
        timings.append(time.perf_counter() - start)

    bus.info(
        "bench.result",
        mean=sum(timings) / len(timings),
        best=min(timings),
        worst=max(timings),
    )


def main():
    bus.set_renderer(CliRenderer(store=bus.store))
    app()


if __name__ == "__main__":
    main()
