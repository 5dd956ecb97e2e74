import asyncio
import time
from dataclasses import dataclass
from typing import Callable, List, Optional
from uuid import uuid4

from .exceptions import ComputationFault
from .model.cells import Generation
from .model.diff import GenerationDiff, diff_generations
from .runtime.bus import MessageBus
from .runtime.correlator import (
    TransitionCorrelator,
    TransitionResponse,
    notify_listeners,
)
from .runtime.events import (
    GenerationAdopted,
    Reseeded,
    RunFinished,
    RunStarted,
    StaleResultDiscarded,
)
from .runtime.protocols import Seeder


@dataclass(frozen=True)
class GenerationUpdate:
    generation: int
    previous: Generation
    current: Generation
    diff: GenerationDiff


UpdateListener = Callable[[GenerationUpdate], None]
FaultListener = Callable[[ComputationFault], None]


class SimulationDriver:
    """
    The caller side of the simulation: owns the current generation and
    decides which transition results to adopt.

    The driver remembers the id of the one request it is currently
    interested in. A response carrying any other id was superseded (by a
    reset or a newer request) and is dropped without touching state.
    """

    def __init__(
        self,
        correlator: TransitionCorrelator,
        seeder: Seeder,
        tick_interval: float = 1 / 60,
        bus: Optional[MessageBus] = None,
    ):
        self.correlator = correlator
        self.seeder = seeder
        self.tick_interval = tick_interval
        self.bus = bus or correlator.bus
        self.run_id: Optional[str] = None
        self.generation = 0
        self._interest: Optional[int] = None
        self._update_listeners: List[UpdateListener] = []
        self._fault_listeners: List[FaultListener] = []

        correlator.on_result(self._on_result)
        correlator.on_failure(self._on_fault)

        self.current = self._reseed("Start")

    @property
    def current_request_id(self) -> Optional[int]:
        return self._interest

    @property
    def awaiting_result(self) -> bool:
        return self._interest is not None

    def on_update(self, listener: UpdateListener):
        self._update_listeners.append(listener)

    def on_fault(self, listener: FaultListener):
        self._fault_listeners.append(listener)

    def request_transition(self) -> int:
        """Submits the current generation, superseding any outstanding request."""
        self._interest = self.correlator.submit(self.current)
        return self._interest

    def tick(self) -> Optional[int]:
        """
        One step of the caller loop. Keeps at most one request outstanding
        and reseeds a lattice that has died out.
        """
        if self._interest is not None:
            return None
        if self.current.is_extinct:
            self.current = self._reseed("Extinct")
            return None
        return self.request_transition()

    def reset(self):
        """Drops any outstanding interest and starts over from a fresh seed."""
        self._interest = None
        self.current = self._reseed("Reset")

    def _reseed(self, reason: str) -> Generation:
        generation = self.seeder()
        self.generation = 0
        self.bus.publish(
            Reseeded(run_id=self.run_id, reason=reason, alive_count=generation.alive_count)
        )
        return generation

    def _on_result(self, response: TransitionResponse):
        if response.request_id != self._interest:
            self.bus.publish(
                StaleResultDiscarded(
                    run_id=self.run_id,
                    request_id=response.request_id,
                    latest_request_id=self._interest,
                )
            )
            return

        previous = self.current
        diff = diff_generations(previous, response.generation)
        self.current = response.generation
        self._interest = None
        self.generation += 1

        self.bus.publish(
            GenerationAdopted(
                run_id=self.run_id,
                request_id=response.request_id,
                generation=self.generation,
                alive_count=self.current.alive_count,
                born=len(diff.born),
                died=len(diff.died),
            )
        )
        update = GenerationUpdate(
            generation=self.generation, previous=previous, current=self.current, diff=diff
        )
        notify_listeners(
            self.bus, self._update_listeners, update, response.request_id, self.run_id
        )

    def _on_fault(self, fault: ComputationFault):
        if fault.request_id != self._interest:
            return
        # Retry or reseed is up to the listeners; the next tick resubmits
        # the unchanged current generation otherwise.
        self._interest = None
        notify_listeners(
            self.bus, self._fault_listeners, fault, fault.request_id, self.run_id
        )

    async def run(
        self, max_generations: Optional[int] = None, duration: Optional[float] = None
    ) -> int:
        """
        Ticks until `max_generations` generations were adopted or `duration`
        seconds elapsed. Returns the number of adopted generations.
        """
        self.run_id = str(uuid4())
        start_time = time.time()
        adopted = 0

        def count(update: GenerationUpdate):
            nonlocal adopted
            adopted += 1

        self.on_update(count)
        self.bus.publish(
            RunStarted(
                run_id=self.run_id,
                extents=tuple(self.current.extents),
                lower=self.correlator.rule.lower,
                upper=self.correlator.rule.upper,
            )
        )
        try:
            while True:
                if max_generations is not None and adopted >= max_generations:
                    break
                if duration is not None and time.time() - start_time >= duration:
                    break
                self.tick()
                await asyncio.sleep(self.tick_interval)
        finally:
            # Results still in flight are adopted while draining and count
            # towards this run.
            await self.correlator.drain()
            self._update_listeners.remove(count)
            self.bus.publish(
                RunFinished(
                    run_id=self.run_id, generations=adopted, duration=time.time() - start_time
                )
            )
        return adopted
