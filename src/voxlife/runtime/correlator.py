import asyncio
import itertools
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ..adapters.executors.local import LocalExecutor
from ..engine.rules import DEFAULT_RULE, LifeRule
from ..engine.transition import transition
from ..exceptions import ComputationFault
from ..model.cells import Generation
from ..model.validation import validate_generation
from .bus import MessageBus
from .events import (
    CallbackFailed,
    TransitionCompleted,
    TransitionFailed,
    TransitionRequested,
)
from .protocols import Executor


@dataclass(frozen=True)
class TransitionRequest:
    request_id: int
    generation: Generation


@dataclass(frozen=True)
class TransitionResponse:
    request_id: int
    generation: Generation


ResultCallback = Callable[[TransitionResponse], None]
FailureCallback = Callable[[ComputationFault], None]


def notify_listeners(
    bus: MessageBus,
    listeners: Sequence[Callable[[Any], None]],
    payload: Any,
    request_id: int,
    run_id: Optional[str] = None,
) -> None:
    """
    Calls every listener with `payload`. A listener that raises is reported
    as a `CallbackFailed` event and does not keep the others from running.
    """
    for listener in list(listeners):
        try:
            listener(payload)
        except Exception as e:
            bus.publish(
                CallbackFailed(
                    run_id=run_id,
                    request_id=request_id,
                    callback=getattr(listener, "__qualname__", repr(listener)),
                    error=f"{type(e).__name__}: {e}",
                )
            )


class TransitionCorrelator:
    """
    Runs transitions off the caller's event loop and tags every result with
    the id of the request that produced it.

    Request ids come from a monotonic counter owned by the correlator.
    There is no cancellation: every scheduled computation is delivered to
    the result (or failure) callbacks exactly once, and callers drop the
    responses whose id no longer matches their latest interest.
    """

    def __init__(
        self,
        executor: Optional[Executor] = None,
        rule: LifeRule = DEFAULT_RULE,
        bus: Optional[MessageBus] = None,
    ):
        self.executor = executor or LocalExecutor()
        self.rule = rule
        self.bus = bus or MessageBus()
        self._ids = itertools.count(1)
        self._latest_request_id: Optional[int] = None
        self._in_flight: Dict[int, asyncio.Task] = {}
        self._result_callbacks: List[ResultCallback] = []
        self._failure_callbacks: List[FailureCallback] = []

    @property
    def latest_request_id(self) -> Optional[int]:
        return self._latest_request_id

    @property
    def outstanding(self) -> Tuple[int, ...]:
        return tuple(sorted(self._in_flight))

    def is_latest(self, request_id: int) -> bool:
        return request_id == self._latest_request_id

    def on_result(self, callback: ResultCallback):
        self._result_callbacks.append(callback)

    def on_failure(self, callback: FailureCallback):
        self._failure_callbacks.append(callback)

    def submit(self, generation: Generation) -> int:
        """
        Schedules a transition of `generation` and returns its request id
        without waiting for the computation.

        Must be called from a running event loop.

        Raises:
            InvariantViolation: if the generation does not cover its region
                exactly once. Nothing is scheduled in that case.
        """
        validate_generation(generation)

        request = TransitionRequest(request_id=next(self._ids), generation=generation)
        self._latest_request_id = request.request_id

        task = asyncio.get_running_loop().create_task(self._compute(request))
        self._in_flight[request.request_id] = task
        self.bus.publish(
            TransitionRequested(request_id=request.request_id, cell_count=len(generation))
        )
        return request.request_id

    async def _compute(self, request: TransitionRequest) -> None:
        start_time = time.time()
        try:
            try:
                result = await self.executor.execute(
                    transition, request.generation, self.rule
                )
            except Exception as e:
                fault = ComputationFault(request.request_id, e)
                self.bus.publish(
                    TransitionFailed(
                        request_id=request.request_id,
                        duration=time.time() - start_time,
                        error=f"{type(e).__name__}: {e}",
                    )
                )
                notify_listeners(
                    self.bus, self._failure_callbacks, fault, request.request_id
                )
                return

            response = TransitionResponse(request_id=request.request_id, generation=result)
            self.bus.publish(
                TransitionCompleted(
                    request_id=request.request_id,
                    duration=time.time() - start_time,
                    alive_count=result.alive_count,
                )
            )
            notify_listeners(self.bus, self._result_callbacks, response, request.request_id)
        finally:
            # A request stays in flight until every listener has seen it.
            self._in_flight.pop(request.request_id, None)

    async def wait_for(self, request_id: int) -> None:
        """Waits until the given request has been delivered, if it is still in flight."""
        task = self._in_flight.get(request_id)
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    async def drain(self) -> None:
        """Waits until every scheduled computation has been delivered."""
        while self._in_flight:
            await asyncio.gather(*list(self._in_flight.values()), return_exceptions=True)

    async def close(self) -> None:
        await self.drain()
        self.executor.shutdown()
