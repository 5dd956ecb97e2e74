from dataclasses import dataclass, field
from typing import Optional
import time
import itertools

# Fast, thread-safe counter for event IDs
_event_id_gen = itertools.count()


@dataclass(frozen=True)
class Event:
    event_id: str = field(default_factory=lambda: str(next(_event_id_gen)))
    timestamp: float = field(default_factory=time.time)

    # Injected by the driver for events that belong to a simulation run
    run_id: Optional[str] = None


@dataclass(frozen=True)
class RunStarted(Event):
    extents: tuple = ()
    lower: int = 0
    upper: int = 0


@dataclass(frozen=True)
class RunFinished(Event):
    generations: int = 0
    duration: float = 0.0


@dataclass(frozen=True)
class TransitionEvent(Event):
    request_id: int = 0


@dataclass(frozen=True)
class TransitionRequested(TransitionEvent):
    cell_count: int = 0


@dataclass(frozen=True)
class TransitionCompleted(TransitionEvent):
    duration: float = 0.0
    alive_count: int = 0


@dataclass(frozen=True)
class TransitionFailed(TransitionEvent):
    duration: float = 0.0
    error: Optional[str] = None


@dataclass(frozen=True)
class StaleResultDiscarded(TransitionEvent):
    latest_request_id: Optional[int] = None


@dataclass(frozen=True)
class GenerationAdopted(TransitionEvent):
    generation: int = 0
    alive_count: int = 0
    born: int = 0
    died: int = 0


@dataclass(frozen=True)
class Reseeded(Event):
    reason: str = "Unknown"  # "Start", "Extinct", "Reset", "Fault"
    alive_count: int = 0


@dataclass(frozen=True)
class VerificationMismatch(Event):
    generation: int = 0
    mismatched_cells: int = 0


@dataclass(frozen=True)
class CallbackFailed(TransitionEvent):
    """A result, failure or update listener raised while being notified."""

    callback: str = ""
    error: Optional[str] = None
