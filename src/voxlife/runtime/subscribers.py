from .bus import MessageBus
from ..messaging.bus import bus as messaging_bus
from .events import (
    CallbackFailed,
    GenerationAdopted,
    Reseeded,
    RunFinished,
    RunStarted,
    StaleResultDiscarded,
    TransitionCompleted,
    TransitionFailed,
    TransitionRequested,
    VerificationMismatch,
)


class HumanReadableLogSubscriber:
    """
    Listens to runtime events and translates them into semantic messages
    on the messaging bus. It acts as a bridge between the event domain
    and the user-facing message domain.
    """

    def __init__(self, event_bus: MessageBus):
        event_bus.subscribe(RunStarted, self.on_run_started)
        event_bus.subscribe(RunFinished, self.on_run_finished)
        event_bus.subscribe(TransitionRequested, self.on_transition_requested)
        event_bus.subscribe(TransitionCompleted, self.on_transition_completed)
        event_bus.subscribe(TransitionFailed, self.on_transition_failed)
        event_bus.subscribe(StaleResultDiscarded, self.on_stale_result)
        event_bus.subscribe(GenerationAdopted, self.on_generation_adopted)
        event_bus.subscribe(Reseeded, self.on_reseeded)
        event_bus.subscribe(VerificationMismatch, self.on_verification_mismatch)
        event_bus.subscribe(CallbackFailed, self.on_callback_failed)

    def on_run_started(self, event: RunStarted):
        messaging_bus.info(
            "run.started", extents=event.extents, lower=event.lower, upper=event.upper
        )

    def on_run_finished(self, event: RunFinished):
        messaging_bus.info(
            "run.finished", generations=event.generations, duration=event.duration
        )

    def on_transition_requested(self, event: TransitionRequested):
        messaging_bus.debug(
            "transition.requested", request_id=event.request_id, cell_count=event.cell_count
        )

    def on_transition_completed(self, event: TransitionCompleted):
        messaging_bus.debug(
            "transition.completed",
            request_id=event.request_id,
            duration=event.duration,
            alive_count=event.alive_count,
        )

    def on_transition_failed(self, event: TransitionFailed):
        messaging_bus.error(
            "transition.failed",
            request_id=event.request_id,
            duration=event.duration,
            error=event.error,
        )

    def on_stale_result(self, event: StaleResultDiscarded):
        # Stale results are routine when requests overlap.
        messaging_bus.debug(
            "transition.stale",
            request_id=event.request_id,
            latest_request_id=event.latest_request_id,
        )

    def on_generation_adopted(self, event: GenerationAdopted):
        messaging_bus.info(
            "generation.adopted",
            generation=event.generation,
            alive_count=event.alive_count,
            born=event.born,
            died=event.died,
        )

    def on_reseeded(self, event: Reseeded):
        messaging_bus.info("seed.created", reason=event.reason, alive_count=event.alive_count)

    def on_verification_mismatch(self, event: VerificationMismatch):
        messaging_bus.warning(
            "verify.mismatch",
            generation=event.generation,
            mismatched_cells=event.mismatched_cells,
        )

    def on_callback_failed(self, event: CallbackFailed):
        messaging_bus.error(
            "callback.failed",
            request_id=event.request_id,
            callback=event.callback,
            error=event.error,
        )
