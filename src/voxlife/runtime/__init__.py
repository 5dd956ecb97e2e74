from .bus import MessageBus
from .correlator import TransitionCorrelator, TransitionRequest, TransitionResponse
from .subscribers import HumanReadableLogSubscriber

__all__ = [
    "HumanReadableLogSubscriber",
    "MessageBus",
    "TransitionCorrelator",
    "TransitionRequest",
    "TransitionResponse",
]
