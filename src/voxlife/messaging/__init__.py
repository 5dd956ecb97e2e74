from .bus import MessageBus, MessageStore, bus

__all__ = ["MessageBus", "MessageStore", "bus"]
