from typing import Optional, Tuple


class VoxlifeError(Exception):
    """Base class for all errors raised by voxlife."""

    pass


class InvariantViolation(VoxlifeError):
    """
    Raised when a generation does not cover its region exactly once.

    A duplicated coordinate would silently shadow a cell in the index, so
    such generations are rejected before any computation is scheduled.
    """

    def __init__(self, reason: str, coordinate: Optional[Tuple[int, int, int]] = None):
        self.reason = reason
        self.coordinate = coordinate
        message = reason if coordinate is None else f"{reason}: {tuple(coordinate)}"
        super().__init__(message)


class ComputationFault(VoxlifeError):
    """Raised (or delivered) when the worker fails while computing a transition."""

    def __init__(self, request_id: int, cause: BaseException):
        self.request_id = request_id
        self.cause = cause
        super().__init__(
            f"Transition request {request_id} failed: {type(cause).__name__}: {cause}"
        )


class ConfigurationError(VoxlifeError):
    """Raised for invalid thresholds, extents or simulation settings."""

    pass
