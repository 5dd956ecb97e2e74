from typing import Any, Callable, Protocol

from ..model.cells import Generation


class Executor(Protocol):
    """
    Runs a callable outside the caller's event loop.

    Arguments and results cross the boundary by value, so implementations
    may use threads or processes.
    """

    async def execute(self, func: Callable[..., Any], *args: Any) -> Any: ...

    def shutdown(self) -> None: ...


class Seeder(Protocol):
    def __call__(self) -> Generation: ...
