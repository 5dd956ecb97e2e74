import asyncio
import functools
from concurrent.futures import Executor as PoolExecutor
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from typing import Any, Callable, Optional

from voxlife.exceptions import ConfigurationError

EXECUTOR_MODES = ("thread", "process")


class LocalExecutor:
    """
    Runs transitions on a local worker pool.

    "thread" keeps everything in-process; generations are immutable so the
    worker and the caller never share mutable state. "process" pickles the
    request and the response across the process boundary.
    """

    def __init__(self, mode: str = "thread", max_workers: Optional[int] = None):
        if mode not in EXECUTOR_MODES:
            raise ConfigurationError(
                f"Unknown executor mode '{mode}', expected one of {EXECUTOR_MODES}"
            )
        self.mode = mode
        self._pool: PoolExecutor
        if mode == "process":
            self._pool = ProcessPoolExecutor(max_workers=max_workers)
        else:
            self._pool = ThreadPoolExecutor(
                max_workers=max_workers, thread_name_prefix="voxlife_compute"
            )

    async def execute(self, func: Callable[..., Any], *args: Any) -> Any:
        loop = asyncio.get_running_loop()
        # run_in_executor only forwards positional arguments.
        return await loop.run_in_executor(self._pool, functools.partial(func, *args))

    def shutdown(self) -> None:
        self._pool.shutdown(wait=False, cancel_futures=True)
