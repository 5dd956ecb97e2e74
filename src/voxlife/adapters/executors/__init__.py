from .local import EXECUTOR_MODES, LocalExecutor

__all__ = ["EXECUTOR_MODES", "LocalExecutor"]
