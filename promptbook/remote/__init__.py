"""Wire contracts for remote prompt execution."""

from .interfaces import RemoteExecutionRequest

__all__ = ["RemoteExecutionRequest"]
