"""Kernel – framework-agnostic building blocks shared by every layer."""

from cyclekit.kernel.errors import ApplicationError, BaseError, TimeoutError

__all__ = [
    "ApplicationError",
    "BaseError",
    "TimeoutError",
]
