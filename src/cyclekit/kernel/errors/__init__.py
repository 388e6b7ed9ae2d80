"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError     (application.py)
        ├── TimeoutError
        ├── ConfigError      (cyclekit.config.validation)
        └── CycleError       (cyclekit.cycle.errors)
"""

from cyclekit.kernel.errors.application import ApplicationError, TimeoutError
from cyclekit.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
    "TimeoutError",
]
