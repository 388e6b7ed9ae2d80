"""Application-layer errors – failures raised while running use cases and jobs."""

from __future__ import annotations

from typing import Any

from cyclekit.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class TimeoutError(ApplicationError):  # noqa: A001
    """Operation did not finish within its allotted time.

    ``timeout`` is the limit that was exceeded, in seconds, when known.
    """

    default_code = "timeout"

    def __init__(
        self,
        message: str = "Operation timed out",
        *,
        timeout: float | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.timeout = timeout

    def context(self) -> dict[str, Any]:
        return {**super().context(), "timeout": self.timeout}


__all__ = [
    "ApplicationError",
    "TimeoutError",
]
