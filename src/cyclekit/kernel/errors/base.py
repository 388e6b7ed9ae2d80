"""Root error class for the cyclekit error hierarchy."""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Every error renders to one flat payload::

        {"code": ..., "message": ..., "detail": {...}, <context>, "cause": ...}

    Subclasses add their own attributes to the payload by extending
    :meth:`context` rather than overriding :meth:`to_dict`; cycle errors
    contribute ``job_name`` and ``status``, timeouts contribute ``timeout``.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Free-form extra context supplied by the raiser.
        cause: Exception that triggered this one; also set as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def context(self) -> dict[str, Any]:
        """Typed fields of this error class, merged into :meth:`to_dict`."""
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Flat, JSON-safe payload used by log events and health details."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
            **self.context(),
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]
