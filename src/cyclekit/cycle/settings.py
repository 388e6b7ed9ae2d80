"""Cycle – CycleSettings and helpers applying them."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar, Iterable

from cyclekit.config.settings import EnvSettingsLoader, Settings
from cyclekit.config.validation import InvalidSettingValueError
from cyclekit.cycle.job import Job
from cyclekit.observability.logging import configure_logging

__all__ = ["CycleSettings", "apply_settings"]

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class CycleSettings(Settings):
    """Operator-facing settings, read from ``CYCLE_*`` environment variables.

    ``CYCLE_DISABLED_JOBS`` is a comma-separated list of job names that
    :func:`apply_settings` switches off.
    """

    _prefix: ClassVar[str] = "CYCLE"

    log_level: str = "INFO"
    json_logs: bool = True
    disabled_jobs: list[str] = dataclasses.field(default_factory=list)

    def _validate(self) -> None:
        level = self.log_level.upper()
        if level not in logging.getLevelNamesMapping():
            raise InvalidSettingValueError("CYCLE_LOG_LEVEL", self.log_level, "unknown log level")
        self.log_level = level

    @classmethod
    def from_env(cls) -> "CycleSettings":
        return EnvSettingsLoader().load(cls)

    def configure_logging(self) -> None:
        configure_logging(self)


def apply_settings(jobs: Iterable[Job], settings: CycleSettings) -> list[Job]:
    """Return *jobs* with those named in ``settings.disabled_jobs`` replaced by disabled copies."""
    disabled = set(settings.disabled_jobs)
    result: list[Job] = []
    for job in jobs:
        if job.name in disabled:
            disabled.discard(job.name)
            result.append(dataclasses.replace(job, enabled=False))
        else:
            result.append(job)
    if disabled:
        logger.warning("cycle.settings.unknown_disabled_jobs names=%s", sorted(disabled))
    return result
