"""
cyclekit – recurring async job scheduler.

Import path convention::

    from cyclekit.cycle import Job, prepare, run, sequence
    from cyclekit.cycle import PreviousExecutionNotCompleteError, JobTimeoutError
    from cyclekit.config.settings import EnvSettingsLoader
    from cyclekit.observability.logging import configure_logging, get_logger
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
