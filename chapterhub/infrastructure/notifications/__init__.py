"""Push delivery and background dispatch helpers for the infrastructure layer."""

from .push import ExpoPushClient
from .scheduler import DISPATCH_JOB_ID, run_scheduled_sweep, start_dispatch_scheduler

__all__ = [
    "DISPATCH_JOB_ID",
    "ExpoPushClient",
    "run_scheduled_sweep",
    "start_dispatch_scheduler",
]
