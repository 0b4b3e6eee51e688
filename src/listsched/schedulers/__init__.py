"""
List scheduling policies. Each maps a TaskGraph onto a fresh pool of processors:
 - d_edf: deadline ordered with a one-way fallback to deadline monotonic, may drop tasks
 - heft: upward rank priority, earliest finish time processor
 - cpop: upward plus downward rank priority, earliest finish time processor
"""

from listsched.schedulers.base import AssignmentResult, Scheduler
from listsched.schedulers.cpop import CPOPScheduler
from listsched.schedulers.deadline import DeadlineAdaptiveResult, DeadlineAdaptiveScheduler, Mode
from listsched.schedulers.heft import HEFTScheduler

SCHEDULERS: dict[str, type[Scheduler]] = {
    DeadlineAdaptiveScheduler.name: DeadlineAdaptiveScheduler,
    HEFTScheduler.name: HEFTScheduler,
    CPOPScheduler.name: CPOPScheduler,
}


class UnknownScheduler(KeyError):
    pass


def get_scheduler(name: str) -> Scheduler:
    try:
        return SCHEDULERS[name]()
    except KeyError:
        raise UnknownScheduler(f"{name!r}, expected one of {sorted(SCHEDULERS)}") from None


__all__ = [
    "AssignmentResult",
    "CPOPScheduler",
    "DeadlineAdaptiveResult",
    "DeadlineAdaptiveScheduler",
    "HEFTScheduler",
    "Mode",
    "SCHEDULERS",
    "Scheduler",
    "UnknownScheduler",
    "get_scheduler",
]
