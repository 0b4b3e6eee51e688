"""
Offline list scheduling of dependent tasks onto a fixed pool of processors.

Modules:
 - core, graph: task records and the validated, topologically ordered TaskGraph
 - ranks: upward and downward rank propagation
 - processor: simulated processor timelines
 - schedulers: the deadline adaptive, HEFT and CPOP policies
 - generator, metrics, experiment: task set generation, evaluation and reporting
"""

from listsched.core import MalformedGraph, NoProcessorsAvailable, Placement, Task
from listsched.graph import TaskGraph
from listsched.version import __version__

__all__ = [
    "MalformedGraph",
    "NoProcessorsAvailable",
    "Placement",
    "Task",
    "TaskGraph",
    "__version__",
]
