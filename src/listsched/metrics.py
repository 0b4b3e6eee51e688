from dataclasses import dataclass

import numpy as np

from listsched.graph import TaskGraph
from listsched.processor import Processor
from listsched.schedulers.base import AssignmentResult


def makespan(processors: list[Processor]) -> int:
    return max((p.load() for p in processors), default=0)


def load_balancing(processors: list[Processor]) -> float:
    """Population standard deviation of per-processor busy time"""
    return float(np.std([p.busy_time for p in processors]))


@dataclass
class Metrics:
    scheduled: int
    task_count: int
    makespan: int
    efficiency: float  # nan for an empty graph
    speedup: float  # nan when nothing was placed
    load_balancing: float


def evaluate(graph: TaskGraph, result: AssignmentResult) -> Metrics:
    span = makespan(result.processors)
    return Metrics(
        scheduled=result.scheduled,
        task_count=len(graph),
        makespan=span,
        efficiency=result.scheduled / len(graph) if len(graph) else float("nan"),
        speedup=graph.total_work() / span if span else float("nan"),
        load_balancing=load_balancing(result.processors),
    )
