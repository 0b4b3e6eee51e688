import logging

from listsched.core import Placement, TaskIndex
from listsched.graph import TaskGraph
from listsched.processor import Timeline, make_pool
from listsched.ranks import downward_rank, priority_order, upward_rank
from listsched.schedulers.base import AssignmentResult, Scheduler

logger = logging.getLogger(__name__)


class CPOPScheduler(Scheduler):
    """Critical path list scheduling

    Tasks are prioritised by upward plus downward rank. A candidate finish time is the
    processor's highest recorded finish time plus the task's upward rank and execution
    time, recorded at the task's own slot of the chosen processor. Every task is placed.
    """

    name = "cpop"

    def schedule(self, graph: TaskGraph, processor_count: int) -> AssignmentResult:
        pool = make_pool(Timeline.slotted, processor_count, len(graph))
        upward = upward_rank(graph)
        downward = downward_rank(graph)
        priority = [u + d for u, d in zip(upward, downward)]
        placements: dict[TaskIndex, Placement] = {}

        for i in priority_order(priority):
            task = graph[i]
            finish_times = [p.load() + upward[i] + task.execution_time for p in pool]
            best = finish_times.index(min(finish_times))
            pool[best].commit(i, finish_times[best], task.execution_time)
            placements[i] = Placement(best, finish_times[best])
            logger.debug(f"task {task.id} (priority {priority[i]}) on processor {best} finishing at {finish_times[best]}")

        return AssignmentResult(self.name, placements, pool)
