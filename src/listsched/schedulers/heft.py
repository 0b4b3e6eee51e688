import logging

from listsched.core import Placement, TaskIndex
from listsched.graph import TaskGraph
from listsched.processor import Timeline, make_pool
from listsched.ranks import priority_order, upward_rank
from listsched.schedulers.base import AssignmentResult, Scheduler

logger = logging.getLogger(__name__)


class HEFTScheduler(Scheduler):
    """Earliest finish time list scheduling, prioritised by upward rank

    The upward rank of a task doubles as its earliest start estimate, in place of the
    finish times of its actually placed predecessors. Every task is placed.
    """

    name = "heft"

    def schedule(self, graph: TaskGraph, processor_count: int) -> AssignmentResult:
        pool = make_pool(Timeline.scalar, processor_count, len(graph))
        upward = upward_rank(graph)
        placements: dict[TaskIndex, Placement] = {}

        for i in priority_order(upward):
            task = graph[i]
            finish_times = [max(p.load(), upward[i]) + task.execution_time for p in pool]
            best = finish_times.index(min(finish_times))
            pool[best].commit(i, finish_times[best], task.execution_time)
            placements[i] = Placement(best, finish_times[best])
            logger.debug(f"task {task.id} (rank {upward[i]}) on processor {best} finishing at {finish_times[best]}")

        return AssignmentResult(self.name, placements, pool)
