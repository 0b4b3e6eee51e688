"""
Deadline driven scheduling with a one-way fallback.

Tasks are sorted once by deadline and visited in that order. In the adaptive mode a task is
accepted only if the earliest available processor frees up by the task's deadline, otherwise
it is dropped. A run of consecutive drops switches the scheduler into deadline monotonic mode
for the rest of the run, where every task is accepted onto the earliest available processor.

As the order is fixed upfront, the adaptive mode is a static deadline priority rather than a
dynamically re-evaluated EDF ready queue.
"""

import logging
from enum import Enum
from typing import Optional

from listsched.core import Placement, TaskIndex
from listsched.graph import TaskGraph
from listsched.processor import Processor, Timeline, earliest, make_pool
from listsched.schedulers.base import AssignmentResult, Scheduler

logger = logging.getLogger(__name__)


class Mode(str, Enum):
    adaptive = "adaptive"
    deadline_monotonic = "deadline_monotonic"


class DeadlineAdaptiveResult(AssignmentResult):
    def __init__(
        self,
        scheduler: str,
        placements: dict[TaskIndex, Placement],
        processors: list[Processor],
        mode: Mode,
        switched_at: Optional[TaskIndex],
        dropped: list[TaskIndex],
    ):
        super().__init__(scheduler, placements, processors)
        self.mode = mode
        self.switched_at = switched_at
        self.dropped = dropped


class DeadlineAdaptiveScheduler(Scheduler):
    name = "d_edf"

    def __init__(self, miss_threshold: int = 2):
        if miss_threshold < 1:
            raise ValueError(f"miss_threshold must be positive, got {miss_threshold}")
        self.miss_threshold = miss_threshold

    def schedule(self, graph: TaskGraph, processor_count: int) -> DeadlineAdaptiveResult:
        pool = make_pool(Timeline.scalar, processor_count, len(graph))
        order = sorted(range(len(graph)), key=lambda i: graph[i].deadline)

        mode = Mode.adaptive
        misses = 0
        switched_at: Optional[TaskIndex] = None
        placements: dict[TaskIndex, Placement] = {}
        dropped: list[TaskIndex] = []

        for i in order:
            task = graph[i]
            processor = earliest(pool)
            if mode == Mode.adaptive and processor.load() > task.deadline:
                dropped.append(i)
                misses += 1
                logger.debug(f"dropped task {task.id}: {processor.id=} free at {processor.load()} > {task.deadline=}, {misses=}")
                if misses >= self.miss_threshold:
                    mode = Mode.deadline_monotonic
                    misses = 0
                    switched_at = i
                    logger.info(f"switching to deadline monotonic after task {task.id}")
                continue

            finish_time = processor.load() + task.execution_time
            processor.commit(i, finish_time, task.execution_time)
            placements[i] = Placement(processor.id, finish_time)
            misses = 0
            logger.debug(f"task {task.id} on processor {processor.id} finishing at {finish_time} ({mode.value})")

        return DeadlineAdaptiveResult(self.name, placements, pool, mode, switched_at, dropped)
