"""
Processor bookkeeping. Processors are simulated timelines, nothing executes on them.
"""

from abc import ABC, abstractmethod
from enum import Enum

import numpy as np

from listsched.core import NoProcessorsAvailable, ProcessorId, TaskIndex


class Processor(ABC):
    def __init__(self, id: ProcessorId) -> None:
        self.id = id
        self.busy_time = 0

    @abstractmethod
    def load(self) -> int:
        """Current time of the processor as seen by a task about to be placed"""
        raise NotImplementedError

    @abstractmethod
    def _record(self, task: TaskIndex, finish_time: int) -> None:
        raise NotImplementedError

    def commit(self, task: TaskIndex, finish_time: int, execution_time: int) -> None:
        self._record(task, finish_time)
        self.busy_time += execution_time


class ScalarProcessor(Processor):
    """Single next-free time, overwritten by every commit"""

    def __init__(self, id: ProcessorId) -> None:
        super().__init__(id)
        self.next_free = 0

    def load(self) -> int:
        return self.next_free

    def _record(self, task: TaskIndex, finish_time: int) -> None:
        self.next_free = finish_time

    def __repr__(self) -> str:
        return f"ScalarProcessor({self.id}, next_free={self.next_free}, busy={self.busy_time})"


class SlottedProcessor(Processor):
    """One finish time slot per task of the graph, written at the placed task's index

    Slots of tasks placed elsewhere stay zero, so the load is the highest finish time
    recorded so far: a watermark rather than a chronological timeline.
    """

    def __init__(self, id: ProcessorId, task_count: int) -> None:
        super().__init__(id)
        self.slots = np.zeros(task_count, dtype=np.int64)

    def load(self) -> int:
        return int(self.slots.max(initial=0))

    def _record(self, task: TaskIndex, finish_time: int) -> None:
        self.slots[task] = finish_time

    def __repr__(self) -> str:
        return f"SlottedProcessor({self.id}, load={self.load()}, busy={self.busy_time})"


class Timeline(str, Enum):
    scalar = "scalar"
    slotted = "slotted"


def make_pool(kind: Timeline, processor_count: int, task_count: int) -> list[Processor]:
    if processor_count < 1:
        raise NoProcessorsAvailable(f"cannot schedule on {processor_count} processors")
    if kind == Timeline.scalar:
        return [ScalarProcessor(i) for i in range(processor_count)]
    return [SlottedProcessor(i, task_count) for i in range(processor_count)]


def earliest(pool: list[Processor]) -> Processor:
    """Processor with the smallest load, lowest index on ties"""
    return min(pool, key=lambda p: p.load())
