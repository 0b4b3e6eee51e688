import datetime
from abc import ABC, abstractmethod

import randomname

from listsched.core import Placement, ProcessorId, TaskIndex
from listsched.graph import TaskGraph
from listsched.processor import Processor


class AssignmentResult:
    """Outcome of a single scheduling run

    Owned by the caller; the processor pool is the one built for this run only.
    """

    def __init__(
        self,
        scheduler: str,
        placements: dict[TaskIndex, Placement],
        processors: list[Processor],
    ):
        self.scheduler = scheduler
        self.placements = placements
        self.processors = processors
        self.name = randomname.get_name()
        self.created_at = datetime.datetime.now(datetime.timezone.utc)

    @property
    def scheduled(self) -> int:
        """Number of tasks successfully placed"""
        return len(self.placements)

    def get_processor(self, task: TaskIndex) -> ProcessorId:
        if task not in self.placements:
            raise KeyError(f"Task {task} not placed by {self.scheduler} run {self.name}")
        return self.placements[task].processor

    def tasks_on(self, processor: ProcessorId) -> list[TaskIndex]:
        """Tasks placed on ``processor``, in placement order"""
        return [task for task, placement in self.placements.items() if placement.processor == processor]

    def __repr__(self) -> str:
        out = f"============= {self.scheduler}: {self.name} =============\n"
        out += f"Created at: {self.created_at}\n"
        for processor in self.processors:
            out += f"Processor {processor.id} (busy {processor.busy_time}):\n"
            out += " → ".join(
                f"{task}@{self.placements[task].finish_time}" for task in self.tasks_on(processor.id)
            ) + "\n"
        out += "================================================\n"

        return out


class Scheduler(ABC):
    name: str

    @abstractmethod
    def schedule(self, graph: TaskGraph, processor_count: int) -> AssignmentResult:
        """Places the tasks of ``graph`` onto a fresh pool of ``processor_count`` processors

        Raises `NoProcessorsAvailable` when ``processor_count`` is below one.
        """
        pass
