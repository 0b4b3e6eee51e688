"""
Core data structures -- tasks, placements and the error conditions of the scheduling core
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

TaskIndex = int  # position of a task within its TaskGraph
ProcessorId = int


class MalformedGraph(ValueError):
    """Task list is not in dependency-respecting order, or is otherwise inconsistent"""


class NoProcessorsAvailable(ValueError):
    """Scheduling requested on an empty processor pool"""


class Task(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    deadline: int
    execution_time: PositiveInt
    dependencies: frozenset[TaskIndex] = Field(
        default_factory=frozenset,
        description="indices of direct predecessors within the owning task list",
    )

    def __repr__(self) -> str:
        return f"Task({self.id}, exec={self.execution_time}, deadline={self.deadline}, deps={sorted(self.dependencies)})"


@dataclass(frozen=True)
class Placement:
    processor: ProcessorId
    finish_time: int
