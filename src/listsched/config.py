"""
Experiment configuration and the logging setup applied by entrypoints
"""

from pathlib import Path
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, Field, NonNegativeInt, field_validator

from listsched.schedulers import SCHEDULERS


def _range_from(lowest: int):
    def check(v: tuple[int, int]) -> tuple[int, int]:
        lo, hi = v
        if lo < lowest:
            raise ValueError(f"lower bound {lo} below {lowest}")
        if lo > hi:
            raise ValueError(f"empty range [{lo}, {hi}]")
        return v

    return check


# inclusive [min, max] ranges
ExecutionTimeRange = Annotated[tuple[int, int], AfterValidator(_range_from(1))]
DeadlineRange = Annotated[tuple[int, int], AfterValidator(_range_from(0))]


class TaskSetParams(BaseModel):
    size: int = Field(ge=0)
    execution_time: ExecutionTimeRange = Field((1, 10), description="inclusive range of task execution times")
    deadline: DeadlineRange = Field((5, 20), description="inclusive range of task deadlines")
    dependency_probability: float = Field(
        0.3, ge=0.0, le=1.0, description="chance of each earlier task becoming a dependency"
    )


class ExperimentConfig(BaseModel):
    processors: int = Field(2, ge=1, description="size of the processor pool handed to every scheduler")
    sizes: list[NonNegativeInt] = Field(default_factory=lambda: [5, 10, 15, 20, 25, 30, 40])
    execution_time: ExecutionTimeRange = (1, 10)
    deadline: DeadlineRange = (5, 20)
    dependency_probability: float = Field(0.3, ge=0.0, le=1.0)
    schedulers: list[str] = Field(default_factory=lambda: ["d_edf", "heft", "cpop"])
    seed: Optional[int] = Field(None, description="seed of the task set generator, fresh entropy if unset")

    @field_validator("schedulers")
    @classmethod
    def check_schedulers(cls, v: list[str]) -> list[str]:
        unknown = [name for name in v if name not in SCHEDULERS]
        if unknown:
            raise ValueError(f"unknown schedulers {unknown}, expected some of {sorted(SCHEDULERS)}")
        return v

    def task_set_params(self) -> list[TaskSetParams]:
        return [
            TaskSetParams(
                size=size,
                execution_time=self.execution_time,
                deadline=self.deadline,
                dependency_probability=self.dependency_probability,
            )
            for size in self.sizes
        ]

    @classmethod
    def from_file(cls, path: str | Path) -> "ExperimentConfig":
        return cls.model_validate_json(Path(path).read_text())


logging_config = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "default": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "listsched": {"level": "INFO", "handlers": ["default"], "propagate": False},
    },
    "root": {"level": "WARNING", "handlers": ["default"]},
}
