"""
Random task set generation. The random source is always passed in, so a seeded
`numpy.random.Generator` reproduces the same task sets.
"""

import logging

import numpy as np

from listsched.config import ExperimentConfig, TaskSetParams
from listsched.core import Task
from listsched.graph import TaskGraph

logger = logging.getLogger(__name__)


def generate_task_set(params: TaskSetParams, rng: np.random.Generator) -> TaskGraph:
    """Draws ``params.size`` tasks; each earlier task independently becomes a dependency
    with probability ``params.dependency_probability``, so the result is topologically ordered"""
    tasks = []
    for i in range(params.size):
        execution_time = int(rng.integers(*params.execution_time, endpoint=True))
        deadline = int(rng.integers(*params.deadline, endpoint=True))
        dependencies = frozenset(j for j in range(i) if rng.random() < params.dependency_probability)
        tasks.append(Task(id=i + 1, deadline=deadline, execution_time=execution_time, dependencies=dependencies))
    graph = TaskGraph(tasks)
    logger.debug(f"generated {graph!r} from {params=}")
    return graph


def generate_task_sets(config: ExperimentConfig, rng: np.random.Generator) -> list[TaskGraph]:
    return [generate_task_set(params, rng) for params in config.task_set_params()]
