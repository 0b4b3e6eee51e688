import logging
from collections import Counter
from typing import Iterable, Iterator

import networkx as nx

from listsched.core import MalformedGraph, Task, TaskIndex

logger = logging.getLogger(__name__)


def _problems(tasks: tuple[Task, ...]) -> list[str]:
    """Every reason the task list is not a topologically ordered graph, empty if it is"""
    problems = []
    for i, task in enumerate(tasks):
        bad = sorted(d for d in task.dependencies if d < 0 or d >= i)
        if bad:
            problems.append(f"task {task.id} at index {i} depends on {bad}, expected indices in [0, {i})")
    duplicates = sorted(k for k, v in Counter(t.id for t in tasks).items() if v > 1)
    if duplicates:
        problems.append(f"duplicate task ids {duplicates}")
    return problems


class TaskGraph:
    """Immutable task dependency graph

    The task list order is a topological order: every dependency of the task at
    index ``i`` is an index strictly below ``i``. This is validated on construction,
    use `from_networkx` to ingest a graph in arbitrary order.

    Parameters
    ----------
    tasks: Iterable[Task]
        Tasks in topological order
    """

    def __init__(self, tasks: Iterable[Task]):
        self._tasks = tuple(tasks)
        if problems := _problems(self._tasks):
            raise MalformedGraph("; ".join(problems))
        successors: list[list[TaskIndex]] = [[] for _ in self._tasks]
        for i, task in enumerate(self._tasks):
            for d in task.dependencies:
                successors[d].append(i)
        self._successors = tuple(tuple(sorted(s)) for s in successors)

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __getitem__(self, i: TaskIndex) -> Task:
        return self._tasks[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskGraph):
            return NotImplemented
        return self._tasks == other._tasks

    def __repr__(self) -> str:
        return f"TaskGraph({len(self)} tasks, {sum(len(t.dependencies) for t in self)} edges)"

    def successors(self, i: TaskIndex) -> tuple[TaskIndex, ...]:
        """Indices of the tasks listing task ``i`` as a dependency, ascending"""
        return self._successors[i]

    def total_work(self) -> int:
        """Sum of execution times, ie, the sequential execution time"""
        return sum(t.execution_time for t in self._tasks)

    def to_networkx(self) -> nx.DiGraph:
        g = nx.DiGraph()
        for i, task in enumerate(self._tasks):
            g.add_node(i, id=task.id, deadline=task.deadline, execution_time=task.execution_time)
        g.add_edges_from((d, i) for i, task in enumerate(self._tasks) for d in task.dependencies)
        return g

    @classmethod
    def from_networkx(cls, g: nx.DiGraph) -> "TaskGraph":
        """Builds a TaskGraph from a DAG in arbitrary node order

        Nodes must carry ``deadline`` and ``execution_time`` attributes, ``id`` defaults
        to the position in the resulting order plus one. An edge ``u -> v`` means ``v``
        depends on ``u``. Nodes are reordered topologically, ties broken by node order.
        """
        position = {node: k for k, node in enumerate(g.nodes)}
        try:
            order = list(nx.lexicographical_topological_sort(g, key=lambda n: position[n]))
        except nx.NetworkXUnfeasible as e:
            raise MalformedGraph(f"graph contains a cycle: {nx.find_cycle(g)}") from e
        index = {node: i for i, node in enumerate(order)}
        tasks = []
        for i, node in enumerate(order):
            attrs = g.nodes[node]
            missing = {"deadline", "execution_time"} - attrs.keys()
            if missing:
                raise MalformedGraph(f"node {node!r} lacks attributes {sorted(missing)}")
            tasks.append(
                Task(
                    id=attrs.get("id", i + 1),
                    deadline=attrs["deadline"],
                    execution_time=attrs["execution_time"],
                    dependencies=frozenset(index[p] for p in g.predecessors(node)),
                )
            )
        logger.debug(f"ingested {len(tasks)} tasks in order {order}")
        return cls(tasks)
