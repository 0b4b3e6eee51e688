from listsched.core import Task
from listsched.graph import TaskGraph


def empty() -> TaskGraph:
    """Empty graph"""
    return TaskGraph([])


def single(execution_time: int = 3, deadline: int = 10) -> TaskGraph:
    """One task without dependencies"""
    return TaskGraph([Task(id=1, deadline=deadline, execution_time=execution_time)])


def chain(execution_times: list[int], deadline: int = 100) -> TaskGraph:
    """Linear graph

    task-1 -> task-2 -> ... -> task-n, each depending on its immediate predecessor only
    """
    return TaskGraph(
        [
            Task(id=i + 1, deadline=deadline, execution_time=e, dependencies=frozenset({i - 1}) if i else frozenset())
            for i, e in enumerate(execution_times)
        ]
    )


def independent(execution_times: list[int], deadlines: list[int] | None = None) -> TaskGraph:
    """Tasks without any dependencies"""
    if deadlines is None:
        deadlines = [100] * len(execution_times)
    return TaskGraph(
        [Task(id=i + 1, deadline=d, execution_time=e) for i, (e, d) in enumerate(zip(execution_times, deadlines))]
    )


def diamond(top: int = 2, left: int = 3, right: int = 5, bottom: int = 1) -> TaskGraph:
    """Diamond graph

    task-1 -> task-2, task-3 -> task-4
    """
    return TaskGraph(
        [
            Task(id=1, deadline=100, execution_time=top),
            Task(id=2, deadline=100, execution_time=left, dependencies=frozenset({0})),
            Task(id=3, deadline=100, execution_time=right, dependencies=frozenset({0})),
            Task(id=4, deadline=100, execution_time=bottom, dependencies=frozenset({1, 2})),
        ]
    )


def fork_join(width: int = 3, execution_time: int = 2) -> TaskGraph:
    """Fork join graph

    `width` workers (task-2 .. task-{width+1}) all reading task-1, joined by the last task
    """
    fork = Task(id=1, deadline=100, execution_time=execution_time)
    workers = [
        Task(id=i + 2, deadline=100, execution_time=execution_time, dependencies=frozenset({0}))
        for i in range(width)
    ]
    join = Task(
        id=width + 2, deadline=100, execution_time=execution_time, dependencies=frozenset(range(1, width + 1))
    )
    return TaskGraph([fork, *workers, join])
