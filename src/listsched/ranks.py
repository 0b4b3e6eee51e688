"""
Rank propagation over a TaskGraph. Both ranks rely on the graph's index order being
topological, which TaskGraph guarantees on construction.
"""

from typing import Sequence

from listsched.core import TaskIndex
from listsched.graph import TaskGraph


def upward_rank(graph: TaskGraph) -> list[int]:
    """Length of the longest execution-time path ending at, and including, each task"""
    rank = [task.execution_time for task in graph]
    for i, task in enumerate(graph):
        for pred in task.dependencies:
            rank[i] = max(rank[i], rank[pred] + task.execution_time)
    return rank


def downward_rank(graph: TaskGraph) -> list[int]:
    """Longest path forward from each task through its successors

    Each step contributes the successor's own downward rank plus its execution time,
    so a task with a single successor ``j`` gets ``down[j] + exec[j]`` rather than
    anything involving its own execution time.
    """
    rank = [task.execution_time for task in graph]
    for i in reversed(range(len(graph))):
        for j in graph.successors(i):
            rank[i] = max(rank[i], rank[j] + graph[j].execution_time)
    return rank


def priority_order(priority: Sequence[int]) -> list[TaskIndex]:
    """Task indices by strictly decreasing priority, ties in index order"""
    return sorted(range(len(priority)), key=lambda i: -priority[i])
