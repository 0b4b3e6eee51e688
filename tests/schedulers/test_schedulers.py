from math import isclose

import numpy as np
import pytest

from listsched import NoProcessorsAvailable, Placement, samplegraphs
from listsched.config import TaskSetParams
from listsched.generator import generate_task_set
from listsched.metrics import evaluate, makespan
from listsched.schedulers import (
    SCHEDULERS,
    CPOPScheduler,
    DeadlineAdaptiveScheduler,
    HEFTScheduler,
    Mode,
    UnknownScheduler,
    get_scheduler,
)


@pytest.mark.parametrize("name", sorted(SCHEDULERS))
def test_no_processors(name, diamond):
    with pytest.raises(NoProcessorsAvailable):
        get_scheduler(name).schedule(diamond, 0)


@pytest.mark.parametrize("name", sorted(SCHEDULERS))
def test_no_tasks(name):
    result = get_scheduler(name).schedule(samplegraphs.empty(), 2)
    assert result.scheduled == 0
    assert result.placements == {}
    assert makespan(result.processors) == 0


@pytest.mark.parametrize(
    "name, finish_time",
    [
        ["d_edf", 3],
        ["heft", 6],  # upward rank 3 serves as the earliest start
        ["cpop", 6],
    ],
)
def test_single_task(name, finish_time):
    graph = samplegraphs.single(execution_time=3, deadline=10)
    result = get_scheduler(name).schedule(graph, 1)
    assert result.placements == {0: Placement(processor=0, finish_time=finish_time)}
    assert evaluate(graph, result).efficiency == 1.0


def test_unknown_scheduler():
    with pytest.raises(UnknownScheduler):
        get_scheduler("fifo")
    with pytest.raises(KeyError):
        get_scheduler("fifo")


@pytest.mark.parametrize("scheduler", [HEFTScheduler(), CPOPScheduler()])
@pytest.mark.parametrize("processors", [1, 2, 3, 7])
def test_rank_schedulers_place_everything(scheduler, processors, random_graph):
    result = scheduler.schedule(random_graph, processors)
    assert result.scheduled == len(random_graph)
    assert set(result.placements) == set(range(len(random_graph)))
    assert sum(p.busy_time for p in result.processors) == random_graph.total_work()


@pytest.mark.parametrize("name", sorted(SCHEDULERS))
def test_pools_are_not_shared(name, diamond):
    scheduler = get_scheduler(name)
    first = scheduler.schedule(diamond, 2)
    second = scheduler.schedule(diamond, 2)
    assert first.processors is not second.processors
    assert first.placements == second.placements
    assert [p.busy_time for p in first.processors] == [p.busy_time for p in second.processors]


def test_result_lookup(diamond):
    result = HEFTScheduler().schedule(diamond, 2)
    for task, placement in result.placements.items():
        assert result.get_processor(task) == placement.processor
        assert task in result.tasks_on(placement.processor)
    assert "Processor 0" in repr(result)
    assert "Processor 1" in repr(result)


# HEFT


def test_heft_independent_tasks():
    graph = samplegraphs.independent([4, 6])
    result = HEFTScheduler().schedule(graph, 2)
    # task 1 has the higher rank and goes first
    assert result.placements == {
        1: Placement(processor=0, finish_time=12),
        0: Placement(processor=1, finish_time=8),
    }
    assert result.get_processor(0) != result.get_processor(1)
    m = evaluate(graph, result)
    assert m.makespan == 12
    assert isclose(m.speedup, 10 / 12)


def test_heft_chain():
    result = HEFTScheduler().schedule(samplegraphs.chain([2, 3, 4]), 2)
    assert list(result.placements.items()) == [
        (2, Placement(processor=0, finish_time=13)),
        (1, Placement(processor=1, finish_time=8)),
        (0, Placement(processor=1, finish_time=10)),
    ]
    assert [p.busy_time for p in result.processors] == [4, 5]
    assert [p.next_free for p in result.processors] == [13, 10]


def test_heft_single_processor_accumulates():
    graph = samplegraphs.independent([1, 2, 3])
    result = HEFTScheduler().schedule(graph, 1)
    # order 2, 1, 0: 0+3+3, max(6,2)+2, max(8,1)+1
    assert [result.placements[i].finish_time for i in (2, 1, 0)] == [6, 8, 9]


# CPOP


def test_cpop_diamond(diamond):
    result = CPOPScheduler().schedule(diamond, 2)
    assert list(result.placements.items()) == [
        (0, Placement(processor=0, finish_time=4)),
        (2, Placement(processor=1, finish_time=12)),
        (3, Placement(processor=0, finish_time=13)),
        (1, Placement(processor=1, finish_time=20)),
    ]
    p0, p1 = result.processors
    assert p0.slots.tolist() == [4, 0, 0, 13]
    assert p1.slots.tolist() == [0, 20, 12, 0]
    assert (p0.busy_time, p1.busy_time) == (3, 8)
    assert makespan(result.processors) == 20


def test_cpop_single_processor_watermark():
    graph = samplegraphs.independent([2, 5])
    result = CPOPScheduler().schedule(graph, 1)
    # task 1 first: 0+5+5, then task 0 on top of the watermark: 10+2+2
    assert result.placements == {1: Placement(0, 10), 0: Placement(0, 14)}
    assert result.processors[0].slots.tolist() == [14, 10]


# DeadlineAdaptive


def _uniform(n: int, execution_time: int = 5, deadline: int = 1):
    return samplegraphs.independent([execution_time] * n, [deadline] * n)


def test_deadline_unreachable_pair():
    # the first task starts at 0, within its deadline; the second finds the processor busy until 5
    result = DeadlineAdaptiveScheduler().schedule(_uniform(2), 1)
    assert result.scheduled == 1
    assert result.dropped == [1]
    assert result.mode == Mode.adaptive
    assert result.switched_at is None


def test_deadline_switch_accepts_rest():
    result = DeadlineAdaptiveScheduler().schedule(_uniform(5), 1)
    assert result.dropped == [1, 2]
    assert result.switched_at == 2
    assert result.mode == Mode.deadline_monotonic
    assert result.placements == {0: Placement(0, 5), 3: Placement(0, 10), 4: Placement(0, 15)}


def test_deadline_misses_must_be_consecutive():
    graph = samplegraphs.independent([5, 5, 1, 5], [0, 1, 5, 5])
    result = DeadlineAdaptiveScheduler().schedule(graph, 1)
    assert result.dropped == [1, 3]
    assert result.mode == Mode.adaptive
    assert result.placements == {0: Placement(0, 5), 2: Placement(0, 6)}


def test_deadline_order_is_stable_and_graph_untouched():
    graph = samplegraphs.independent([3, 1, 2, 4], [9, 4, 9, 4])
    before = graph.tasks
    result = DeadlineAdaptiveScheduler().schedule(graph, 1)
    assert list(result.placements) == [1, 3, 0, 2]
    assert graph.tasks == before
    assert [t.deadline for t in graph] == [9, 4, 9, 4]


def test_deadline_spreads_over_processors():
    result = DeadlineAdaptiveScheduler().schedule(_uniform(3, execution_time=4, deadline=0), 3)
    assert result.placements == {0: Placement(0, 4), 1: Placement(1, 4), 2: Placement(2, 4)}
    assert result.scheduled == 3


def test_deadline_threshold():
    result = DeadlineAdaptiveScheduler(miss_threshold=1).schedule(_uniform(3), 1)
    assert result.dropped == [1]
    assert result.placements == {0: Placement(0, 5), 2: Placement(0, 10)}
    with pytest.raises(ValueError):
        DeadlineAdaptiveScheduler(miss_threshold=0)


@pytest.mark.parametrize("seed", range(10))
def test_deadline_never_reverts(seed):
    params = TaskSetParams(size=30, execution_time=(1, 10), deadline=(0, 15), dependency_probability=0.2)
    graph = generate_task_set(params, np.random.default_rng(seed))
    result = DeadlineAdaptiveScheduler().schedule(graph, 2)
    order = sorted(range(len(graph)), key=lambda i: graph[i].deadline)
    assert result.scheduled + len(result.dropped) == len(graph)
    if result.switched_at is not None:
        assert result.mode == Mode.deadline_monotonic
        after = order[order.index(result.switched_at) + 1:]
        assert all(i in result.placements for i in after)


def test_result_repr_lists_placements():
    graph = samplegraphs.independent([4, 6])
    text = repr(HEFTScheduler().schedule(graph, 2))
    assert text.startswith("============= heft: ")
    assert "Processor 0 (busy 6):\n1@12\n" in text
    assert "Processor 1 (busy 4):\n0@8\n" in text
