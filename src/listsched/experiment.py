"""
Drives every configured scheduler over a series of generated task sets and renders a text report
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from listsched.config import ExperimentConfig
from listsched.generator import generate_task_sets
from listsched.graph import TaskGraph
from listsched.metrics import Metrics, evaluate
from listsched.schedulers import get_scheduler

logger = logging.getLogger(__name__)

REPORT_LABELS = {"d_edf": "D_EDF", "heft": "HEFT", "cpop": "CPOP"}


@dataclass
class ExperimentRow:
    graph: TaskGraph
    metrics: dict[str, Metrics]  # keyed by scheduler name, in configured order


def run_experiment(config: ExperimentConfig, rng: Optional[np.random.Generator] = None) -> list[ExperimentRow]:
    if rng is None:
        rng = np.random.default_rng(config.seed)
    rows = []
    for graph in generate_task_sets(config, rng):
        metrics = {}
        for name in config.schedulers:
            result = get_scheduler(name).schedule(graph, config.processors)
            metrics[name] = evaluate(graph, result)
            logger.debug(f"{name} on {graph!r}: {metrics[name]}")
        logger.info(f"evaluated {len(config.schedulers)} schedulers on {len(graph)} tasks")
        rows.append(ExperimentRow(graph, metrics))
    return rows


def format_report(rows: list[ExperimentRow]) -> str:
    lines = []
    for row in rows:
        lines.append("Task Set: " + " ".join(f"({t.id}, {t.execution_time}, {t.deadline})" for t in row.graph))
        for name, m in row.metrics.items():
            lines.append("")
            lines.append(f"{REPORT_LABELS.get(name, name)} Scheduling:")
            lines.append(f"Efficiency: {m.efficiency:g}")
            lines.append(f"Makespan: {m.makespan}")
            lines.append(f"Speedup: {m.speedup:g}")
            lines.append(f"Load Balancing: {m.load_balancing:g}")
        lines.append("")
    return "\n".join(lines)
