"""
Entrypoint for running the scheduler comparison

Example:
```
python -m listsched --processors 4 --sizes '[10,20,40]' --seed 42
python -m listsched --config experiment.json --verbose
python -m listsched --schedulers heft,cpop --sizes 20
```

`--schedulers` takes one name, a comma separated string or a list (`'[heft,cpop]'`).
"""

import logging
import logging.config
from typing import Optional

import fire

from listsched.config import ExperimentConfig, logging_config
from listsched.experiment import format_report, run_experiment

logger = logging.getLogger("listsched.main")


def main(
    config: Optional[str] = None,
    processors: Optional[int] = None,
    sizes: Optional[int | list[int]] = None,
    execution_time: Optional[tuple[int, int]] = None,
    deadline: Optional[tuple[int, int]] = None,
    dependency_probability: Optional[float] = None,
    schedulers: Optional[str | list[str]] = None,
    seed: Optional[int] = None,
    verbose: bool = False,
) -> None:
    logging.config.dictConfig(logging_config)
    if verbose:
        logging.getLogger("listsched").setLevel(logging.DEBUG)

    if isinstance(sizes, int):
        sizes = [sizes]
    if isinstance(schedulers, str):
        schedulers = [name.strip() for name in schedulers.split(",") if name.strip()]
    elif schedulers is not None:
        # fire turns heft,cpop into a tuple
        schedulers = list(schedulers)

    base = ExperimentConfig.from_file(config) if config else ExperimentConfig()
    overrides = {
        k: v
        for k, v in {
            "processors": processors,
            "sizes": sizes,
            "execution_time": execution_time,
            "deadline": deadline,
            "dependency_probability": dependency_probability,
            "schedulers": schedulers,
            "seed": seed,
        }.items()
        if v is not None
    }
    experiment = ExperimentConfig.model_validate({**base.model_dump(), **overrides})
    logger.debug(f"running {experiment=}")
    print(format_report(run_experiment(experiment)))


if __name__ == "__main__":
    fire.Fire(main)
