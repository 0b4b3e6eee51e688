import numpy as np
import pytest

from listsched import samplegraphs
from listsched.config import TaskSetParams
from listsched.generator import generate_task_set


@pytest.fixture(scope="function")
def rng():
    return np.random.default_rng(42)


@pytest.fixture(scope="function")
def diamond():
    return samplegraphs.diamond(top=2, left=3, right=5, bottom=1)


@pytest.fixture(scope="function", params=[0, 1, 2, 3])
def random_graph(request):
    params = TaskSetParams(size=25, execution_time=(1, 10), deadline=(5, 20), dependency_probability=0.3)
    return generate_task_set(params, np.random.default_rng(request.param))
