import io
import re

from setuptools import find_packages, setup

__version__ = re.search(
    r'__version__\s*=\s*[\'"]([^\'"]*)[\'"]',
    io.open("src/listsched/version.py", encoding="utf_8_sig").read(),
).group(1)


setup(
    name="listsched",
    version=__version__,
    description="listsched evaluates list scheduling heuristics for dependent tasks on a fixed processor pool.",
    long_description="""listsched maps task graphs onto processors with deadline adaptive EDF/DM, HEFT and CPOP heuristics and reports efficiency, speedup and load balancing.""",
    author="",
    author_email="",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    zip_safe=False,
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "randomname",
        "numpy",
        "networkx",
        "pydantic>=2",
        "fire",
    ],
    extras_require={
        "tests": ["pytest"],
    },
)
