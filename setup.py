import re
from pathlib import Path
from typing import List

from setuptools import setup, find_packages


def read_requirements(path: str = "./requirements.txt") -> List[str]:
    """Read install requirements, skipping blank lines and comments"""
    with open(path) as f:
        lines = [line.strip() for line in f.read().splitlines()]
    return [line for line in lines if line and not line.startswith("#")]


def get_version():
    file = Path("./asana_stories/__init__.py")
    return re.search(
        r'^__version__ *= *[\'"]([^\'"]*)[\'"]', file.read_text(encoding="utf-8"), re.M
    )[1]


setup(
    name="asana_stories",
    version=get_version(),
    description="Asana story and comment bindings",
    zip_safe=False,
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=read_requirements(),
    extras_require={"test": ["pytest"]},
)
