from pathlib import Path

from setuptools import find_packages
from setuptools import setup


HERE = Path(__file__).resolve().parent


def get_version():
    # type: () -> str
    version = {}
    exec((HERE / "netsemconv" / "_version.py").read_text(), version)
    return version["__version__"]


setup(
    name="netsemconv",
    version=get_version(),
    description="Network connection attributes for server spans",
    packages=find_packages(exclude=["tests*", "benchmarks*", "scripts*"]),
    package_data={
        "netsemconv": ["py.typed"],
    },
    python_requires=">=3.8",
    install_requires=[
        "envier~=0.6.1",
        "opentelemetry-api>=1",
    ],
    extras_require={
        "test": [
            "hypothesis",
            "mock",
            "pytest",
            "riot",
        ],
    },
    zip_safe=False,
)
