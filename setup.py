# setup.py

from setuptools import setup, find_packages

setup(
    name="bitonic_tour",
    version="0.1.0",
    description="Exact minimum-length bitonic tours by dynamic programming",
    packages=find_packages(exclude=["tests*", "benchmarks*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
)
