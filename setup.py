# setup.py
from setuptools import setup, find_packages

setup(
    name="chipmunk",
    version="0.1.0",
    description="A small interpreter for the Chipmunk S-expression language",
    packages=find_packages(include=["chipmunk", "chipmunk.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
