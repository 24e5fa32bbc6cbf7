# setup.py
from setuptools import setup, find_packages

setup(
    name="lispy",
    version="0.1.0",
    description="A small tree-walking interpreter for a Lisp-like language",
    packages=find_packages(include=["lispy", "lispy.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
