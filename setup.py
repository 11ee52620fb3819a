# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="lispi",
    version="0.1.0",
    description="A small Lisp interpreter: closures, persistent lists and recur",
    packages=find_namespace_packages(include=["lispi", "lispi.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["lispi=lispi.cli:main"],
    },
    zip_safe=False,
)
