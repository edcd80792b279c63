"""
Setup script for hash-spread.
"""

from setuptools import setup, find_packages

setup(
    name="hash-spread",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*", "examples"]),
    package_data={"hash_spread": ["py.typed"]},
    python_requires=">=3.8",
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["hash-spread=hash_spread.cli:main"]},
)
