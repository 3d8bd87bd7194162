"""Setup configuration for the pattern-catalogue package.

Package metadata lives in pyproject.toml; this file only exists for tools
that still invoke setup.py directly.
"""
from setuptools import setup

setup()
