"""Setup script for backward compatibility.

Modern Python projects use pyproject.toml for configuration.
This setup.py is provided for backward compatibility with older tools.
"""

from setuptools import setup

# All configuration is in pyproject.toml
setup()
