# sitepull/config/__init__.py
"""
Configuration for pull runs.

Exports:
- PullConfig: Run configuration schema
- load_pull_config: File + environment + override loader
"""

from sitepull.config.loader import load_pull_config
from sitepull.config.schema import PullConfig

__all__ = ["PullConfig", "load_pull_config"]
