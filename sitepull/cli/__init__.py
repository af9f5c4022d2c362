# sitepull/cli/__init__.py
from sitepull.cli.cli import app

__all__ = ["app"]
