# sitepull/config/loader.py
"""
Load a PullConfig from a YAML file, the environment and explicit overrides.

Precedence (lowest to highest): defaults, file, environment, overrides.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from sitepull.config.schema import PullConfig
from sitepull.core.config import load_yaml, validate_config
from sitepull.logging.logger import get_logger

logger = get_logger(__name__)


def load_pull_config(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> PullConfig:
    """
    Build the run configuration.

    Args:
        path: Optional YAML config file.
        environ: Environment mapping (defaults to os.environ).
        **overrides: Values that win over file and environment (None ignored).

    Raises:
        ConfigError: If the file is missing, unparseable or invalid.

    Examples:
        >>> config = load_pull_config("sitepull.yaml", ssg_type="hugo")
    """
    data = {}
    resolved = Path(path) if path is not None else None
    if resolved is not None:
        data = load_yaml(resolved)

    data.update(PullConfig.env_values(environ))
    data.update({key: value for key, value in overrides.items() if value is not None})

    config = validate_config(data, PullConfig, resolved)
    logger.debug(
        f"Pull config: project={config.project_id} dataset={config.dataset} "
        f"ssg={config.ssg_type} preview={config.preview}"
    )
    return config


__all__ = ["load_pull_config"]
