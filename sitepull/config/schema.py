# sitepull/config/schema.py
"""
Configuration schema for a pull run.

Example YAML:
    project_id: abc123
    dataset: production
    ssg_type: hugo
    preview: false
    output_dir: ./site
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_DATASET = "production"

# Environment variable -> config field
ENV_VARS: Dict[str, str] = {
    "SANITY_PROJECT_ID": "project_id",
    "SANITY_DEPLOY_TOKEN": "token",
    "SANITY_DATASET": "dataset",
    "SSG_TYPE": "ssg_type",
    "PREVIEW": "preview",
}


class PullConfig(BaseModel):
    """Everything a pull run needs besides the documents themselves."""

    project_id: Optional[str] = Field(None, description="Sanity project id")
    token: Optional[str] = Field(None, description="Sanity API token")
    dataset: str = Field(DEFAULT_DATASET, description="Sanity dataset name")
    ssg_type: Optional[str] = Field(
        None, description="Target static-site generator (jekyll, hugo, gatsby)"
    )
    preview: bool = Field(False, description="Overlay drafts over published documents")
    output_dir: Path = Field(Path("."), description="Root directory for generated files")
    api_version: str = Field("v1", description="Sanity HTTP API version")
    use_cdn: bool = Field(False, description="Query the API CDN instead of the live API")

    model_config = ConfigDict(extra="forbid")

    @field_validator("dataset", mode="before")
    @classmethod
    def _default_dataset(cls, v: Any) -> Any:
        return v or DEFAULT_DATASET

    @classmethod
    def env_values(cls, environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        """
        Config values present in the environment.

        Any non-empty PREVIEW value turns preview on.
        """
        environ = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for var, field_name in ENV_VARS.items():
            raw = environ.get(var)
            if not raw:
                continue
            values[field_name] = True if field_name == "preview" else raw
        return values

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PullConfig":
        return cls.model_validate(cls.env_values(environ))


__all__ = ["PullConfig", "ENV_VARS", "DEFAULT_DATASET"]
