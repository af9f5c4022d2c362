# sitepull/source/plugins/sanity.py
"""
Sanity HTTP API source.

Runs one GROQ query against the dataset query endpoint:

    GET https://<project>.api.sanity.io/<version>/data/query/<dataset>?query=...

Drafts are only visible with a token that can read them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from sitepull.core.document import Document
from sitepull.core.exceptions import SourceError
from sitepull.core.http import api_client, handle_api_error, raise_for_status
from sitepull.logging.logger import get_logger
from sitepull.logging.tags import SOURCE
from sitepull.source.base import build_query

logger = get_logger(__name__)

PROVIDER = "sanity"


@dataclass
class SanitySource:
    """
    Fetch documents from a Sanity dataset.

    Example:
        source = SanitySource(project_id="abc123", token=os.environ["SANITY_DEPLOY_TOKEN"])
        documents = source.fetch(preview=True)
    """

    project_id: str
    dataset: str = "production"
    token: Optional[str] = field(default=None, repr=False)
    api_version: str = "v1"
    use_cdn: bool = False
    timeout: float = 60.0
    transport: Optional[httpx.BaseTransport] = field(default=None, repr=False)
    plugin_name: str = field(default="sanity", repr=False)

    def __post_init__(self) -> None:
        if not self.project_id:
            raise SourceError("Sanity project id is required")

    @property
    def base_url(self) -> str:
        host = "apicdn.sanity.io" if self.use_cdn else "api.sanity.io"
        return f"https://{self.project_id}.{host}/{self.api_version}"

    @property
    def endpoint(self) -> str:
        return f"/data/query/{self.dataset}"

    def fetch(self, preview: bool = False) -> List[Document]:
        query = build_query(preview)
        logger.info(
            f"{SOURCE} Pulling content from Sanity, projectId: {self.project_id}, "
            f"dataset: {self.dataset}"
        )

        client_kwargs: Dict[str, Any] = {"timeout": self.timeout}
        if self.transport is not None:
            client_kwargs["transport"] = self.transport

        with api_client(self.base_url, self.token, **client_kwargs) as client:
            try:
                response = client.get(self.endpoint, params={"query": query})
            except httpx.HTTPError as e:
                raise handle_api_error(e, provider=PROVIDER, endpoint=self.endpoint) from e
            raise_for_status(response, provider=PROVIDER, endpoint=self.endpoint)
            try:
                payload = response.json()
            except ValueError as e:
                raise SourceError(f"Sanity returned invalid JSON: {e}") from e

        result = payload.get("result") if isinstance(payload, dict) else None
        if not isinstance(result, list):
            raise SourceError(f"Unexpected response from {self.base_url}{self.endpoint}")

        logger.info(f"{SOURCE} Got {len(result)} entries from Sanity")
        return result


__all__ = ["SanitySource"]
