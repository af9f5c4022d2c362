# tests/conftest.py
"""
Shared fixtures: a small Sanity-shaped document collection and an isolated
environment (no SANITY_* / SSG_TYPE / PREVIEW leaking in from the shell).
"""

from __future__ import annotations

import pytest

from sitepull.config.schema import ENV_VARS


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def documents():
    """Published documents for a tiny blog, plus an asset and a system doc."""
    return [
        {
            "_id": "image-abc",
            "_type": "sanity.imageAsset",
            "url": "https://cdn.sanity.io/images/p/production/abc.png",
        },
        {
            "_id": "author-ada",
            "_type": "person",
            "name": "Ada",
            "avatar": {"_type": "image", "asset": {"_type": "reference", "_ref": "image-abc"}},
        },
        {
            "_id": "post-hello",
            "_type": "post",
            "stackbit_model_type": "page",
            "stackbit_url_path": "/blog/hello",
            "title": "Hello",
            "slug": {"_type": "slug", "current": "hello"},
            "author": {"_type": "reference", "_ref": "author-ada"},
            "content": "First post.",
        },
        {
            "_id": "menu",
            "_type": "menu",
            "stackbit_model_type": "data",
            "stackbit_file_path": "menu.yml",
            "items": [
                {"_key": "k1", "_type": "item", "label": "Home", "url": "/"},
            ],
        },
        {
            "_id": "site-config",
            "_type": "config",
            "stackbit_model_type": "config",
            "stackbit_file_path": "config.toml",
            "title": "My Site",
        },
    ]
