# tests/test_pipeline.py
"""
End-to-end tests for PullPipeline.build() and run().
"""

import tomllib

import pytest
import yaml

from sitepull.core.document import OutputFile
from sitepull.core.exceptions import UnsupportedFormatError
from sitepull.pull.pipeline import PullPipeline, create_file
from sitepull.writer import FileWriter


class StaticSource:
    plugin_name = "static"

    def __init__(self, documents):
        self.documents = documents
        self.preview_calls = []

    def fetch(self, preview=False):
        self.preview_calls.append(preview)
        return list(self.documents)


def by_path(files):
    return {f.path: f.content for f in files}


class TestBuild:
    """Documents in, output files out."""

    def test_hugo_site(self, documents):
        files = by_path(PullPipeline(ssg_type="hugo").build(documents))

        assert set(files) == {"content/blog/hello.md", "data/menu.yml", "config.toml"}

        post = files["content/blog/hello.md"]
        assert post.startswith("---\n")
        assert post.endswith("---\nFirst post.")
        front_matter = yaml.safe_load(post.split("---\n")[1])
        assert front_matter == {
            "title": "Hello",
            "slug": "hello",
            "author": {
                "name": "Ada",
                "avatar": "https://cdn.sanity.io/images/p/production/abc.png",
            },
        }

        assert yaml.safe_load(files["data/menu.yml"]) == {"items": [{"label": "Home", "url": "/"}]}
        assert tomllib.loads(files["config.toml"]) == {"title": "My Site"}

    def test_jekyll_layout(self, documents):
        files = by_path(PullPipeline(ssg_type="jekyll").build(documents))
        assert set(files) == {"blog/hello.md", "_data/menu.yml", "config.toml"}

    def test_assets_never_serialized(self, documents):
        files = PullPipeline(ssg_type="hugo").build(documents)
        assert not any("sanity.imageAsset" in f.content for f in files)
        assert len(files) == 3

    def test_entries_without_role_dropped(self):
        docs = [
            {"_id": "a", "_type": "thing", "title": "no role"},
            {"_id": "b", "_type": "thing", "stackbit_model_type": "object"},
        ]
        assert PullPipeline(ssg_type="hugo").build(docs) == []

    def test_data_without_path_dropped_but_inlined(self):
        docs = [
            {"_id": "cta", "_type": "cta", "stackbit_model_type": "data", "label": "Go"},
            {
                "_id": "home",
                "stackbit_model_type": "page",
                "stackbit_url_path": "/",
                "cta": {"_type": "reference", "_ref": "cta"},
            },
        ]
        files = by_path(PullPipeline(ssg_type="gatsby").build(docs))
        assert list(files) == ["src/pages/index.md"]
        assert files["src/pages/index.md"] == "---\ncta:\n  label: Go\n---\n"

    def test_routing_fields_not_in_output(self, documents):
        for output in PullPipeline(ssg_type="hugo").build(documents):
            assert "stackbit_" not in output.content

    def test_preview_overlays_drafts(self):
        docs = [
            {"_id": "about", "stackbit_model_type": "page", "stackbit_url_path": "/about", "title": "Old"},
            {"_id": "drafts.about", "stackbit_model_type": "page", "stackbit_url_path": "/about", "title": "New"},
        ]
        preview = by_path(PullPipeline(ssg_type="hugo", preview=True).build(docs))
        published = by_path(PullPipeline(ssg_type="hugo", preview=False).build(docs))

        assert preview == {"content/about.md": "---\ntitle: New\n---\n"}
        assert published == {"content/about.md": "---\ntitle: Old\n---\n"}

    def test_reference_to_superseded_document_resolves_to_null(self):
        docs = [
            {"_id": "author", "_type": "person", "name": "Old"},
            {"_id": "drafts.author", "_type": "person", "name": "New"},
            {
                "_id": "post",
                "stackbit_model_type": "page",
                "stackbit_url_path": "/post",
                "author": {"_type": "reference", "_ref": "author"},
            },
        ]
        files = by_path(PullPipeline(ssg_type="hugo", preview=True).build(docs))
        assert files["content/post.md"] == "---\nauthor: null\n---\n"

    def test_unsupported_format_aborts(self, documents):
        documents.append(
            {"_id": "bad", "stackbit_model_type": "config", "stackbit_file_path": "site.xyz"}
        )
        with pytest.raises(UnsupportedFormatError):
            PullPipeline(ssg_type="hugo").build(documents)

    def test_create_file_unrecognized(self):
        assert create_file({"title": "x"}, "hugo") is None

    def test_create_file_html(self):
        entry = {
            "stackbit_model_type": "page",
            "stackbit_url_path": "/landing",
            "stackbit_file_ext": ".html",
            "content": "<h1>Hi</h1>",
        }
        assert create_file(entry, "hugo") == OutputFile("content/landing.html", "<h1>Hi</h1>")


class TestRun:
    """Fetch, build and write."""

    def test_writes_all_files(self, documents, tmp_path):
        source = StaticSource(documents)
        count = PullPipeline(ssg_type="hugo", preview=True).run(source, FileWriter(tmp_path))

        assert count == 3
        assert source.preview_calls == [True]
        assert (tmp_path / "content" / "blog" / "hello.md").read_text(encoding="utf-8").endswith(
            "First post."
        )
        assert (tmp_path / "data" / "menu.yml").exists()
        assert (tmp_path / "config.toml").exists()

    def test_failure_writes_nothing(self, documents, tmp_path):
        documents.append(
            {"_id": "bad", "stackbit_model_type": "config", "stackbit_file_path": "site.xyz"}
        )
        with pytest.raises(UnsupportedFormatError):
            PullPipeline(ssg_type="hugo").run(StaticSource(documents), FileWriter(tmp_path))
        assert list(tmp_path.iterdir()) == []
