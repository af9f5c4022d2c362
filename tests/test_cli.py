# tests/test_cli.py
"""
CLI smoke tests. Everything runs offline: `convert` reads a local export and
`pull` has SanitySource patched out.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from sitepull.cli import app
from sitepull.cli.commands import pull as pull_command

runner = CliRunner()


def write_export(tmp_path: Path, documents) -> Path:
    path = tmp_path / "data.ndjson"
    path.write_text("\n".join(json.dumps(d) for d in documents), encoding="utf-8")
    return path


class FakeSanitySource:
    instances = []

    def __init__(self, documents=(), **kwargs):
        self.kwargs = kwargs
        self.documents = list(documents)
        self.plugin_name = "sanity"
        FakeSanitySource.instances.append(self)

    def fetch(self, preview=False):
        return list(self.documents)


@pytest.fixture
def fake_sanity(monkeypatch, documents):
    FakeSanitySource.instances = []
    monkeypatch.setattr(
        pull_command,
        "SanitySource",
        lambda **kwargs: FakeSanitySource(documents, **kwargs),
    )
    return FakeSanitySource


class TestConvert:
    """sitepull convert EXPORT"""

    def test_writes_site(self, tmp_path, documents):
        export = write_export(tmp_path, documents)
        site = tmp_path / "site"

        result = runner.invoke(app, ["convert", str(export), "--ssg", "hugo", "--output", str(site)])

        assert result.exit_code == 0, result.output
        assert "Wrote 3 files" in result.output
        assert (site / "content" / "blog" / "hello.md").exists()
        assert (site / "data" / "menu.yml").exists()
        assert (site / "config.toml").exists()

    def test_dry_run_writes_nothing(self, tmp_path, documents):
        export = write_export(tmp_path, documents)
        site = tmp_path / "site"

        result = runner.invoke(
            app, ["convert", str(export), "--ssg", "jekyll", "-o", str(site), "--dry-run"]
        )

        assert result.exit_code == 0, result.output
        assert "_data/menu.yml" in result.output
        assert "3 files would be written" in result.output
        assert not site.exists()

    def test_ssg_from_environment(self, tmp_path, documents, monkeypatch):
        monkeypatch.setenv("SSG_TYPE", "gatsby")
        export = write_export(tmp_path, documents)
        site = tmp_path / "site"

        result = runner.invoke(app, ["convert", str(export), "-o", str(site)])

        assert result.exit_code == 0, result.output
        assert (site / "src" / "data" / "menu.yml").exists()
        assert (site / "src" / "pages" / "blog" / "hello.md").exists()

    def test_unsupported_extension_fails_without_writing(self, tmp_path, documents):
        documents.append(
            {"_id": "bad", "stackbit_model_type": "config", "stackbit_file_path": "site.xyz"}
        )
        export = write_export(tmp_path, documents)
        site = tmp_path / "site"

        result = runner.invoke(app, ["convert", str(export), "--ssg", "hugo", "-o", str(site)])

        assert result.exit_code == 1
        assert not site.exists()

    def test_missing_export(self, tmp_path):
        result = runner.invoke(app, ["convert", str(tmp_path / "nope.ndjson"), "--ssg", "hugo"])
        assert result.exit_code == 1

    def test_bad_config_file(self, tmp_path, documents):
        export = write_export(tmp_path, documents)
        config = tmp_path / "sitepull.yaml"
        config.write_text("unknown_key: 1\n", encoding="utf-8")

        result = runner.invoke(app, ["convert", str(export), "--config", str(config)])

        assert result.exit_code == 1


class TestPull:
    """sitepull pull"""

    def test_requires_project_id(self, fake_sanity):
        result = runner.invoke(app, ["pull", "--ssg", "hugo"])

        assert result.exit_code == 1
        assert "project id" in result.output
        assert fake_sanity.instances == []

    def test_pull_with_options(self, tmp_path, fake_sanity):
        site = tmp_path / "site"

        result = runner.invoke(
            app,
            [
                "pull",
                "--project-id",
                "abc123",
                "--dataset",
                "staging",
                "--token",
                "tok",
                "--ssg",
                "hugo",
                "--output",
                str(site),
            ],
        )

        assert result.exit_code == 0, result.output
        kwargs = fake_sanity.instances[0].kwargs
        assert kwargs["project_id"] == "abc123"
        assert kwargs["dataset"] == "staging"
        assert kwargs["token"] == "tok"
        assert (site / "content" / "blog" / "hello.md").exists()

    def test_pull_from_environment(self, tmp_path, fake_sanity, monkeypatch):
        monkeypatch.setenv("SANITY_PROJECT_ID", "envproj")
        monkeypatch.setenv("SANITY_DEPLOY_TOKEN", "envtok")
        monkeypatch.setenv("SSG_TYPE", "jekyll")

        result = runner.invoke(app, ["pull", "-o", str(tmp_path)])

        assert result.exit_code == 0, result.output
        kwargs = fake_sanity.instances[0].kwargs
        assert kwargs["project_id"] == "envproj"
        assert kwargs["token"] == "envtok"
        assert kwargs["dataset"] == "production"
        assert (tmp_path / "_data" / "menu.yml").exists()

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert "pull" in result.output
        assert "convert" in result.output
