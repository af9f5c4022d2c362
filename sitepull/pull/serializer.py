# sitepull/pull/serializer.py
"""
Serialize transformed entries by output file extension.

    yml / yaml  block-style YAML, no anchors or aliases
    toml        TOML (null values dropped, TOML has no null)
    json        compact JSON
    md          YAML front matter between `---` lines, then `content`
    html        `content` only

Any other extension raises UnsupportedFormatError.
"""

from __future__ import annotations

import json
import posixpath
from typing import Any, Callable, Dict, Mapping

import tomli_w
import yaml

from sitepull.core.exceptions import UnsupportedFormatError

CONTENT_FIELD = "content"
FRONT_MATTER_DELIMITER = "---\n"


class _NoAliasSafeDumper(yaml.SafeDumper):
    """SafeDumper that writes repeated objects in full instead of aliasing them."""

    def ignore_aliases(self, data: Any) -> bool:
        return True


def dump_yaml(data: Mapping[str, Any]) -> str:
    return yaml.dump(
        data,
        Dumper=_NoAliasSafeDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def _drop_nulls(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _drop_nulls(child) for key, child in value.items() if child is not None}
    if isinstance(value, list):
        return [_drop_nulls(child) for child in value if child is not None]
    return value


def dump_toml(data: Mapping[str, Any]) -> str:
    return tomli_w.dumps(_drop_nulls(dict(data)))


def dump_json(data: Mapping[str, Any]) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def dump_markdown(data: Mapping[str, Any]) -> str:
    """
    Front matter followed by the `content` field.

    The YAML dump already ends with a newline, so the closing delimiter
    follows it directly and content starts on the next line.
    """
    front_matter = {key: value for key, value in data.items() if key != CONTENT_FIELD}
    content = data.get(CONTENT_FIELD)
    content = "" if content is None else str(content)
    return f"{FRONT_MATTER_DELIMITER}{dump_yaml(front_matter)}{FRONT_MATTER_DELIMITER}{content}"


def dump_html(data: Mapping[str, Any]) -> str:
    content = data.get(CONTENT_FIELD)
    return "" if content is None else str(content)


SERIALIZERS: Dict[str, Callable[[Mapping[str, Any]], str]] = {
    "yml": dump_yaml,
    "yaml": dump_yaml,
    "toml": dump_toml,
    "json": dump_json,
    "md": dump_markdown,
    "html": dump_html,
}


def file_extension(file_path: str) -> str:
    """Extension without the dot, case preserved ('' if none)."""
    return posixpath.splitext(file_path)[1][1:]


def serialize(data: Mapping[str, Any], file_path: str) -> str:
    """
    Render an entry for the file at `file_path`.

    Raises:
        UnsupportedFormatError: If the extension has no serializer.
    """
    extension = file_extension(file_path)
    serializer = SERIALIZERS.get(extension)
    if serializer is None:
        raise UnsupportedFormatError(file_path, extension)
    return serializer(data)


__all__ = [
    "SERIALIZERS",
    "dump_yaml",
    "dump_toml",
    "dump_json",
    "dump_markdown",
    "dump_html",
    "file_extension",
    "serialize",
]
