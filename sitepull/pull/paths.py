# sitepull/pull/paths.py
"""
Output path resolution.

Computes where an entry lands in the site repository, following the
directory conventions of the target static-site generator:

    Generator   data dir    pages dir
    jekyll      _data       (repository root)
    hugo        data        content
    gatsby      src/data    src/pages

Per-entry routing fields (`stackbit_dir`, `stackbit_url_path`,
`stackbit_file_ext`, `stackbit_file_path`) override the defaults and are
stripped from the entry once the path is known.
"""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional, Tuple

from sitepull.core.document import (
    DIR_FIELD,
    FILE_EXT_FIELD,
    FILE_PATH_FIELD,
    MODEL_TYPE_FIELD,
    URL_PATH_FIELD,
    Document,
    EntryRole,
)
from sitepull.core.exceptions import PathResolutionError
from sitepull.logging.logger import get_logger
from sitepull.logging.tags import PATHS

logger = get_logger(__name__)

DEFAULT_FILE_EXT = ".md"

_POSTS_RE = re.compile(r"^_?posts/")
_ISO_DATE_PREFIX_RE = re.compile(r"^\d{4}-\d{2}-\d{2}")
_UNDERSCORES_RE = re.compile(r"_+")
_HUGO_INDEX_RE = re.compile(r"index$")


@dataclass(frozen=True)
class GeneratorLayout:
    """Default directories of a static-site generator."""

    data_dir: Optional[str] = None
    pages_dir: str = ""


GENERATOR_LAYOUTS: Dict[str, GeneratorLayout] = {
    "jekyll": GeneratorLayout(data_dir="_data", pages_dir=""),
    "hugo": GeneratorLayout(data_dir="data", pages_dir="content"),
    "gatsby": GeneratorLayout(data_dir="src/data", pages_dir="src/pages"),
}

# Fields consumed by the resolver, per role
ROUTING_FIELDS: Dict[EntryRole, Tuple[str, ...]] = {
    EntryRole.PAGE: (MODEL_TYPE_FIELD, URL_PATH_FIELD, DIR_FIELD, FILE_EXT_FIELD),
    EntryRole.DATA: (MODEL_TYPE_FIELD, FILE_PATH_FIELD, DIR_FIELD),
    EntryRole.CONFIG: (MODEL_TYPE_FIELD, FILE_PATH_FIELD),
}


def get_layout(ssg_type: Optional[str]) -> GeneratorLayout:
    """Layout for a generator id; unknown generators get no defaults."""
    return GENERATOR_LAYOUTS.get(ssg_type or "", GeneratorLayout())


def _join(directory: str, path: str) -> str:
    """Join under `directory`; a leading slash on `path` does not make it absolute."""
    return posixpath.normpath(posixpath.join(directory, path.lstrip("/")))


def _iso_date(value: Any) -> str:
    """YYYY-MM-DD (UTC) of a date field value."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, str) and value:
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as e:
            raise PathResolutionError(f"Invalid post date {value!r}") from e
    else:
        raise PathResolutionError(f"Invalid post date {value!r}")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date().isoformat()


# =============================================================================
# Pages
# =============================================================================


def _jekyll_post_path(url: str, page: Document) -> str:
    post_file = url.split("/")[1]
    if not _ISO_DATE_PREFIX_RE.match(post_file):
        post_file = f"{_iso_date(page.get('date'))}-{post_file}"
    post_file = _UNDERSCORES_RE.sub("-", post_file)
    return f"_posts/{post_file}"


def page_file_path(page: Document, ssg_type: Optional[str]) -> str:
    """
    Path of a page, derived from its URL path.

    Examples:
        >>> page_file_path({"stackbit_url_path": "/about/"}, "hugo")
        'content/about/_index.md'
        >>> page_file_path({"stackbit_url_path": "posts/hello", "date": "2020-05-01"}, "jekyll")
        '_posts/2020-05-01-hello.md'
    """
    url = page.get(URL_PATH_FIELD) or ""

    if url.startswith("/"):
        url = url[1:]

    if url == "" or url.endswith("/"):
        url += "index"

    if ssg_type == "jekyll":
        if _POSTS_RE.match(url):
            url = _jekyll_post_path(url, page)
    elif ssg_type == "hugo":
        if url == "index" or url.endswith("/index"):
            url = _HUGO_INDEX_RE.sub("_index", url)

    if DIR_FIELD in page:
        pages_dir = page[DIR_FIELD] or ""
    else:
        pages_dir = get_layout(ssg_type).pages_dir

    url = _join(pages_dir, url)
    ext = page.get(FILE_EXT_FIELD) or DEFAULT_FILE_EXT
    return url + ext


# =============================================================================
# Data / Config
# =============================================================================


def data_file_path(data: Document, ssg_type: Optional[str]) -> Optional[str]:
    """
    Path of a data entry, or None when it has no file of its own.

    Data without `stackbit_file_path` is nested content resolved inside its
    parents. Paths already inside the data directory are left alone.
    """
    file_path = data.get(FILE_PATH_FIELD)
    if DIR_FIELD in data:
        data_dir = data[DIR_FIELD]
    else:
        data_dir = get_layout(ssg_type).data_dir

    if not file_path:
        return None
    if data_dir and not file_path.startswith(data_dir):
        return _join(data_dir, file_path)
    return _join("", file_path)


def config_file_path(config: Document) -> str:
    file_path = config.get(FILE_PATH_FIELD)
    if not file_path:
        raise PathResolutionError(f"Config entry {config.get('_id')!r} has no {FILE_PATH_FIELD}")
    return _join("", file_path)


# =============================================================================
# Dispatch
# =============================================================================


def resolve_output_path(entry: Document, ssg_type: Optional[str]) -> Optional[str]:
    """
    Output path of a root entry by role.

    Returns None for entries that produce no file (unrecognized role, or
    data without an explicit path).
    """
    role = EntryRole.of(entry)
    if role is EntryRole.PAGE:
        path = page_file_path(entry, ssg_type)
    elif role is EntryRole.DATA:
        path = data_file_path(entry, ssg_type)
    elif role is EntryRole.CONFIG:
        path = config_file_path(entry)
    else:
        return None
    logger.debug(f"{PATHS} {role.value} entry {entry.get('_id')!r} -> {path}")
    return path


def strip_routing_fields(entry: Document) -> Document:
    """Copy of the entry without the fields the resolver consumed."""
    omit = ROUTING_FIELDS.get(EntryRole.of(entry), ())
    return {key: value for key, value in entry.items() if key not in omit}


__all__ = [
    "GeneratorLayout",
    "GENERATOR_LAYOUTS",
    "ROUTING_FIELDS",
    "get_layout",
    "page_file_path",
    "data_file_path",
    "config_file_path",
    "resolve_output_path",
    "strip_routing_fields",
]
