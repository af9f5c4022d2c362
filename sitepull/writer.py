# sitepull/writer.py
"""
Output file writer.

Persists OutputFile objects under an output root. Parent directories are
created as needed and content is written as UTF-8. The writer is only handed
files after the whole build succeeded, and it checks that every target stays
under the root before writing the first one.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Union

from sitepull.core.document import OutputFile
from sitepull.core.exceptions import PathResolutionError
from sitepull.logging.logger import get_logger
from sitepull.logging.tags import WRITER

logger = get_logger(__name__)


@dataclass
class FileWriter:
    """
    Writes rendered files into a site repository.

    Example:
        >>> writer = FileWriter("./site")
        >>> writer.write([OutputFile("data/menu.yml", "items: []\\n")])
    """

    root: Union[str, Path]

    def target(self, output: OutputFile) -> Path:
        """
        Location of an output file under the root.

        Raises:
            PathResolutionError: If the path would land outside the root.
        """
        root = Path(self.root)
        path = root / output.path.lstrip("/")
        if not path.resolve().is_relative_to(root.resolve()):
            raise PathResolutionError(f"Output path {output.path!r} is outside {root}")
        return path

    def write(self, files: Iterable[OutputFile]) -> List[Path]:
        targets = [(self.target(output), output) for output in files]

        written: List[Path] = []
        for path, output in targets:
            logger.info(f"{WRITER} Writing file: {path}")
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(output.data)
            written.append(path)
        return written


__all__ = ["FileWriter"]
