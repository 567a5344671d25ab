from __future__ import annotations

import logging
from pathlib import Path

from snippetdocs.errors import DirectoryCreationError
from snippetdocs.settings import Settings
from snippetdocs.settings import settings as default_settings

logger = logging.getLogger(__name__)


def ensure_directory(directory: Path) -> Path:
    if directory.exists() and not directory.is_dir():
        raise DirectoryCreationError(directory)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(directory, e) from e
    return directory


def write_text(path: Path, text: str) -> None:
    ensure_directory(path.parent)
    path.write_text(text, encoding="utf-8")


class DocumentWriter:
    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings

    def snippet_file_name(self, name: str) -> str:
        """Return the document file name for a test's simple name, e.g. ``FooTests.xml``."""
        return f"{name}{self.settings.document_extension}"

    def write(self, output_dir: Path, file_name: str, xml_text: str) -> Path:
        """Write ``xml_text`` to ``output_dir/file_name``, replacing any existing file.

        Raises:
            DirectoryCreationError: If ``output_dir`` is a file or cannot be created.
            OSError: If the document itself cannot be written.
        """
        directory = Path(output_dir)
        if not directory.is_absolute():
            directory = self.settings.resolved_working_dir / directory
        path = directory / file_name
        write_text(path, xml_text)
        logger.debug(f"Wrote {len(xml_text)} characters to {path}")
        return path
