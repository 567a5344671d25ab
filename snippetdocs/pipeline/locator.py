"""Resolve the source file that holds a test's snippets.

A logical identity such as ``org.example.FooTests`` maps to
``<module_root>/<source_root>/org/example/FooTests<ext>``. The module prefix
is dropped when the working directory already is the module, so the same
identity resolves from the project root and from inside the module.
"""

from __future__ import annotations

import logging
from pathlib import Path

from snippetdocs.errors import SnippetSourceNotFoundError
from snippetdocs.pipeline.types import SourceLocation
from snippetdocs.settings import Settings
from snippetdocs.settings import settings as default_settings

logger = logging.getLogger(__name__)


def identity_to_relative_path(logical_identity: str, extension: str) -> Path:
    """Convert a dotted identity into a relative source path.

    Examples:
        >>> identity_to_relative_path("org.example.FooTests", ".java").as_posix()
        'org/example/FooTests.java'
    """
    parts = [p for p in logical_identity.split(".") if p]
    if not parts:
        raise ValueError(f"Invalid logical identity: {logical_identity!r}")
    parts[-1] = f"{parts[-1]}{extension}"
    return Path(*parts)


class SnippetLocator:
    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings

    def locate(self, logical_identity: str, module_root: str | None = None) -> Path:
        """Return the existing source file for ``logical_identity``.

        Raises:
            SnippetSourceNotFoundError: If the computed file does not exist.
        """
        module = self.settings.module_name if module_root is None else module_root
        relative = (
            self.directory_prefix(module)
            / self.settings.source_root
            / identity_to_relative_path(logical_identity, self.settings.source_extension)
        )
        path = self.settings.resolved_working_dir / relative
        if not path.is_file():
            raise SnippetSourceNotFoundError(path, logical_identity)
        logger.debug(f"Located snippet source for {logical_identity}: {path}")
        return path

    def locate_source(self, location: SourceLocation) -> Path:
        return self.locate(location.logical_identity, location.module_root)

    def directory_prefix(self, module_root: str) -> Path:
        if module_root in ("", ".") or self.is_inside_module(module_root):
            return Path()
        return Path(module_root)

    def is_inside_module(self, module_root: str) -> bool:
        cwd = self.settings.resolved_working_dir.absolute()
        module_with_parent = f"{self.settings.project_name}/{module_root}"
        return f"{cwd.parent.name}/{cwd.name}" == module_with_parent
