from __future__ import annotations

import logging
import re
from pathlib import Path

from snippetdocs.errors import SnippetExtractionError
from snippetdocs.pipeline.types import ExtractedSnippet
from snippetdocs.settings import Settings
from snippetdocs.settings import settings as default_settings

logger = logging.getLogger(__name__)

DEFAULT_COMMENT_TOKEN = "//"


def marker_pattern(snippet_id: str, comment_token: str = DEFAULT_COMMENT_TOKEN) -> re.Pattern[str]:
    """Build the pattern for ``<comment> ... SNIPPET <snippet_id>`` marker lines.

    The identifier is matched literally anywhere after ``SNIPPET`` and
    whitespace, so ``demo`` is found in ``// SNIPPET demo`` as well as in
    ``// SNIPPET demo -- setup``.
    """
    if not snippet_id:
        raise ValueError("snippet_id must not be empty")
    return re.compile(rf"{re.escape(comment_token)}.+SNIPPET\s+{re.escape(snippet_id)}")


def extract_snippet(
    file_path: Path,
    snippet_id: str,
    *,
    comment_token: str = DEFAULT_COMMENT_TOKEN,
) -> ExtractedSnippet:
    """Collect the lines between the paired ``SNIPPET`` markers in a file.

    Each marker line toggles capturing and is itself never emitted. Captured
    lines keep their original content and are each terminated with ``\\n``.

    A file without markers yields an empty snippet and an unmatched opening
    marker yields everything after it; neither raises, so a broken marker
    never hides the outcome of the test that triggered the extraction.

    Args:
        file_path: Source file to scan.
        snippet_id: Identifier following ``SNIPPET`` in the marker lines.
        comment_token: Comment prefix that must precede the marker.

    Returns:
        ExtractedSnippet with the collected text and number of markers seen.

    Raises:
        SnippetExtractionError: If the file cannot be read or decoded.
    """
    pattern = marker_pattern(snippet_id, comment_token)
    collected: list[str] = []
    in_snippet = False
    marker_count = 0

    try:
        with Path(file_path).open(encoding="utf-8") as f:
            for raw_line in f:
                line = raw_line.removesuffix("\n")
                if pattern.search(line):
                    in_snippet = not in_snippet
                    marker_count += 1
                    continue
                if in_snippet:
                    collected.append(line)
    except (OSError, UnicodeDecodeError) as e:
        raise SnippetExtractionError(Path(file_path), e) from e

    snippet = ExtractedSnippet(
        raw_text="".join(f"{line}\n" for line in collected),
        marker_count=marker_count,
    )
    if not snippet.found:
        logger.debug(f"No SNIPPET {snippet_id} marker in {file_path}")
    elif not snippet.is_balanced:
        logger.warning(
            f"Unmatched SNIPPET {snippet_id} marker in {file_path}: "
            f"{marker_count} markers, snippet runs to end of file"
        )
    return snippet


class SnippetExtractor:
    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings

    def extract(self, file_path: Path, snippet_id: str) -> str:
        return self.extract_snippet(file_path, snippet_id).raw_text

    def extract_snippet(self, file_path: Path, snippet_id: str) -> ExtractedSnippet:
        return extract_snippet(file_path, snippet_id, comment_token=self.settings.comment_token)
