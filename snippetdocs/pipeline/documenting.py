"""Post-test documentation hook.

Wires the four steps together for one test:
locate source → extract snippet → assemble DocBook section → write file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from snippetdocs.pipeline.assembler import DocumentAssembler
from snippetdocs.pipeline.extractor import SnippetExtractor
from snippetdocs.pipeline.locator import SnippetLocator
from snippetdocs.pipeline.types import DocumentSpec
from snippetdocs.pipeline.writer import DocumentWriter
from snippetdocs.settings import Settings
from snippetdocs.settings import settings as default_settings

logger = logging.getLogger(__name__)


def finalize_documentation(
    spec: DocumentSpec,
    *,
    logical_identity: str,
    name: str,
    module_root: str | None = None,
    settings: Settings | None = None,
) -> Path:
    """Generate and write the snippet document for one test.

    Args:
        spec: Title, paragraphs and snippet to document.
        logical_identity: Dotted identity of the test source, e.g. ``org.example.FooTests``.
        name: Simple name used for the output file, e.g. ``FooTests``.
        module_root: Module directory holding the sources. Defaults to ``settings.module_name``.
        settings: Configuration. Defaults to the module-level settings.

    Returns:
        Path of the written document.

    Raises:
        SnippetSourceNotFoundError: If the source file does not exist.
        SnippetExtractionError: If the source file cannot be read.
        DirectoryCreationError: If the output directory cannot be created.
        OSError: If the document cannot be written.
    """
    cfg = settings or default_settings

    source = SnippetLocator(cfg).locate(logical_identity, module_root)
    snippet = SnippetExtractor(cfg).extract_snippet(source, spec.snippet_id)
    logger.debug(
        f"Extracted snippet {spec.snippet_id} from {source} "
        f"({len(snippet.raw_text)} chars, {snippet.marker_count} markers)"
    )

    document = DocumentAssembler(cfg).render(spec, snippet.raw_text)

    writer = DocumentWriter(cfg)
    path = writer.write(cfg.resolved_output_dir, writer.snippet_file_name(name), document.xml_text)
    logger.info(f"Wrote snippet documentation for {logical_identity} to {path}")
    return path
