"""Snippet documentation pipeline.

Steps, in order:
- locator: logical identity → source file
- extractor: source file → snippet text between SNIPPET markers
- assembler: spec + snippet → DocBook section
- writer: DocBook section → <output_dir>/<Name>.xml
"""

from snippetdocs.pipeline.assembler import DocumentAssembler, assemble_document
from snippetdocs.pipeline.documenting import finalize_documentation
from snippetdocs.pipeline.extractor import SnippetExtractor, extract_snippet
from snippetdocs.pipeline.locator import SnippetLocator
from snippetdocs.pipeline.types import (
    DocumentSpec,
    ExtractedSnippet,
    RenderedDocument,
    SourceLocation,
)
from snippetdocs.pipeline.writer import DocumentWriter

__all__ = [
    "DocumentAssembler",
    "DocumentSpec",
    "DocumentWriter",
    "ExtractedSnippet",
    "RenderedDocument",
    "SnippetExtractor",
    "SnippetLocator",
    "SourceLocation",
    "assemble_document",
    "extract_snippet",
    "finalize_documentation",
]
