"""Render code snippets from test sources into DocBook documentation fragments."""

from snippetdocs.errors import (
    DirectoryCreationError,
    SnippetExtractionError,
    SnippetSourceNotFoundError,
)
from snippetdocs.pipeline import (
    DocumentAssembler,
    DocumentSpec,
    DocumentWriter,
    ExtractedSnippet,
    RenderedDocument,
    SnippetExtractor,
    SnippetLocator,
    SourceLocation,
    assemble_document,
    extract_snippet,
    finalize_documentation,
)
from snippetdocs.settings import Settings

__all__ = [
    "DirectoryCreationError",
    "DocumentAssembler",
    "DocumentSpec",
    "DocumentWriter",
    "ExtractedSnippet",
    "RenderedDocument",
    "Settings",
    "SnippetExtractionError",
    "SnippetExtractor",
    "SnippetLocator",
    "SnippetSourceNotFoundError",
    "SourceLocation",
    "assemble_document",
    "extract_snippet",
    "finalize_documentation",
]
