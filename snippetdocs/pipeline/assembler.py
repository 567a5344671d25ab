"""DocBook section rendering for extracted snippets.

Each part of the section is produced by its own render function; a document
is the concatenation, in order, of header, title, paragraphs, example and
footer. Titles and paragraphs are inserted as given. The snippet goes into a
CDATA section so source code with ``<``, ``>`` or ``&`` survives verbatim.
"""

from __future__ import annotations

from xml.sax.saxutils import quoteattr

from snippetdocs.pipeline.types import DocumentSpec, RenderedDocument
from snippetdocs.settings import Settings
from snippetdocs.settings import settings as default_settings

DOCBOOK_PUBLIC_ID = "-//OASIS//DTD DocBook XML V4.4//EN"
DOCBOOK_SYSTEM_ID = "http://www.oasis-open.org/docbook/xml/4.4/docbookx.dtd"
DEFAULT_LANGUAGE = "java"

_CDATA_END = "]]>"


def cdata(text: str) -> str:
    """Wrap text in a CDATA section.

    A literal ``]]>`` cannot occur inside CDATA, so it is split across two
    adjacent sections; the parsed character data still equals ``text``.

    Examples:
        >>> cdata("a<b>c")
        '<![CDATA[a<b>c]]>'
        >>> cdata("x]]>y")
        '<![CDATA[x]]]]><![CDATA[>y]]>'
    """
    return "<![CDATA[" + text.replace(_CDATA_END, "]]]]><![CDATA[>") + "]]>"


def render_header() -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<!DOCTYPE section PUBLIC "{DOCBOOK_PUBLIC_ID}" "{DOCBOOK_SYSTEM_ID}">\n'
        "<section>\n"
    )


def render_title(title: str) -> str:
    return f"<title>{title}</title>\n"


def render_paragraphs(paragraphs: tuple[str, ...]) -> str:
    return "".join(f"<para>\n{paragraph}\n</para>\n" for paragraph in paragraphs)


def render_example(snippet_title: str, snippet_text: str, language: str = DEFAULT_LANGUAGE) -> str:
    return (
        "<example>\n"
        f"    <title>{snippet_title}</title>\n"
        f'    <programlisting language={quoteattr(language)}>{cdata(snippet_text)}</programlisting>\n'
        "</example>\n"
    )


def render_footer() -> str:
    return "</section>\n"


def assemble_document(spec: DocumentSpec, snippet_text: str, *, language: str = DEFAULT_LANGUAGE) -> str:
    """Render a complete DocBook section for ``spec`` and its snippet text.

    ``spec.language`` takes precedence over ``language`` when set.
    """
    return "".join(
        [
            render_header(),
            render_title(spec.title),
            render_paragraphs(spec.paragraphs),
            render_example(spec.snippet_title, snippet_text, spec.language or language),
            render_footer(),
        ]
    )


class DocumentAssembler:
    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings

    def assemble(self, spec: DocumentSpec, snippet_text: str) -> str:
        return assemble_document(spec, snippet_text, language=self.settings.listing_language)

    def render(self, spec: DocumentSpec, snippet_text: str) -> RenderedDocument:
        return RenderedDocument(xml_text=self.assemble(spec, snippet_text))
