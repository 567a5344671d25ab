from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True)
class DocumentSpec:
    title: str
    snippet_title: str
    snippet_id: str
    paragraphs: tuple[str, ...] = field(default_factory=tuple)
    language: str | None = None

    def __post_init__(self) -> None:
        # Accept any iterable of paragraphs but store an immutable tuple
        object.__setattr__(self, "paragraphs", _as_tuple(self.paragraphs))


@dataclass(frozen=True)
class SourceLocation:
    logical_identity: str
    module_root: str


@dataclass(frozen=True)
class ExtractedSnippet:
    raw_text: str
    marker_count: int = 0

    @property
    def found(self) -> bool:
        return self.marker_count > 0

    @property
    def is_balanced(self) -> bool:
        return self.marker_count % 2 == 0


@dataclass(frozen=True)
class RenderedDocument:
    xml_text: str


def _as_tuple(paragraphs: Iterable[str] | str) -> tuple[str, ...]:
    if isinstance(paragraphs, str):
        return (paragraphs,)
    return tuple(paragraphs)
