"""TF-IDF Document - Term Frequency Profiles.

A Document pairs a unique identifier and an opaque metadata payload with
the normalized term-frequency profile of the text it was built from.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import io
import logging
import uuid
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import IO, Any, Dict, List, Mapping, Optional, Set, Union

from tfidf_core.analyzers.base import Analyzer
from tfidf_core.analyzers.standard import AnalysisConfig, TermAnalyzer

logger = logging.getLogger(__name__)

TermFrequency = Dict[str, float]
Meta = Dict[str, Any]


@dataclass(frozen=True, eq=False)
class Document:
    """An analyzed document.

    Attributes:
        id: Unique document identifier
        metadata: Caller supplied payload, stored untouched
        term_frequency: Term -> occurrences / total tokens
        content: Source text, lines joined by newlines
        token_count: Total number of tokens in the source text
    """

    id: uuid.UUID = field(default_factory=uuid.uuid4)
    metadata: Meta = field(default_factory=dict)
    term_frequency: Mapping[str, float] = field(default_factory=dict)
    content: str = ""
    token_count: int = 0

    def __post_init__(self):
        """Freeze the frequency profile."""
        object.__setattr__(
            self, "term_frequency", MappingProxyType(dict(self.term_frequency))
        )

    def get_term_frequency(self, term: str) -> float:
        """Get frequency of a term, 0.0 when the term is absent."""
        return self.term_frequency.get(term, 0.0)

    def get_terms(self) -> Set[str]:
        """Get the distinct terms of the profile."""
        return set(self.term_frequency)

    def __contains__(self, term: object) -> bool:
        return term in self.term_frequency

    def __len__(self) -> int:
        return len(self.term_frequency)

    def __repr__(self) -> str:
        return f"Document(id={self.id}, terms={len(self)}, tokens={self.token_count})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": str(self.id),
            "metadata": self.metadata,
            "term_frequency": dict(self.term_frequency),
            "content": self.content,
            "token_count": self.token_count,
        }


def compute_term_frequency(terms: List[str]) -> TermFrequency:
    """Compute term -> count / total for a list of terms.

    Args:
        terms: Analyzed terms, duplicates included

    Returns:
        Frequency profile, empty when there are no terms
    """
    total = len(terms)
    if total == 0:
        return {}
    return {term: count / total for term, count in Counter(terms).items()}


class DocumentBuilder:
    """Builds Documents from readable text or byte streams.

    The builder holds no per-document state, so one instance can serve
    independent inputs concurrently.
    """

    def __init__(
        self,
        analyzer: Optional[Analyzer] = None,
        config: Optional[AnalysisConfig] = None,
    ):
        """Initialize builder.

        Args:
            analyzer: Analyzer producing terms, defaults to TermAnalyzer
            config: Analysis configuration
        """
        self.config = config or AnalysisConfig()
        self.analyzer = analyzer or TermAnalyzer(self.config)

    def build(
        self,
        stream: IO[Any],
        metadata: Optional[Meta] = None,
    ) -> Document:
        """Read a stream to completion and build its Document.

        Args:
            stream: Text or binary stream
            metadata: Opaque payload attached to the document

        Returns:
            New Document with a fresh id

        Raises:
            OSError: The stream could not be read
        """
        content = self._read(stream)
        terms = self.analyzer.get_terms(content)
        document = Document(
            id=uuid.uuid4(),
            metadata=metadata if metadata is not None else {},
            term_frequency=compute_term_frequency(terms),
            content=content,
            token_count=len(terms),
        )
        logger.debug(f"Built document {document.id}: {len(terms)} tokens, {len(document)} terms")
        return document

    def build_text(self, text: str, metadata: Optional[Meta] = None) -> Document:
        """Build a Document from an in-memory string."""
        return self.build(io.StringIO(text), metadata)

    def _read(self, stream: IO[Any]) -> str:
        """Read all lines, join them with newlines and drop the final one."""
        data: Union[str, bytes] = stream.read()
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode(self.config.encoding, self.config.errors)

        lines = data.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return "\n".join(line[:-1] if line.endswith("\r") else line for line in lines)


_default_builder = DocumentBuilder()


def process(stream: IO[Any], metadata: Optional[Meta] = None) -> Document:
    """Build a Document using the default analysis configuration.

    Args:
        stream: Text or binary stream
        metadata: Opaque payload attached to the document

    Returns:
        New Document
    """
    return _default_builder.build(stream, metadata)


__all__ = [
    "Document",
    "DocumentBuilder",
    "Meta",
    "TermFrequency",
    "compute_term_frequency",
    "process",
]
