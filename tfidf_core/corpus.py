"""TF-IDF Corpus - Document Collection and Scoring.

The Corpus owns a set of Documents, the inverted index built from them,
and the cache of the last full TF-IDF calculation.

The corpus does no locking of its own. Adding documents mutates the
index that scoring reads, so callers sharing a Corpus between threads
must serialize access themselves.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Mapping, Optional

from tfidf_core.document import Document
from tfidf_core.errors import DocumentNotFoundError
from tfidf_core.index.inverted import InvertedIndex
from tfidf_core.ranking.scorer import Scorer, ScoringContext
from tfidf_core.ranking.tfidf import TFIDFScorer

logger = logging.getLogger(__name__)

TermTFIDF = Dict[str, float]


@dataclass
class CorpusConfig:
    """Corpus configuration.

    Attributes:
        dedupe_postings: Count each document once per term even when it is
            added more than once. Disable to let repeated adds inflate
            document frequency.
    """

    dedupe_postings: bool = True


@dataclass
class CorpusStats:
    """Corpus statistics."""

    doc_count: int = 0
    term_count: int = 0
    scored_doc_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "doc_count": self.doc_count,
            "term_count": self.term_count,
            "scored_doc_count": self.scored_doc_count,
        }


class Corpus:
    """A collection of Documents scored with TF-IDF."""

    def __init__(
        self,
        config: Optional[CorpusConfig] = None,
        scorer: Optional[Scorer] = None,
    ):
        """Initialize an empty corpus.

        Args:
            config: Corpus configuration
            scorer: Term scorer, defaults to TFIDFScorer
        """
        self.config = config or CorpusConfig()
        self.scorer = scorer or TFIDFScorer()
        self._documents: Dict[uuid.UUID, Document] = {}
        self._index = InvertedIndex(dedupe=self.config.dedupe_postings)
        self._scores: Dict[uuid.UUID, TermTFIDF] = {}

    def add_document(self, document: Document) -> None:
        """Add a document and index its terms.

        Args:
            document: Document to add
        """
        self._documents[document.id] = document
        self._index.add_document(document.id, document.get_terms())
        logger.debug(f"Indexed document {document.id} ({len(document)} terms)")

    def add_documents(self, documents: Iterable[Document]) -> None:
        """Add documents in order."""
        for document in documents:
            self.add_document(document)

    def get_document(self, doc_id: uuid.UUID) -> Document:
        """Get document by ID.

        Raises:
            DocumentNotFoundError: Unknown document id
        """
        try:
            return self._documents[doc_id]
        except KeyError:
            raise DocumentNotFoundError(doc_id) from None

    def doc_freq(self, term: str) -> int:
        """Number of documents recorded for a term."""
        return self._index.doc_freq(term)

    def idf(self, term: str) -> float:
        """Inverse document frequency as defined by the corpus scorer."""
        return self.scorer.idf(self.doc_freq(term), len(self._documents))

    def tfidf(self, term: str, doc_id: uuid.UUID) -> TermTFIDF:
        """Score one term in one document.

        Args:
            term: Term to score
            doc_id: Target document ID

        Returns:
            Single entry mapping {term: score}

        Raises:
            DocumentNotFoundError: Unknown document id
        """
        document = self.get_document(doc_id)
        context = ScoringContext(total_docs=len(self._documents), doc_id=doc_id)
        doc_freq = self._index.doc_freq(term)
        if doc_freq == 0:
            return {term: 0.0}
        score = self.scorer.score(document.get_term_frequency(term), doc_freq, context)
        return {term: score}

    def tfidfs(self, terms: Iterable[str], doc_id: uuid.UUID) -> TermTFIDF:
        """Score several terms in one document.

        Raises:
            DocumentNotFoundError: Unknown document id
        """
        self.get_document(doc_id)
        scores: TermTFIDF = {}
        for term in terms:
            scores.update(self.tfidf(term, doc_id))
        return scores

    def explain(self, term: str, doc_id: uuid.UUID) -> Dict[str, Any]:
        """Describe how a term's score in a document was computed."""
        document = self.get_document(doc_id)
        context = ScoringContext(total_docs=len(self._documents), doc_id=doc_id)
        return self.scorer.explain(
            document.get_term_frequency(term), self._index.doc_freq(term), context
        )

    def calculate(self) -> Dict[uuid.UUID, TermTFIDF]:
        """Score every term of every document.

        Recomputes from the current corpus state and replaces the score
        cache.

        Returns:
            Document ID -> {term: score}
        """
        scores = {}
        for doc_id, document in self._documents.items():
            scores[doc_id] = self.tfidfs(document.get_terms(), doc_id)
        self._scores = scores
        logger.debug(f"Calculated TF-IDF for {len(scores)} documents")
        return {doc_id: dict(doc_scores) for doc_id, doc_scores in scores.items()}

    @property
    def scores(self) -> Mapping[uuid.UUID, Mapping[str, float]]:
        """Read-only results of the last calculate() call."""
        return MappingProxyType({
            doc_id: MappingProxyType(doc_scores)
            for doc_id, doc_scores in self._scores.items()
        })

    @property
    def documents(self) -> Mapping[uuid.UUID, Document]:
        """Read-only view of the documents."""
        return MappingProxyType(self._documents)

    def stats(self) -> CorpusStats:
        """Get corpus statistics."""
        return CorpusStats(
            doc_count=len(self._documents),
            term_count=len(self._index),
            scored_doc_count=len(self._scores),
        )

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents.values())


__all__ = ["Corpus", "CorpusConfig", "CorpusStats", "TermTFIDF"]
