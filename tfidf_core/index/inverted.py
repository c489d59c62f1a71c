"""TF-IDF Inverted Index - Term to Document Mapping.

The inverted index maps each term to the documents that contain it.
It only answers document-frequency questions; occurrence counts live in
the documents' own frequency profiles.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import uuid
from typing import Dict, Iterable, List, Union

Postings = Union[Dict[uuid.UUID, None], List[uuid.UUID]]


class InvertedIndex:
    """Term -> document id postings.

    With ``dedupe`` enabled (the default) each term records a document at
    most once, so document frequency counts distinct documents. With
    ``dedupe`` disabled every add appends, and indexing the same document
    twice counts it twice.
    """

    def __init__(self, dedupe: bool = True):
        """Initialize index.

        Args:
            dedupe: Record each document at most once per term
        """
        self.dedupe = dedupe
        # insertion-ordered dict keys act as an ordered set
        self._postings: Dict[str, Postings] = {}

    def add(self, term: str, doc_id: uuid.UUID) -> None:
        """Record that ``doc_id`` contains ``term``."""
        postings = self._postings.get(term)
        if postings is None:
            postings = {} if self.dedupe else []
            self._postings[term] = postings

        if self.dedupe:
            postings[doc_id] = None
        else:
            postings.append(doc_id)

    def add_document(self, doc_id: uuid.UUID, terms: Iterable[str]) -> None:
        """Record every term of a document.

        Args:
            doc_id: Document ID
            terms: Distinct terms of the document
        """
        for term in terms:
            self.add(term, doc_id)

    def doc_freq(self, term: str) -> int:
        """Number of postings for a term, 0 when never indexed."""
        return len(self._postings.get(term, ()))

    def postings(self, term: str) -> List[uuid.UUID]:
        """Document ids recorded for a term, in insertion order."""
        return list(self._postings.get(term, ()))

    def terms(self) -> List[str]:
        """All indexed terms."""
        return list(self._postings)

    def clear(self) -> None:
        """Remove all postings."""
        self._postings.clear()

    def __contains__(self, term: object) -> bool:
        return term in self._postings

    def __len__(self) -> int:
        return len(self._postings)


__all__ = ["InvertedIndex"]
