"""TF-IDF Scorer.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
from typing import Any, Dict
from tfidf_core.ranking.scorer import Scorer, ScoringContext

class TFIDFScorer(Scorer):
    """TF-IDF scorer: tf * ln(N / df)."""

    def score(self, term_freq: float, doc_freq: int, context: ScoringContext) -> float:
        if context.total_docs == 0 or doc_freq == 0:
            return 0.0
        return term_freq * self.idf(doc_freq, context.total_docs)

    def explain(self, term_freq: float, doc_freq: int, context: ScoringContext) -> Dict[str, Any]:
        idf = self.idf(doc_freq, context.total_docs)
        return {
            "score": self.score(term_freq, doc_freq, context),
            "description": f"TFIDF(tf={term_freq}, df={doc_freq}, N={context.total_docs})",
            "details": {"term_freq": term_freq, "doc_freq": doc_freq, "idf": idf},
        }

__all__ = ["TFIDFScorer"]
