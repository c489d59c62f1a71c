"""TF-IDF Scorer - Base Scoring Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import math
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

@dataclass
class ScoringContext:
    """Context for scoring operations."""
    total_docs: int = 0
    doc_id: Optional[uuid.UUID] = None

class Scorer(ABC):
    """Base scorer class."""

    def idf(self, doc_freq: int, total_docs: int) -> float:
        """ln(N / df), 0.0 when the term or the corpus is empty."""
        # df == 0 would be log of infinity
        if total_docs == 0 or doc_freq == 0:
            return 0.0
        return math.log(total_docs / doc_freq)

    @abstractmethod
    def score(self, term_freq: float, doc_freq: int, context: ScoringContext) -> float:
        pass

    def explain(self, term_freq: float, doc_freq: int, context: ScoringContext) -> Dict[str, Any]:
        return {"score": self.score(term_freq, doc_freq, context), "description": "base scorer"}

__all__ = ["Scorer", "ScoringContext"]
