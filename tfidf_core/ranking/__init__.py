"""TF-IDF Ranking Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from tfidf_core.ranking.scorer import Scorer, ScoringContext
from tfidf_core.ranking.tfidf import TFIDFScorer

__all__ = ["Scorer", "ScoringContext", "TFIDFScorer"]
