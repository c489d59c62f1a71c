"""TF-IDF Core - Term Weighting for Document Collections.

Turns raw text into normalized term-frequency profiles and scores every
term of every document against a corpus-wide inverted index.

Pipeline:
    text stream -> DocumentBuilder -> Document -> Corpus.add_document
                -> InvertedIndex -> Corpus.tfidf / Corpus.calculate

Scores are tf * ln(N / df), where tf is the share of a document's tokens
taken by the term, N the number of documents and df the number of
documents containing the term.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

from tfidf_core.errors import TFIDFError, DocumentNotFoundError
from tfidf_core.document import (
    Document,
    DocumentBuilder,
    compute_term_frequency,
    process,
)
from tfidf_core.corpus import (
    Corpus,
    CorpusConfig,
    CorpusStats,
    TermTFIDF,
)
from tfidf_core.index.inverted import InvertedIndex
from tfidf_core.analyzers import (
    Analyzer,
    AnalysisConfig,
    LowercaseFilter,
    TermAnalyzer,
    Token,
    TokenStream,
    WordTokenizer,
)
from tfidf_core.ranking import Scorer, ScoringContext, TFIDFScorer

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    # Errors
    "TFIDFError",
    "DocumentNotFoundError",
    # Documents
    "Document",
    "DocumentBuilder",
    "compute_term_frequency",
    "process",
    # Corpus
    "Corpus",
    "CorpusConfig",
    "CorpusStats",
    "TermTFIDF",
    "InvertedIndex",
    # Analyzers
    "Analyzer",
    "AnalysisConfig",
    "LowercaseFilter",
    "TermAnalyzer",
    "Token",
    "TokenStream",
    "WordTokenizer",
    # Ranking
    "Scorer",
    "ScoringContext",
    "TFIDFScorer",
]
