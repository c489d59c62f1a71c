"""TF-IDF Analyzers - Text Analysis Pipeline.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from tfidf_core.analyzers.base import (
    Analyzer,
    Token,
    TokenStream,
    Tokenizer,
    TokenFilter,
)
from tfidf_core.analyzers.filters import LowercaseFilter
from tfidf_core.analyzers.tokenizers import WordTokenizer
from tfidf_core.analyzers.standard import AnalysisConfig, TermAnalyzer

__all__ = [
    "Analyzer",
    "Token",
    "TokenStream",
    "Tokenizer",
    "TokenFilter",
    "LowercaseFilter",
    "WordTokenizer",
    "AnalysisConfig",
    "TermAnalyzer",
]
