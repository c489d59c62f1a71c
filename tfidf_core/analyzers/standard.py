"""TF-IDF Standard Analyzer - Pre-configured Term Analysis.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tfidf_core.analyzers.base import Analyzer
from tfidf_core.analyzers.filters import LowercaseFilter
from tfidf_core.analyzers.tokenizers import WordTokenizer


@dataclass
class AnalysisConfig:
    """Text analysis configuration.

    Attributes:
        lowercase: Case-fold terms to lowercase
        ascii_only: Only ASCII letters and digits count as word characters
        encoding: Encoding used to decode binary input streams
        errors: Decoding error policy for binary input streams
    """

    lowercase: bool = True
    ascii_only: bool = False
    encoding: str = "utf-8"
    errors: str = "strict"


class TermAnalyzer(Analyzer):
    """Word tokenization followed by case folding."""

    def __init__(self, config: Optional[AnalysisConfig] = None):
        """Initialize term analyzer.

        Args:
            config: Analysis configuration
        """
        self.config = config or AnalysisConfig()
        token_filters = [LowercaseFilter()] if self.config.lowercase else []
        super().__init__(
            tokenizer=WordTokenizer(ascii_only=self.config.ascii_only),
            token_filters=token_filters,
        )


__all__ = ["AnalysisConfig", "TermAnalyzer"]
