"""TF-IDF Tokenizers - Text Tokenization Strategies.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re

from tfidf_core.analyzers.base import Token, TokenStream, Tokenizer


class WordTokenizer(Tokenizer):
    """Word tokenizer.

    Emits one token per maximal run of word characters (letters, digits,
    underscore). Punctuation, whitespace and symbols are dropped.
    """

    WORD_PATTERN = re.compile(r"\w+")
    ASCII_WORD_PATTERN = re.compile(r"\w+", re.ASCII)

    def __init__(self, ascii_only: bool = False):
        """Initialize tokenizer.

        Args:
            ascii_only: Restrict word characters to [A-Za-z0-9_]
        """
        self.ascii_only = ascii_only
        self._pattern = self.ASCII_WORD_PATTERN if ascii_only else self.WORD_PATTERN

    def tokenize(self, text: str) -> TokenStream:
        """Tokenize text into word runs."""
        tokens = []
        for position, match in enumerate(self._pattern.finditer(text)):
            tokens.append(Token(
                text=match.group(),
                position=position,
                start_offset=match.start(),
                end_offset=match.end(),
            ))
        return TokenStream(tokens)


__all__ = ["WordTokenizer"]
