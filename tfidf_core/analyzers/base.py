"""TF-IDF Analyzer Base - Core Text Analysis Components.

Provides base classes for the text analysis pipeline: tokens,
token streams, tokenizers, token filters and analyzers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass
class Token:
    """A token in the analysis stream.

    Attributes:
        text: Token text
        position: Token position in the stream
        start_offset: Start character offset
        end_offset: End character offset
    """

    text: str
    position: int = 0
    start_offset: int = 0
    end_offset: int = 0

    def __repr__(self) -> str:
        return f"Token({self.text!r}, pos={self.position})"

    def clone(self) -> "Token":
        """Create a copy of this token."""
        return Token(
            text=self.text,
            position=self.position,
            start_offset=self.start_offset,
            end_offset=self.end_offset,
        )


class TokenStream:
    """A stream of tokens."""

    def __init__(self, tokens: Optional[List[Token]] = None):
        """Initialize token stream.

        Args:
            tokens: Initial tokens
        """
        self._tokens: List[Token] = tokens or []

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def get_texts(self) -> List[str]:
        """Get list of token texts."""
        return [t.text for t in self._tokens]


class Tokenizer(ABC):
    """Base class for tokenizers.

    Tokenizers break text into tokens.
    """

    @abstractmethod
    def tokenize(self, text: str) -> TokenStream:
        """Tokenize text.

        Args:
            text: Input text

        Returns:
            Token stream
        """
        pass


class TokenFilter(ABC):
    """Base class for token filters.

    Token filters transform or remove tokens in the stream.
    """

    @abstractmethod
    def filter(self, stream: TokenStream) -> TokenStream:
        """Filter token stream.

        Args:
            stream: Input token stream

        Returns:
            Filtered token stream
        """
        pass


class Analyzer:
    """Combines a tokenizer and token filters into an analysis pipeline."""

    def __init__(
        self,
        tokenizer: Tokenizer,
        token_filters: Optional[List[TokenFilter]] = None,
    ):
        """Initialize analyzer.

        Args:
            tokenizer: Tokenizer to use
            token_filters: Token filters to apply, in order
        """
        self._tokenizer = tokenizer
        self._token_filters = token_filters or []

    def analyze(self, text: str) -> TokenStream:
        """Analyze text into tokens.

        Args:
            text: Input text

        Returns:
            Token stream
        """
        stream = self._tokenizer.tokenize(text)
        for token_filter in self._token_filters:
            stream = token_filter.filter(stream)
        return stream

    def get_terms(self, text: str) -> List[str]:
        """Get analyzed terms from text.

        Args:
            text: Input text

        Returns:
            List of term strings, duplicates included
        """
        return self.analyze(text).get_texts()


__all__ = [
    "Analyzer",
    "Token",
    "TokenStream",
    "Tokenizer",
    "TokenFilter",
]
