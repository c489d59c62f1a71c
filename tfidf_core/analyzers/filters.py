"""TF-IDF Token Filters - Token Transformation Pipeline.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from tfidf_core.analyzers.base import TokenFilter, TokenStream


class LowercaseFilter(TokenFilter):
    """Converts tokens to lowercase."""

    def filter(self, stream: TokenStream) -> TokenStream:
        """Convert all tokens to lowercase."""
        tokens = []
        for token in stream:
            new_token = token.clone()
            new_token.text = token.text.lower()
            tokens.append(new_token)
        return TokenStream(tokens)


__all__ = ["LowercaseFilter"]
