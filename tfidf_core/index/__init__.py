"""TF-IDF Index Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from tfidf_core.index.inverted import InvertedIndex

__all__ = ["InvertedIndex"]
