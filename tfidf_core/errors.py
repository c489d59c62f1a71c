"""TF-IDF Core Errors.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Any


class TFIDFError(Exception):
    """Base class for errors raised by tfidf_core."""


class DocumentNotFoundError(TFIDFError, KeyError):
    """A query referenced a document id that is not in the corpus."""

    def __init__(self, doc_id: Any):
        self.doc_id = doc_id
        super().__init__(f"document {doc_id} not found in corpus")

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


__all__ = ["TFIDFError", "DocumentNotFoundError"]
