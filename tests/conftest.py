"""Shared fixtures for tfidf_core tests."""

import pytest

from tfidf_core import Corpus, Document


@pytest.fixture
def document_factory():
    """Build a Document from a ready-made frequency profile."""

    def factory(term_frequency, metadata=None):
        return Document(metadata=metadata or {}, term_frequency=term_frequency)

    return factory


@pytest.fixture
def corpus_factory(document_factory):
    """Build a Corpus from profiles; returns (corpus, documents)."""

    def factory(profiles, **kwargs):
        documents = [document_factory(profile) for profile in profiles]
        corpus = Corpus(**kwargs)
        corpus.add_documents(documents)
        return corpus, documents

    return factory
