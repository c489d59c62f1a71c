"""Tests for the inverted index."""

import uuid

from tfidf_core import InvertedIndex


def test_unknown_term():
    index = InvertedIndex()
    assert index.doc_freq("missing") == 0
    assert index.postings("missing") == []
    assert "missing" not in index


def test_add_document():
    index = InvertedIndex()
    first, second = uuid.uuid4(), uuid.uuid4()
    index.add_document(first, {"a", "b"})
    index.add_document(second, {"b"})

    assert index.doc_freq("a") == 1
    assert index.doc_freq("b") == 2
    assert index.postings("b") == [first, second]
    assert sorted(index.terms()) == ["a", "b"]
    assert len(index) == 2


def test_dedupe_counts_distinct_documents():
    index = InvertedIndex()
    doc_id = uuid.uuid4()
    index.add("term", doc_id)
    index.add("term", doc_id)
    assert index.doc_freq("term") == 1


def test_without_dedupe_repeats_count():
    index = InvertedIndex(dedupe=False)
    doc_id = uuid.uuid4()
    index.add("term", doc_id)
    index.add("term", doc_id)
    assert index.doc_freq("term") == 2
    assert index.postings("term") == [doc_id, doc_id]


def test_clear():
    index = InvertedIndex()
    index.add("term", uuid.uuid4())
    index.clear()
    assert len(index) == 0
    assert index.doc_freq("term") == 0
