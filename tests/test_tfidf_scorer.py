"""Tests for TFIDFScorer."""

import math

import pytest

from tfidf_core import ScoringContext, TFIDFScorer


@pytest.mark.parametrize("term_freq,doc_freq,total_docs,expected", [
    (1.0, 1, 2, math.log(2)),
    (0.5, 2, 2, 0.0),
    (0.3, 1, 3, 0.3 * math.log(3)),
    (0.0, 1, 3, 0.0),
    (1.0, 0, 3, 0.0),
    (1.0, 0, 0, 0.0),
])
def test_score(term_freq, doc_freq, total_docs, expected):
    context = ScoringContext(total_docs=total_docs)
    assert TFIDFScorer().score(term_freq, doc_freq, context) == pytest.approx(expected)


def test_explain():
    explanation = TFIDFScorer().explain(0.5, 1, ScoringContext(total_docs=4))
    assert explanation["score"] == pytest.approx(0.5 * math.log(4))
    assert explanation["details"]["idf"] == pytest.approx(math.log(4))
    assert explanation["details"]["doc_freq"] == 1
