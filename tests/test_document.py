"""Tests for Document and DocumentBuilder."""

import io
import uuid

import pytest

from tfidf_core import AnalysisConfig, Document, DocumentBuilder, process
from tfidf_core.document import compute_term_frequency


class FailingStream(io.RawIOBase):
    def readable(self):
        return True

    def read(self, size=-1):
        raise OSError("disk went away")


def test_process_assigns_unique_ids():
    first = process(io.StringIO("input"))
    second = process(io.StringIO("input"))
    assert isinstance(first.id, uuid.UUID)
    assert first.id != second.id


def test_process_keeps_metadata():
    metadata = {"integer": 123, "key": "value", "nested": {"hi": "there"}}
    document = process(io.StringIO("input"), metadata)
    assert document.metadata == metadata


def test_process_defaults_metadata_to_empty():
    assert process(io.StringIO("input")).metadata == {}


def test_process_content():
    assert process(io.StringIO("input")).content == "input"


def test_process_content_drops_final_newline():
    document = process(io.StringIO("first line\r\nsecond line\n"))
    assert document.content == "first line\nsecond line"


def test_process_binary_stream_lines():
    document = process(io.BytesIO(b"one two\r\nthree\n"))
    assert document.content == "one two\nthree"
    assert document.get_terms() == {"one", "two", "three"}


def test_process_binary_stream():
    document = process(io.BytesIO("Déjà vu vu".encode("utf-8")))
    assert dict(document.term_frequency) == {"déjà": 1 / 3, "vu": 2 / 3}


def test_builder_decoding_options():
    builder = DocumentBuilder(config=AnalysisConfig(encoding="latin-1"))
    document = builder.build(io.BytesIO("été".encode("latin-1")))
    assert document.get_terms() == {"été"}


def test_build_read_failure_propagates():
    with pytest.raises(OSError, match="disk went away"):
        process(FailingStream())


@pytest.mark.parametrize("text,expected", [
    ("word word repeated", {"word": 2 / 3, "repeated": 1 / 3}),
    ("word separated word", {"word": 2 / 3, "separated": 1 / 3}),
    ("test Test TEST", {"test": 1.0}),
    ("tEsT Test one TWO oNe TwO", {"test": 2 / 6, "one": 2 / 6, "two": 2 / 6}),
    ("this && that", {"this": 1 / 2, "that": 1 / 2}),
    ("Process removes %#$@! symbols", {"process": 1 / 3, "removes": 1 / 3, "symbols": 1 / 3}),
    ("Also removes, punctuation!!", {"also": 1 / 3, "removes": 1 / 3, "punctuation": 1 / 3}),
    ("'Removes' \"quotations\"", {"removes": 1 / 2, "quotations": 1 / 2}),
])
def test_process_term_frequency(text, expected):
    document = process(io.StringIO(text))
    assert dict(document.term_frequency) == pytest.approx(expected)


def test_case_and_punctuation_insensitive():
    assert dict(process(io.StringIO("Test Test TEST")).term_frequency) == \
        dict(process(io.StringIO("test test test")).term_frequency)
    assert dict(process(io.StringIO("this && that")).term_frequency) == \
        dict(process(io.StringIO("this that")).term_frequency)


def test_frequencies_sum_to_one():
    text = "The quick brown fox jumps over the lazy dog.\nThe dog sleeps; the fox runs!"
    document = process(io.StringIO(text))
    assert document.token_count == 15
    assert sum(document.term_frequency.values()) == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize("text", ["", "\n\n", "... !!! ---"])
def test_empty_input_yields_empty_profile(text):
    document = process(io.StringIO(text))
    assert dict(document.term_frequency) == {}
    assert document.token_count == 0
    assert document.get_terms() == set()


def test_build_text():
    document = DocumentBuilder().build_text("a b", {"source": "inline"})
    assert document.get_terms() == {"a", "b"}
    assert document.metadata == {"source": "inline"}


def test_compute_term_frequency_empty():
    assert compute_term_frequency([]) == {}


@pytest.mark.parametrize("term,expected", [
    ("termA", 0.7),
    ("termC", 0.0),
])
def test_get_term_frequency(document_factory, term, expected):
    document = document_factory({"termA": 0.7, "termB": 0.3})
    assert document.get_term_frequency(term) == expected


@pytest.mark.parametrize("profile,expected", [
    ({"term": 1.0}, {"term"}),
    ({"termA": 0.4, "termB": 0.2, "termC": 0.4}, {"termA", "termB", "termC"}),
    ({}, set()),
])
def test_get_terms(document_factory, profile, expected):
    assert document_factory(profile).get_terms() == expected


def test_document_is_immutable(document_factory):
    document = document_factory({"term": 1.0})
    with pytest.raises(AttributeError):
        document.id = uuid.uuid4()
    with pytest.raises(TypeError):
        document.term_frequency["other"] = 0.5


def test_document_copies_profile():
    profile = {"term": 1.0}
    document = Document(term_frequency=profile)
    profile["other"] = 0.0
    assert "other" not in document


def test_document_to_dict(document_factory):
    document = document_factory({"term": 1.0}, metadata={"k": "v"})
    data = document.to_dict()
    assert data["id"] == str(document.id)
    assert data["metadata"] == {"k": "v"}
    assert data["term_frequency"] == {"term": 1.0}
