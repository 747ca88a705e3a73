from pathlib import Path

import pytest

from littlesearch.io import SourceUnavailableError, file_documents, load_noise_words, load_jsonl_documents
from littlesearch.pipeline import build_index, make_index
from littlesearch.sparse.query import top_k

DATA = Path(__file__).resolve().parents[1] / "data" / "raw"


def _pairs(index, kw):
    return [(o.document, o.frequency) for o in index[kw]]


def test_sample_corpus_pipeline():
    index = make_index(DATA / "docs.txt", DATA / "noisewords.txt")
    assert _pairs(index, "cat") == [("doc1.txt", 4), ("doc3.txt", 2), ("doc2.txt", 1)]
    assert _pairs(index, "dog") == [("doc2.txt", 4), ("doc1.txt", 1)]
    assert _pairs(index, "birds") == [("doc3.txt", 3)]
    assert "the" not in index
    assert top_k(index, "cat", "dog") == ["doc1.txt", "doc2.txt", "doc3.txt"]


def test_build_index_from_pairs():
    docs = [("a", ["Cat.", "cat", "cat,", "Dog!"]), ("b", iter(["dog", "dog", "the"]))]
    index = build_index(docs, {"the", "is"})
    assert _pairs(index, "cat") == [("a", 3)]
    assert _pairs(index, "dog") == [("b", 2), ("a", 1)]


def test_missing_noise_file(tmp_path):
    with pytest.raises(SourceUnavailableError):
        make_index(DATA / "docs.txt", tmp_path / "nope.txt")


def test_missing_document_aborts_build(tmp_path):
    (tmp_path / "docs.txt").write_text("one.txt\ngone.txt\n", encoding="utf-8")
    (tmp_path / "one.txt").write_text("cat dog\n", encoding="utf-8")
    (tmp_path / "noise.txt").write_text("the\n", encoding="utf-8")
    with pytest.raises(SourceUnavailableError):
        make_index(tmp_path / "docs.txt", tmp_path / "noise.txt")


def test_file_documents_resolve_against_list_dir(tmp_path):
    sub = tmp_path / "corpus"
    sub.mkdir()
    (sub / "docs.txt").write_text("x.txt", encoding="utf-8")
    (sub / "x.txt").write_text("Hello world\nagain", encoding="utf-8")
    [(name, tokens)] = list(file_documents(sub / "docs.txt"))
    assert name == "x.txt"
    assert list(tokens) == ["Hello", "world", "again"]


def test_noise_words_lowercased(tmp_path):
    p = tmp_path / "noise.txt"
    p.write_text("The IS\nof", encoding="utf-8")
    assert load_noise_words(p) == {"the", "is", "of"}


def test_jsonl_documents(tmp_path):
    p = tmp_path / "docs.jsonl"
    p.write_text('{"id": "d1", "text": "cat cat"}\n\n{"id": "d2", "text": "cat"}\n', encoding="utf-8")
    index = build_index(load_jsonl_documents(p), set())
    assert _pairs(index, "cat") == [("d1", 2), ("d2", 1)]
