from littlesearch.sparse.normalize import Normalizer
from littlesearch.sparse.scanner import scan


def test_scan_counts_folded_variants():
    counts = scan("docA", iter(["Cat.", "cat", "cat,", "Dog!"]), Normalizer({"the", "is"}))
    assert {kw: o.frequency for kw, o in counts.items()} == {"cat": 3, "dog": 1}
    assert all(o.document == "docA" for o in counts.values())


def test_scan_skips_rejected_tokens():
    counts = scan("d", ["The", "is", "x1", "...", "owl"], Normalizer({"the", "is"}))
    assert list(counts) == ["owl"]


def test_scan_empty_document():
    assert scan("d", [], Normalizer()) == {}
