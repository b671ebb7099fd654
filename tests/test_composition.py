"""Tests for base composition and GC statistics."""

import pytest

from genolyze.analysis import composition, gc_content
from genolyze.sequence import normalize


def test_example_dna_composition():
    result = composition("ATGCGTAA", "dna")
    assert result.composition == {"A": 3, "T": 2, "G": 2, "C": 1}
    assert result.gc_content == 37.5
    assert result.at_content == 62.5
    assert result.length == 8
    assert not result.is_rna


def test_skews_are_rounded_to_three_decimals():
    # G=2, C=1 -> 1/3; A=3, T=2 -> 1/5
    result = composition("ATGCGTAA")
    assert result.gc_skew == 0.333
    assert result.at_skew == 0.2


def test_negative_skew():
    result = composition("CCCG")
    assert result.gc_skew == -0.5
    assert result.at_skew == 0.0


def test_rna_counts_u():
    result = composition("AUGCUU", "rna")
    assert result.composition == {"A": 1, "U": 3, "G": 1, "C": 1}
    assert result.is_rna
    assert result.at_content == pytest.approx(66.67)


def test_mislabelled_rna_is_detected():
    result = composition("AUGC", "dna")
    assert "U" in result.composition
    assert "T" not in result.composition


def test_empty_sequence_gives_zeros():
    result = composition("")
    assert result.length == 0
    assert result.gc_content == 0.0
    assert result.at_content == 0.0
    assert result.gc_skew == 0.0
    assert result.at_skew == 0.0
    assert sum(result.composition.values()) == 0


def test_zero_denominator_skew_is_zero():
    result = composition("AAAA")
    assert result.gc_skew == 0.0
    assert result.at_skew == 1.0


@pytest.mark.parametrize("seq", ["ACGT", "GGGCCCAAT", "A" * 7 + "C" * 3, "ATATATGC"])
def test_counts_sum_to_length(seq):
    result = composition(seq)
    assert sum(result.composition.values()) == result.length == len(seq)
    assert result.gc_content + result.at_content <= 100.0 + 0.01


def test_accepts_normalized_sequence():
    seq = normalize(">h\nacgu\n", "rna")
    result = composition(seq)
    assert result.is_rna
    assert result.composition["U"] == 1


def test_gc_content_shorthand_and_to_dict():
    assert gc_content("GGCC") == 100.0
    payload = composition("GC").to_dict()
    assert payload["composition"] == {"A": 0, "T": 0, "G": 1, "C": 1}
    assert payload["gc_skew"] == 0.0


def test_result_is_read_only_and_hashable():
    result = composition("ATGC")
    with pytest.raises(TypeError):
        result.composition["A"] = 99
    assert result.composition["A"] == 1
    assert hash(result) == hash(composition("ATGC"))
