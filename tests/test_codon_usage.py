"""Tests for codon usage statistics."""

import pytest

from genolyze.analysis import codon_usage


def test_counts_codons_and_amino_acids():
    usage = codon_usage("ATGAAAAAGTAA")
    assert usage.codons == {"ATG": 1, "AAA": 1, "AAG": 1, "TAA": 1}
    assert usage.amino_acids == {"M": 1, "K": 2, "*": 1}
    assert usage.total_codons == 4


@pytest.mark.parametrize("seq", ["", "A", "AT", "ATG", "ATGA", "ATGAA", "ATGAAAC"])
def test_total_codons_is_floor_of_length(seq):
    assert codon_usage(seq).total_codons == len(seq) // 3


def test_rna_codons_keep_u():
    usage = codon_usage("AUGUUUUAG", "rna")
    assert list(usage.codons) == ["AUG", "UUU", "UAG"]
    assert usage.amino_acids == {"M": 1, "F": 1, "*": 1}


def test_ranking_ties_keep_first_seen_order():
    # CCC x2, then GGG, AAA, TTT, ACG, TGC once each
    usage = codon_usage("GGGCCCAAACCCTTTACGTGC")
    assert usage.most_frequent == ("CCC", "GGG", "AAA", "TTT", "ACG")
    assert usage.least_frequent == ("GGG", "AAA", "TTT", "ACG", "TGC")


def test_top_n_is_configurable():
    usage = codon_usage("AAACCCGGG", top_n=2)
    assert usage.most_frequent == ("AAA", "CCC")
    assert usage.least_frequent == ("CCC", "GGG")


def test_codon_bias():
    # Single codon: |1 - 1/64| = 0.984375
    assert codon_usage("AAAAAA").codon_bias == 0.984
    # Two codons at 1/2 each: |0.5 - 1/64| = 0.484375
    assert codon_usage("AAACCC").codon_bias == 0.484


def test_empty_sequence():
    usage = codon_usage("")
    assert usage.codons == {}
    assert usage.total_codons == 0
    assert usage.most_frequent == ()
    assert usage.least_frequent == ()
    assert usage.codon_bias == 0.0


def test_ambiguous_codons_count_without_amino_acid():
    usage = codon_usage("NNNATG")
    assert usage.codons == {"NNN": 1, "ATG": 1}
    assert usage.amino_acids == {"M": 1}


def test_results_are_read_only_and_serializable():
    usage = codon_usage("ATGATGCCC")
    with pytest.raises(TypeError):
        usage.codons["ATG"] = 0
    assert hash(usage) == hash(codon_usage("ATGATGCCC"))
    payload = usage.to_dict()
    assert payload["total_codons"] == 3
    assert payload["codons"] == {"ATG": 2, "CCC": 1}
