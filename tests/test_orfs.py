"""Tests for ORF detection."""

import pytest

from genolyze.analysis import find_orfs, summarize_orfs

# ATG AAA CCC GGG TTT CAT TAA : MKPGFH
SIX_AA_ORF = "ATGAAACCCGGGTTTCATTAA"


def test_finds_orf_in_first_frame():
    orfs = find_orfs(SIX_AA_ORF)
    assert len(orfs) == 1
    orf = orfs[0]
    assert (orf.start, orf.end, orf.frame) == (0, 20, 1)
    assert orf.protein == "MKPGFH"
    assert orf.length == 6


def test_short_orf_is_excluded():
    # MKG is only 3 residues
    assert find_orfs("ATGAAAGGGTAATAG", "dna") == []


def test_orf_without_stop_is_dropped():
    assert find_orfs("ATGAAACCCGGGTTTCAT") == []


def test_reported_positions_in_other_frames():
    orfs = find_orfs("CC" + SIX_AA_ORF)
    assert len(orfs) == 1
    assert (orfs[0].start, orfs[0].end, orfs[0].frame) == (2, 22, 3)


def test_inner_atg_does_not_restart():
    # ATG AAA ATG CCC GGG TTT TGA : MKMPGF
    orfs = find_orfs("ATGAAAATGCCCGGGTTTTGA")
    assert [o.protein for o in orfs] == ["MKMPGF"]


def test_scanning_resumes_after_stop():
    seq = SIX_AA_ORF + "ATG" + "CCC" * 7 + "TAG"
    orfs = find_orfs(seq)
    assert [o.protein for o in orfs] == ["MPPPPPPP", "MKPGFH"]
    assert orfs[0].start == 21


def test_sorted_by_length_with_stable_ties():
    # two 5-residue ORFs in frame 1, the second one later
    first = "ATG" + "AAA" * 4 + "TAA"
    second = "ATG" + "CCC" * 4 + "TAA"
    orfs = find_orfs(first + second)
    assert [o.protein for o in orfs] == ["MKKKK", "MPPPP"]
    assert orfs[0].start < orfs[1].start


def test_equal_length_ties_order_by_frame_before_position():
    # MPPPP starts at 1 in frame 2, MKKKK at 21 in frame 1
    seq = "C" + "ATG" + "CCC" * 4 + "TAA" + "GG" + "ATG" + "AAA" * 4 + "TAG"
    orfs = find_orfs(seq)
    assert [(o.frame, o.start, o.protein) for o in orfs] == [
        (1, 21, "MKKKK"),
        (2, 1, "MPPPP"),
    ]


def test_overlapping_orfs_in_different_frames():
    # frame 1: ATG CAT GCC GCC GCC GCC GTA AGG TAA
    # frame 2:      ATG CCG CCG CCG CCG TAA
    seq = "ATGCATG" + "CCG" * 4 + "TAAGGTAA"
    orfs = find_orfs(seq)
    assert [(o.frame, o.start, o.end, o.protein) for o in orfs] == [
        (1, 0, 26, "MHAAAAVR"),
        (2, 4, 21, "MPPPP"),
    ]


def test_every_orf_ends_at_a_stop_codon():
    seq = SIX_AA_ORF + "GG" + SIX_AA_ORF + "ATG" + "CCC" * 5 + "TGA"
    for orf in find_orfs(seq):
        assert orf.length >= 5
        assert seq[orf.end - 2:orf.end + 1] in {"TAA", "TAG", "TGA"}
        assert seq[orf.start:orf.start + 3] == "ATG"


def test_rna_input():
    rna = SIX_AA_ORF.replace("T", "U")
    orfs = find_orfs(rna, "rna")
    assert orfs[0].protein == "MKPGFH"


def test_min_protein_length_is_configurable():
    assert len(find_orfs("ATGAAAGGGTAA", min_protein_length=3)) == 1


def test_empty_sequence():
    assert find_orfs("") == []


def test_summary():
    report = summarize_orfs("CC" + SIX_AA_ORF)
    assert report.total_orfs == 1
    assert report.longest.protein == "MKPGFH"
    assert report.sequence_length == 23
    # span 22 - 2 = 20 of 23 nt
    assert report.coverage == 87.0
    assert report.frame_distribution == {3: 1}
    assert report.to_dict()["orfs"][0]["frame"] == 3


def test_summary_without_orfs():
    report = summarize_orfs("AAAA")
    assert report.total_orfs == 0
    assert report.longest is None
    assert report.coverage == 0.0
    assert report.frame_distribution == {}


def test_report_is_read_only():
    report = summarize_orfs("CC" + SIX_AA_ORF)
    assert isinstance(report.orfs, tuple)
    with pytest.raises(TypeError):
        report.frame_distribution[1] = 5
    hash(report)
