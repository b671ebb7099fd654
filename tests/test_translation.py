"""Tests for reading-frame translation and protein properties."""

import pytest

from genolyze.analysis import protein_properties, translate, translate_frames


def test_stop_codons_are_kept_in_protein():
    result = translate("ATGAAATAG", 0, "dna")
    assert result.protein == "MK*"
    assert result.length == 3
    assert result.composition == {"M": 1, "K": 1, "*": 1}


def test_properties_exclude_stop_from_averages():
    result = translate("ATGAAATAG")
    assert result.molecular_weight == pytest.approx(295.4)
    assert result.hydropathy == pytest.approx(-1.0)
    assert result.isoelectric_point == 7.5


@pytest.mark.parametrize("frame,expected", [
    (0, "MAK"),
    (1, "WPS"),
    (2, "GQ"),
])
def test_frame_offsets(frame, expected):
    # ATG GCC AAG C / TGG CCA AGC / GGC CAA
    result = translate("ATGGCCAAGC", frame)
    assert result.protein == expected
    assert result.frame == frame


def test_rna_is_canonicalized():
    assert translate("AUGGCCUAA", kind="rna").protein == "MA*"
    # U in the text is enough, whatever the declared kind
    assert translate("AUGGCC", kind="dna").protein == "MA"


def test_unknown_codons_become_x():
    result = translate("ATGNNNGCC")
    assert result.protein == "MXA"
    assert result.molecular_weight == pytest.approx(149.2 + 89.1)
    assert result.hydropathy == pytest.approx((1.9 + 1.8) / 2, abs=0.005)


def test_empty_and_short_input():
    for seq in ("", "AT"):
        result = translate(seq)
        assert result.protein == ""
        assert result.length == 0
        assert result.molecular_weight == 0.0
        assert result.hydropathy == 0.0
        assert result.isoelectric_point == 7.0


@pytest.mark.parametrize("frame", [-1, 3, 10, 1.0, True, "1"])
def test_invalid_frame_raises(frame):
    with pytest.raises(ValueError, match="Invalid frame"):
        translate("ATGAAA", frame)


def test_translate_frames_covers_three_offsets():
    results = translate_frames("ATGGCCAAGC")
    assert [r.frame for r in results] == [0, 1, 2]
    assert [r.protein for r in results] == ["MAK", "WPS", "GQ"]


def test_isoelectric_point_estimate():
    # R, K, H basic (3); D, E acidic (2) -> 7 + 0.5
    assert protein_properties("RKHDE").isoelectric_point == 7.5
    assert protein_properties("DDDD").isoelectric_point == 5.0
    assert protein_properties("").isoelectric_point == 7.0


def test_protein_properties_standalone():
    props = protein_properties(" mk w\n*")
    assert props.sequence == "MKW*"
    assert props.length == 4
    assert props.composition == {"M": 1, "K": 1, "W": 1, "*": 1}
    assert props.molecular_weight == pytest.approx(149.2 + 146.2 + 204.2)
    assert props.hydropathy == pytest.approx(-0.97)


def test_protein_properties_match_translation():
    translated = translate("ATGCGTGATGAATGGTAA")
    props = protein_properties(translated.protein)
    assert props.molecular_weight == translated.molecular_weight
    assert props.isoelectric_point == translated.isoelectric_point
    assert props.hydropathy == translated.hydropathy
    assert props.composition == translated.composition


def test_to_dict():
    payload = translate("ATGAAA").to_dict()
    assert payload["protein"] == "MK"
    assert payload["frame"] == 0
    assert protein_properties("MK").to_dict()["length"] == 2


def test_results_are_read_only():
    result = translate("ATGAAA")
    with pytest.raises(TypeError):
        result.composition["M"] = 5
    assert hash(result) == hash(translate("ATGAAA"))
    with pytest.raises(TypeError):
        protein_properties("MK").composition["K"] = 0
