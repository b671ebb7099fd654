"""
Codon usage statistics.

The sequence is split into non-overlapping triplets from offset 0; a
trailing partial codon is ignored. Codons are reported in the input's
own alphabet (RNA codons keep their U) while lookups go through the
DNA genetic code.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Union

import numpy as np

from genolyze.sequence.alphabet import (
    SequenceKind,
    SequenceLike,
    dna_to_rna,
    resolve_sequence,
    rna_to_dna,
)
from genolyze.utils.genetic_code import lookup_codon
from genolyze.utils.numeric import round_half_up

logger = logging.getLogger(__name__)

TOP_CODONS = 5
BIAS_DIGITS = 3
EXPECTED_CODON_FREQUENCY = 1 / 64


@dataclass(frozen=True)
class CodonUsageResult:
    """
    Codon and amino acid usage of a nucleotide sequence.

    Attributes:
        codons: Codon -> count, in first-seen order
        amino_acids: Amino acid -> count, in first-seen order
        total_codons: Number of complete codons
        most_frequent: Leading codons of the ranking
        least_frequent: Trailing codons of the ranking
        codon_bias: Mean |observed - 1/64| over the observed codons
    """
    codons: Mapping[str, int] = field(hash=False)
    amino_acids: Mapping[str, int] = field(hash=False)
    total_codons: int
    most_frequent: Tuple[str, ...]
    least_frequent: Tuple[str, ...]
    codon_bias: float

    def to_dict(self) -> dict:
        return {
            "codons": dict(self.codons),
            "amino_acids": dict(self.amino_acids),
            "total_codons": self.total_codons,
            "most_frequent": list(self.most_frequent),
            "least_frequent": list(self.least_frequent),
            "codon_bias": self.codon_bias,
        }


def codon_usage(
    sequence: SequenceLike,
    kind: Union[str, SequenceKind, None] = None,
    top_n: int = TOP_CODONS
) -> CodonUsageResult:
    """
    Tabulate codon and amino acid usage.

    Ranking is by descending count; ties keep first-seen order (the
    sort is stable), so the output is reproducible. `least_frequent` is
    the tail of that same ranking.

    Args:
        sequence: DNA or RNA sequence
        kind: Declared kind; a sequence containing U is treated as RNA
        top_n: Length of the most/least frequent lists

    Returns:
        CodonUsageResult

    Example:
        >>> usage = codon_usage("AUGAAAUAG", "rna")
        >>> usage.codons
        {'AUG': 1, 'AAA': 1, 'UAG': 1}
        >>> usage.amino_acids
        {'M': 1, 'K': 1, '*': 1}
    """
    seq, kind = resolve_sequence(sequence, kind)
    is_rna = kind is SequenceKind.RNA or "U" in seq
    if is_rna:
        seq = rna_to_dna(seq)

    codons: Dict[str, int] = {}
    amino_acids: Dict[str, int] = {}

    for i in range(0, len(seq) - 2, 3):
        codon = seq[i:i + 3]
        display_codon = dna_to_rna(codon) if is_rna else codon
        codons[display_codon] = codons.get(display_codon, 0) + 1

        aa = lookup_codon(codon)
        if aa is not None:
            amino_acids[aa] = amino_acids.get(aa, 0) + 1

    total = sum(codons.values())
    ranked = sorted(codons, key=codons.get, reverse=True)

    return CodonUsageResult(
        codons=MappingProxyType(codons),
        amino_acids=MappingProxyType(amino_acids),
        total_codons=total,
        most_frequent=tuple(ranked[:top_n]),
        least_frequent=tuple(ranked[-top_n:]) if top_n > 0 else (),
        codon_bias=_codon_bias(codons, total),
    )


def _codon_bias(codons: Dict[str, int], total: int) -> float:
    """Mean absolute deviation of observed codon frequencies from 1/64."""
    if total == 0:
        return 0.0

    observed = np.fromiter(codons.values(), dtype=np.float64) / total
    bias = np.mean(np.abs(observed - EXPECTED_CODON_FREQUENCY))
    logger.debug("Codon bias over %d distinct codons: %.4f", len(codons), bias)
    return round_half_up(float(bias), BIAS_DIGITS)
