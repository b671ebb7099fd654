"""
Open reading frame (ORF) detection on the three forward frames.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple, Union

from genolyze.sequence.alphabet import (
    SequenceKind,
    SequenceLike,
    resolve_sequence,
    rna_to_dna,
)
from genolyze.utils.genetic_code import STOP_SYMBOL, is_start_codon, lookup_codon
from genolyze.utils.numeric import round_half_up, safe_ratio

logger = logging.getLogger(__name__)

MIN_ORF_PROTEIN_LENGTH = 5
COVERAGE_DIGITS = 1


@dataclass(frozen=True)
class ORF:
    """
    A start-to-stop span in one forward reading frame.

    Attributes:
        start: 0-based index of the first base of the start codon
        end: 0-based index of the last base of the stop codon
        frame: Reading frame, 1-based (1, 2 or 3)
        protein: Translated residues from the start codon up to, but
            excluding, the stop
    """
    start: int
    end: int
    frame: int
    protein: str

    @property
    def length(self) -> int:
        """Protein length in residues."""
        return len(self.protein)

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "end": self.end,
            "frame": self.frame,
            "protein": self.protein,
        }


@dataclass(frozen=True)
class OrfReport:
    """ORFs of a sequence together with summary figures."""
    orfs: Tuple[ORF, ...]
    sequence_length: int
    coverage: float
    frame_distribution: Mapping[int, int] = field(hash=False)

    @property
    def total_orfs(self) -> int:
        return len(self.orfs)

    @property
    def longest(self) -> Optional[ORF]:
        return self.orfs[0] if self.orfs else None

    def to_dict(self) -> dict:
        return {
            "orfs": [orf.to_dict() for orf in self.orfs],
            "total_orfs": self.total_orfs,
            "sequence_length": self.sequence_length,
            "coverage": self.coverage,
            "frame_distribution": dict(self.frame_distribution),
        }


def find_orfs(
    sequence: SequenceLike,
    kind: Union[str, SequenceKind, None] = None,
    min_protein_length: int = MIN_ORF_PROTEIN_LENGTH
) -> List[ORF]:
    """
    Find ORFs in the three forward reading frames.

    Each frame is scanned codon by codon. An ATG opens an ORF when none
    is open in that frame; while open, residues are collected until a
    stop codon closes it. Closed ORFs shorter than `min_protein_length`
    residues are dropped, as is an ORF still open at the end of the
    sequence. Scanning then resumes for a new start in the same frame.

    Args:
        sequence: DNA or RNA sequence
        kind: Declared kind; a sequence containing U is treated as RNA
        min_protein_length: Minimum protein length in residues

    Returns:
        ORFs sorted by protein length, longest first; ties keep
        discovery order (frame, then position)

    Example:
        >>> orfs = find_orfs("ATGAAACCCGGGTTTCATTAA")
        >>> orfs[0].protein, orfs[0].start, orfs[0].end, orfs[0].frame
        ('MKPGFH', 0, 20, 1)
    """
    seq, kind = resolve_sequence(sequence, kind)
    if kind is SequenceKind.RNA or "U" in seq:
        seq = rna_to_dna(seq)

    orfs: List[ORF] = []
    for offset in range(3):
        orfs.extend(_scan_frame(seq, offset, min_protein_length))

    orfs.sort(key=lambda orf: orf.length, reverse=True)
    logger.debug("Found %d ORFs >= %d aa in %d nt", len(orfs), min_protein_length, len(seq))
    return orfs


def _scan_frame(seq: str, offset: int, min_protein_length: int) -> List[ORF]:
    found = []
    start = -1
    residues: List[str] = []

    for i in range(offset, len(seq) - 2, 3):
        codon = seq[i:i + 3]
        aa = lookup_codon(codon)

        if start == -1:
            if is_start_codon(codon):
                start = i
                residues = [aa]
        elif aa == STOP_SYMBOL:
            if len(residues) >= min_protein_length:
                found.append(ORF(
                    start=start, end=i + 2, frame=offset + 1, protein="".join(residues)
                ))
            start = -1
            residues = []
        elif aa is not None:
            residues.append(aa)

    return found


def summarize_orfs(
    sequence: SequenceLike,
    kind: Union[str, SequenceKind, None] = None,
    min_protein_length: int = MIN_ORF_PROTEIN_LENGTH
) -> OrfReport:
    """
    Find ORFs and summarize them.

    Coverage is the summed ORF span (end - start) as a percentage of the
    sequence length; frame_distribution counts ORFs per frame in
    ascending frame order.
    """
    seq, kind = resolve_sequence(sequence, kind)
    orfs = find_orfs(seq, kind, min_protein_length)

    spanned = sum(orf.end - orf.start for orf in orfs)
    distribution: Dict[int, int] = {}
    for orf in sorted(orfs, key=lambda o: o.frame):
        distribution[orf.frame] = distribution.get(orf.frame, 0) + 1

    return OrfReport(
        orfs=tuple(orfs),
        sequence_length=len(seq),
        coverage=round_half_up(safe_ratio(spanned, len(seq)) * 100, COVERAGE_DIGITS),
        frame_distribution=MappingProxyType(distribution),
    )
