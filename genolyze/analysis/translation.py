"""
Reading-frame translation of nucleotide sequences.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Mapping, Union

from genolyze.analysis.protein import protein_properties
from genolyze.sequence.alphabet import (
    SequenceKind,
    SequenceLike,
    resolve_sequence,
    rna_to_dna,
)
from genolyze.utils.genetic_code import translate_codon

logger = logging.getLogger(__name__)

FRAMES = (0, 1, 2)


@dataclass(frozen=True)
class TranslationResult:
    """
    Protein translated from one reading frame.

    Attributes:
        protein: Amino acid sequence; stops appear as "*", codons with no
            table entry as "X"
        length: Number of residues (stops included)
        molecular_weight: Sum of residue weights (Da)
        isoelectric_point: Simplified pI estimate
        hydropathy: Mean hydropathy of the standard residues
        composition: Residue -> count
        frame: 0-based nucleotide offset translation started from
    """
    protein: str
    length: int
    molecular_weight: float
    isoelectric_point: float
    hydropathy: float
    composition: Mapping[str, int] = field(hash=False)
    frame: int = 0

    def to_dict(self) -> dict:
        return {
            "protein": self.protein,
            "length": self.length,
            "molecular_weight": self.molecular_weight,
            "isoelectric_point": self.isoelectric_point,
            "hydropathy": self.hydropathy,
            "composition": dict(self.composition),
            "frame": self.frame,
        }


def translate(
    sequence: SequenceLike,
    frame: int = 0,
    kind: Union[str, SequenceKind, None] = None
) -> TranslationResult:
    """
    Translate a DNA/RNA sequence from the given frame offset.

    Translation does not stop at stop codons: every complete codon is
    translated and stops are kept as "*". A trailing partial codon is
    ignored.

    Args:
        sequence: DNA or RNA sequence
        frame: Nucleotide offset to start from (0, 1 or 2)
        kind: Declared kind; a sequence containing U is treated as RNA

    Returns:
        TranslationResult

    Raises:
        ValueError: If frame is not 0, 1 or 2

    Example:
        >>> translate("ATGAAATAG").protein
        'MK*'
        >>> translate("AUGGCC", kind="rna").protein
        'MA'
    """
    if isinstance(frame, bool) or not isinstance(frame, int) or frame not in FRAMES:
        raise ValueError(f"Invalid frame: {frame} (expected 0, 1 or 2)")

    seq, kind = resolve_sequence(sequence, kind)
    if kind is SequenceKind.RNA or "U" in seq:
        seq = rna_to_dna(seq)

    protein = [translate_codon(seq[i:i + 3]) for i in range(frame, len(seq) - 2, 3)]

    props = protein_properties("".join(protein))
    logger.debug("Translated frame %d: %d codons", frame, props.length)

    return TranslationResult(
        protein=props.sequence,
        length=props.length,
        molecular_weight=props.molecular_weight,
        isoelectric_point=props.isoelectric_point,
        hydropathy=props.hydropathy,
        composition=props.composition,
        frame=frame,
    )


def translate_frames(
    sequence: SequenceLike,
    kind: Union[str, SequenceKind, None] = None
) -> List[TranslationResult]:
    """Translate all three forward reading frames, in frame order."""
    return [translate(sequence, frame, kind) for frame in FRAMES]
