"""
Base composition and GC statistics for DNA/RNA sequences.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Union

from genolyze.sequence.alphabet import SequenceKind, SequenceLike, resolve_sequence
from genolyze.utils.numeric import round_half_up, safe_ratio

logger = logging.getLogger(__name__)

PERCENT_DIGITS = 2
SKEW_DIGITS = 3


@dataclass(frozen=True)
class CompositionResult:
    """
    Base counts and derived GC/AT statistics.

    Attributes:
        composition: Counts keyed A, T (or U), G, C
        gc_content: (G + C) / length, percent
        at_content: (A + T) / length (A + U for RNA), percent
        gc_skew: (G - C) / (G + C)
        at_skew: (A - T) / (A + T) (A - U for RNA)
        length: Sequence length
        is_rna: Whether U was counted in place of T
    """
    composition: Mapping[str, int] = field(hash=False)
    gc_content: float
    at_content: float
    gc_skew: float
    at_skew: float
    length: int
    is_rna: bool = False

    def to_dict(self) -> dict:
        return {
            "composition": dict(self.composition),
            "gc_content": self.gc_content,
            "at_content": self.at_content,
            "gc_skew": self.gc_skew,
            "at_skew": self.at_skew,
            "length": self.length,
            "is_rna": self.is_rna,
        }


def composition(
    sequence: SequenceLike,
    kind: Union[str, SequenceKind, None] = None
) -> CompositionResult:
    """
    Count bases and compute GC/AT content and skew.

    A sequence containing U is treated as RNA whatever its declared
    kind. Empty sequences give zero percentages, and skews whose
    denominator is zero are reported as 0.

    Args:
        sequence: DNA or RNA sequence
        kind: Declared kind (defaults to DNA for plain strings)

    Returns:
        CompositionResult

    Example:
        >>> result = composition("ATGCGTAA")
        >>> result.composition
        {'A': 3, 'T': 2, 'G': 2, 'C': 1}
        >>> result.gc_content
        37.5
    """
    seq, kind = resolve_sequence(sequence, kind)
    is_rna = kind is SequenceKind.RNA or "U" in seq
    weak = "U" if is_rna else "T"

    counts = {
        "A": seq.count("A"),
        weak: seq.count(weak),
        "G": seq.count("G"),
        "C": seq.count("C"),
    }
    length = len(seq)

    a, t, g, c = counts["A"], counts[weak], counts["G"], counts["C"]

    result = CompositionResult(
        composition=MappingProxyType(counts),
        gc_content=round_half_up(safe_ratio(g + c, length) * 100, PERCENT_DIGITS),
        at_content=round_half_up(safe_ratio(a + t, length) * 100, PERCENT_DIGITS),
        gc_skew=round_half_up(safe_ratio(g - c, g + c), SKEW_DIGITS),
        at_skew=round_half_up(safe_ratio(a - t, a + t), SKEW_DIGITS),
        length=length,
        is_rna=is_rna,
    )
    logger.debug("Composition of %d nt: GC %.2f%%", length, result.gc_content)
    return result


def gc_content(
    sequence: SequenceLike,
    kind: Optional[Union[str, SequenceKind]] = None
) -> float:
    """GC content in percent; shorthand for composition(...).gc_content."""
    return composition(sequence, kind).gc_content
