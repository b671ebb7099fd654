"""
Positional mutation comparison between a reference and a query.

Sequences are compared index by index, without alignment: one upstream
insertion or deletion shifts every later position and shows up as a
run of substitutions. That is the intended behavior of this comparator.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from genolyze.sequence.alphabet import SequenceLike, clean_sequence
from genolyze.utils.genetic_code import STOP_SYMBOL, lookup_codon
from genolyze.utils.numeric import safe_ratio

logger = logging.getLogger(__name__)


class MutationType(str, Enum):
    SUBSTITUTION = "substitution"
    INSERTION = "insertion"
    DELETION = "deletion"


class MutationEffect(str, Enum):
    SYNONYMOUS = "synonymous"
    MISSENSE = "missense"
    NONSENSE = "nonsense"
    FRAMESHIFT = "frameshift"


@dataclass(frozen=True)
class Mutation:
    """
    A single positional difference.

    For insertions `original` is empty; for deletions `mutated` is.
    """
    position: int
    original: str
    mutated: str
    type: MutationType
    effect: MutationEffect

    def to_dict(self) -> dict:
        return {
            "position": self.position,
            "original": self.original,
            "mutated": self.mutated,
            "type": self.type.value,
            "effect": self.effect.value,
        }


@dataclass(frozen=True)
class MutationAnalysis:
    mutations: Tuple[Mutation, ...]
    total_mutations: int
    mutation_rate: float

    def to_dict(self) -> dict:
        return {
            "mutations": [m.to_dict() for m in self.mutations],
            "total_mutations": self.total_mutations,
            "mutation_rate": self.mutation_rate,
        }


def compare_mutations(reference: SequenceLike, query: SequenceLike) -> MutationAnalysis:
    """
    List every position where `query` differs from `reference`.

    Substitutions are classified by re-translating the codon that holds
    the position (codon start = position // 3 * 3) in both sequences:
    the same amino acid is synonymous, a stop in the query is nonsense,
    anything else is missense. When either codon window runs past the
    end of its sequence the effect is missense. Positions present in
    only one sequence are insertions (query longer) or deletions
    (reference longer), always with a frameshift effect.

    Args:
        reference: Original sequence
        query: Mutated sequence

    Returns:
        MutationAnalysis; mutation_rate is the mutation count as a
        percentage of the longer sequence's length

    Example:
        >>> analysis = compare_mutations("ATGC", "ATGG")
        >>> [(m.position, m.type.value, m.effect.value) for m in analysis.mutations]
        [(3, 'substitution', 'missense')]
    """
    ref = clean_sequence(reference)
    qry = clean_sequence(query)
    max_length = max(len(ref), len(qry))

    mutations = []
    for i in range(max_length):
        ref_base = ref[i] if i < len(ref) else ""
        qry_base = qry[i] if i < len(qry) else ""

        if ref_base == qry_base:
            continue

        if not ref_base:
            mutation_type = MutationType.INSERTION
            effect = MutationEffect.FRAMESHIFT
        elif not qry_base:
            mutation_type = MutationType.DELETION
            effect = MutationEffect.FRAMESHIFT
        else:
            mutation_type = MutationType.SUBSTITUTION
            effect = _substitution_effect(ref, qry, i)

        mutations.append(Mutation(i, ref_base, qry_base, mutation_type, effect))

    logger.debug("Compared %d/%d nt: %d mutations", len(ref), len(qry), len(mutations))
    return MutationAnalysis(
        mutations=tuple(mutations),
        total_mutations=len(mutations),
        mutation_rate=safe_ratio(len(mutations), max_length) * 100,
    )


def _substitution_effect(ref: str, qry: str, position: int) -> MutationEffect:
    codon_start = position // 3 * 3
    ref_codon = ref[codon_start:codon_start + 3]
    qry_codon = qry[codon_start:codon_start + 3]

    if len(ref_codon) < 3 or len(qry_codon) < 3:
        return MutationEffect.MISSENSE

    ref_aa: Optional[str] = lookup_codon(ref_codon)
    qry_aa: Optional[str] = lookup_codon(qry_codon)

    if ref_aa == qry_aa:
        return MutationEffect.SYNONYMOUS
    if qry_aa == STOP_SYMBOL:
        return MutationEffect.NONSENSE
    return MutationEffect.MISSENSE
