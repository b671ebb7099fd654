"""
Registry of the available analyses and a dispatcher that checks inputs
before running them.

This is the caller-side gate: sequences are validated against their
declared kind and matched to the kinds each analysis supports, and
problems are raised as exceptions instead of reaching the analyzers.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, List, Sequence, Union

from genolyze.analysis.codon_usage import codon_usage
from genolyze.analysis.composition import composition
from genolyze.analysis.mutations import compare_mutations
from genolyze.analysis.orfs import summarize_orfs
from genolyze.analysis.protein import protein_properties
from genolyze.analysis.translation import translate_frames
from genolyze.exceptions import AnalysisError, UnknownAnalysisError, UnsupportedKindError
from genolyze.sequence.alphabet import NormalizedSequence, SequenceKind, require_valid

logger = logging.getLogger(__name__)

NUCLEOTIDE_KINDS = frozenset({SequenceKind.DNA, SequenceKind.RNA})
ALL_KINDS = frozenset(SequenceKind)


@dataclass(frozen=True)
class AnalysisTool:
    """
    An analysis that can be run through run_analysis().

    Attributes:
        id: Identifier used to request the analysis
        name: Human-readable name
        supported_kinds: Sequence kinds the analysis accepts
        min_sequences: Number of sequences it consumes
        runner: Callable taking the validated sequences
    """
    id: str
    name: str
    supported_kinds: FrozenSet[SequenceKind]
    runner: Callable[[List[NormalizedSequence]], Any]
    min_sequences: int = 1

    def supports(self, kind: Union[str, SequenceKind]) -> bool:
        return SequenceKind.parse(kind) in self.supported_kinds


def _run_gc_content(seqs):
    return composition(seqs[0])


def _run_codon_usage(seqs):
    return codon_usage(seqs[0])


def _run_translation(seqs):
    return translate_frames(seqs[0])


def _run_orf_finder(seqs):
    return summarize_orfs(seqs[0])


def _run_mutation_analysis(seqs):
    return compare_mutations(seqs[0], seqs[1])


def _run_protein_analysis(seqs):
    return protein_properties(seqs[0].sequence)


ANALYSIS_TOOLS: Dict[str, AnalysisTool] = {
    tool.id: tool
    for tool in (
        AnalysisTool("gc-content", "GC Content Analysis", NUCLEOTIDE_KINDS, _run_gc_content),
        AnalysisTool("codon-usage", "Codon Usage Analysis", NUCLEOTIDE_KINDS, _run_codon_usage),
        AnalysisTool("translation", "Amino Acid Translation", NUCLEOTIDE_KINDS, _run_translation),
        AnalysisTool("orf-finder", "ORF Identification", NUCLEOTIDE_KINDS, _run_orf_finder),
        AnalysisTool(
            "mutation-analysis", "Mutation Comparison", ALL_KINDS,
            _run_mutation_analysis, min_sequences=2,
        ),
        AnalysisTool(
            "protein-analysis", "Protein Analysis",
            frozenset({SequenceKind.PROTEIN}), _run_protein_analysis,
        ),
    )
}


def get_tool(analysis_type: str) -> AnalysisTool:
    """
    Look up an analysis by id.

    Raises:
        UnknownAnalysisError: If no analysis has that id
    """
    try:
        return ANALYSIS_TOOLS[analysis_type]
    except KeyError:
        raise UnknownAnalysisError(
            f"Unknown analysis type: {analysis_type!r} "
            f"(available: {', '.join(ANALYSIS_TOOLS)})"
        ) from None


def run_analysis(
    analysis_type: str,
    sequences: Sequence[Union[NormalizedSequence, str]]
) -> Any:
    """
    Validate the inputs and run one analysis.

    Args:
        analysis_type: Analysis id, e.g. "gc-content" or "orf-finder"
        sequences: Input sequences; plain strings are taken as DNA.
            Every sequence is checked, including ones past those the
            analysis consumes

    Returns:
        The analysis result (a list of TranslationResult for
        "translation", an OrfReport for "orf-finder")

    Raises:
        UnknownAnalysisError: If the analysis id is not registered
        InvalidSequenceError: If a sequence fails alphabet validation
        UnsupportedKindError: If a sequence kind is not supported
        AnalysisError: If too few sequences are given
    """
    tool = get_tool(analysis_type)

    if len(sequences) < tool.min_sequences:
        raise AnalysisError(
            f"{tool.name} needs {tool.min_sequences} sequence(s), got {len(sequences)}"
        )

    validated = [require_valid(seq) for seq in sequences]

    for seq in validated:
        if not tool.supports(seq.kind):
            supported = ", ".join(sorted(k.value.upper() for k in tool.supported_kinds))
            logger.warning("%s rejected %s input", tool.id, seq.kind.value)
            raise UnsupportedKindError(
                f"{tool.name} does not support {seq.kind.value.upper()} sequences. "
                f"Supported types: {supported}"
            )

    logger.info("Running %s on %d sequence(s)", tool.id, len(validated))
    return tool.runner(validated)
