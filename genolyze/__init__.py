"""
genolyze: biological sequence analysis

This package provides tools for:
- Normalizing and validating DNA, RNA and protein sequences
- Base composition, GC/AT content and skew
- Codon usage and codon bias
- Reading-frame translation and ORF detection
- Positional mutation comparison with coding effects
- Simplified protein properties (molecular weight, pI, hydropathy)

Every analysis is a pure function over its input and returns an
immutable result object with a to_dict() method.
"""

__version__ = "0.1.0"
__author__ = "genolyze Contributors"

from genolyze.sequence import (
    SequenceKind,
    NormalizedSequence,
    normalize,
    validate,
    require_valid,
    clean_sequence,
    rna_to_dna,
    dna_to_rna,
)

from genolyze.analysis import (
    composition,
    gc_content,
    codon_usage,
    translate,
    translate_frames,
    find_orfs,
    summarize_orfs,
    compare_mutations,
    protein_properties,
    run_analysis,
    CompositionResult,
    CodonUsageResult,
    TranslationResult,
    ORF,
    OrfReport,
    Mutation,
    MutationAnalysis,
    MutationType,
    MutationEffect,
    ProteinProperties,
)

from genolyze.exceptions import (
    GenolyzeError,
    InvalidSequenceError,
    AnalysisError,
    UnsupportedKindError,
    UnknownAnalysisError,
)

__all__ = [
    # Sequences
    "SequenceKind",
    "NormalizedSequence",
    "normalize",
    "validate",
    "require_valid",
    "clean_sequence",
    "rna_to_dna",
    "dna_to_rna",
    # Analyses
    "composition",
    "gc_content",
    "codon_usage",
    "translate",
    "translate_frames",
    "find_orfs",
    "summarize_orfs",
    "compare_mutations",
    "protein_properties",
    "run_analysis",
    # Results
    "CompositionResult",
    "CodonUsageResult",
    "TranslationResult",
    "ORF",
    "OrfReport",
    "Mutation",
    "MutationAnalysis",
    "MutationType",
    "MutationEffect",
    "ProteinProperties",
    # Errors
    "GenolyzeError",
    "InvalidSequenceError",
    "AnalysisError",
    "UnsupportedKindError",
    "UnknownAnalysisError",
]
