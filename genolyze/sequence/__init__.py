"""
Sequence kinds, alphabets and input normalization.

This module provides functions for:
- Normalizing raw/FASTA text into a clean symbol sequence
- Validating a sequence against the DNA, RNA or protein alphabet
- Converting between DNA and RNA bases
"""

from genolyze.sequence.alphabet import (
    SequenceKind,
    NormalizedSequence,
    normalize,
    validate,
    require_valid,
    clean_sequence,
    rna_to_dna,
    dna_to_rna,
    resolve_sequence,
    DNA_ALPHABET,
    RNA_ALPHABET,
    PROTEIN_ALPHABET,
)

__all__ = [
    "SequenceKind",
    "NormalizedSequence",
    "normalize",
    "validate",
    "require_valid",
    "clean_sequence",
    "rna_to_dna",
    "dna_to_rna",
    "resolve_sequence",
    "DNA_ALPHABET",
    "RNA_ALPHABET",
    "PROTEIN_ALPHABET",
]
