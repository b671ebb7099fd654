"""
Reference tables and small helpers.

This module provides the fixed data every analyzer reads:
- The standard genetic code (64 codons)
- Amino acid molecular weight, pI and hydropathy values
- Half-up rounding and zero-safe ratios
"""

from genolyze.utils.genetic_code import (
    CODON_TABLE,
    START_CODONS,
    STOP_CODONS,
    STOP_SYMBOL,
    UNKNOWN_RESIDUE,
    lookup_codon,
    translate_codon,
    is_start_codon,
)

from genolyze.utils.amino_acids import (
    AMINO_ACID_PROPERTIES,
    STANDARD_AMINO_ACIDS,
    BASIC_RESIDUES,
    ACIDIC_RESIDUES,
    AminoAcidProperties,
    residue_properties,
)

from genolyze.utils.numeric import round_half_up, safe_ratio

__all__ = [
    "CODON_TABLE",
    "START_CODONS",
    "STOP_CODONS",
    "STOP_SYMBOL",
    "UNKNOWN_RESIDUE",
    "lookup_codon",
    "translate_codon",
    "is_start_codon",
    "AMINO_ACID_PROPERTIES",
    "STANDARD_AMINO_ACIDS",
    "BASIC_RESIDUES",
    "ACIDIC_RESIDUES",
    "AminoAcidProperties",
    "residue_properties",
    "round_half_up",
    "safe_ratio",
]
