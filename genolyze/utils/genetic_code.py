"""
Standard genetic code.

The table is keyed by DNA codons; RNA input is canonicalized (U -> T)
before lookup by the callers.
"""

from types import MappingProxyType
from typing import Optional

STOP_SYMBOL = "*"
UNKNOWN_RESIDUE = "X"

# Standard genetic code (DNA codons)
CODON_TABLE = MappingProxyType({
    "TTT": "F", "TTC": "F", "TTA": "L", "TTG": "L",
    "TCT": "S", "TCC": "S", "TCA": "S", "TCG": "S",
    "TAT": "Y", "TAC": "Y", "TAA": "*", "TAG": "*",
    "TGT": "C", "TGC": "C", "TGA": "*", "TGG": "W",
    "CTT": "L", "CTC": "L", "CTA": "L", "CTG": "L",
    "CCT": "P", "CCC": "P", "CCA": "P", "CCG": "P",
    "CAT": "H", "CAC": "H", "CAA": "Q", "CAG": "Q",
    "CGT": "R", "CGC": "R", "CGA": "R", "CGG": "R",
    "ATT": "I", "ATC": "I", "ATA": "I", "ATG": "M",
    "ACT": "T", "ACC": "T", "ACA": "T", "ACG": "T",
    "AAT": "N", "AAC": "N", "AAA": "K", "AAG": "K",
    "AGT": "S", "AGC": "S", "AGA": "R", "AGG": "R",
    "GTT": "V", "GTC": "V", "GTA": "V", "GTG": "V",
    "GCT": "A", "GCC": "A", "GCA": "A", "GCG": "A",
    "GAT": "D", "GAC": "D", "GAA": "E", "GAG": "E",
    "GGT": "G", "GGC": "G", "GGA": "G", "GGG": "G",
})

START_CODONS = frozenset({"ATG"})
STOP_CODONS = frozenset(
    codon for codon, aa in CODON_TABLE.items() if aa == STOP_SYMBOL
)


def lookup_codon(codon: str) -> Optional[str]:
    """
    Look up the amino acid for a single codon.

    Accepts DNA or RNA codons in any case.

    Args:
        codon: Three-letter codon

    Returns:
        One-letter amino acid, "*" for stop codons, or None when the
        codon has no entry (ambiguity codes, partial codons)

    Example:
        >>> lookup_codon("AUG")
        'M'
        >>> lookup_codon("NNN") is None
        True
    """
    return CODON_TABLE.get(codon.upper().replace("U", "T"))


def translate_codon(codon: str, unknown: str = UNKNOWN_RESIDUE) -> str:
    """Translate a codon, substituting `unknown` for codons with no entry."""
    aa = lookup_codon(codon)
    return unknown if aa is None else aa


def is_start_codon(codon: str) -> bool:
    return codon.upper().replace("U", "T") in START_CODONS
