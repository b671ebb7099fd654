"""
Amino acid property table.

Per-residue average molecular weight (Da), free amino acid pI and
Kyte-Doolittle hydropathy for the 20 standard residues.
"""

from types import MappingProxyType
from typing import NamedTuple, Optional


class AminoAcidProperties(NamedTuple):
    mw: float
    pi: float
    hydropathy: float


AMINO_ACID_PROPERTIES = MappingProxyType({
    "A": AminoAcidProperties(89.1, 6.0, 1.8),
    "R": AminoAcidProperties(174.2, 10.8, -4.5),
    "N": AminoAcidProperties(132.1, 5.4, -3.5),
    "D": AminoAcidProperties(133.1, 2.8, -3.5),
    "C": AminoAcidProperties(121.2, 5.1, 2.5),
    "Q": AminoAcidProperties(146.1, 5.7, -3.5),
    "E": AminoAcidProperties(147.1, 4.3, -3.5),
    "G": AminoAcidProperties(75.1, 6.0, -0.4),
    "H": AminoAcidProperties(155.2, 7.6, -3.2),
    "I": AminoAcidProperties(131.2, 6.0, 4.5),
    "L": AminoAcidProperties(131.2, 6.0, 3.8),
    "K": AminoAcidProperties(146.2, 9.7, -3.9),
    "M": AminoAcidProperties(149.2, 5.7, 1.9),
    "F": AminoAcidProperties(165.2, 5.5, 2.8),
    "P": AminoAcidProperties(115.1, 6.3, -1.6),
    "S": AminoAcidProperties(105.1, 5.7, -0.8),
    "T": AminoAcidProperties(119.1, 5.6, -0.7),
    "W": AminoAcidProperties(204.2, 5.9, -0.9),
    "Y": AminoAcidProperties(181.2, 5.7, -1.3),
    "V": AminoAcidProperties(117.1, 6.0, 4.2),
})

STANDARD_AMINO_ACIDS = "".join(AMINO_ACID_PROPERTIES)

# Residues counted by the simplified pI estimate
BASIC_RESIDUES = frozenset("RKH")
ACIDIC_RESIDUES = frozenset("DE")


def residue_properties(residue: str) -> Optional[AminoAcidProperties]:
    """Properties for a one-letter residue, or None for X, * and others."""
    return AMINO_ACID_PROPERTIES.get(residue.upper())
