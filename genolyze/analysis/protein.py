"""
Protein physicochemical properties.

Molecular weight is the plain sum of residue weights and the
isoelectric point is the counting estimate

    pI = 7 + 0.5 * (basic - acidic),   basic = R, K, H; acidic = D, E

rather than a pKa titration. Residues missing from the property table
(X, *) add no weight and are left out of the hydropathy average.
"""

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping

import numpy as np

from genolyze.utils.amino_acids import (
    ACIDIC_RESIDUES,
    BASIC_RESIDUES,
    residue_properties,
)
from genolyze.utils.numeric import round_half_up

logger = logging.getLogger(__name__)

PROPERTY_DIGITS = 2
NEUTRAL_PI = 7.0
PI_STEP = 0.5

_NON_RESIDUES = re.compile(r"[^A-Za-z*]")


@dataclass(frozen=True)
class ProteinProperties:
    """Composition and aggregate properties of a protein sequence."""
    sequence: str
    length: int
    molecular_weight: float
    isoelectric_point: float
    hydropathy: float
    composition: Mapping[str, int] = field(hash=False)

    def to_dict(self) -> dict:
        return {
            "sequence": self.sequence,
            "length": self.length,
            "molecular_weight": self.molecular_weight,
            "isoelectric_point": self.isoelectric_point,
            "hydropathy": self.hydropathy,
            "composition": dict(self.composition),
        }


def residue_composition(protein: str) -> Dict[str, int]:
    """Count residues in first-seen order."""
    counts: Dict[str, int] = {}
    for residue in protein:
        counts[residue] = counts.get(residue, 0) + 1
    return counts


def _property_values(protein: str, name: str) -> np.ndarray:
    values = [getattr(p, name) for p in map(residue_properties, protein) if p is not None]
    return np.array(values, dtype=np.float64)


def molecular_weight(protein: str) -> float:
    """Sum of residue weights in Da, rounded to 2 decimals."""
    weights = _property_values(protein, "mw")
    return round_half_up(float(weights.sum()), PROPERTY_DIGITS)


def mean_hydropathy(protein: str) -> float:
    """Average hydropathy over residues with a table entry (0 if none)."""
    values = _property_values(protein, "hydropathy")
    if values.size == 0:
        return 0.0
    return round_half_up(float(values.mean()), PROPERTY_DIGITS)


def isoelectric_point(composition: Dict[str, int]) -> float:
    """Simplified pI estimate from basic and acidic residue counts."""
    basic = sum(composition.get(aa, 0) for aa in BASIC_RESIDUES)
    acidic = sum(composition.get(aa, 0) for aa in ACIDIC_RESIDUES)
    return round_half_up(NEUTRAL_PI + (basic - acidic) * PI_STEP, PROPERTY_DIGITS)


def protein_properties(sequence: str) -> ProteinProperties:
    """
    Compute composition, molecular weight, pI and hydropathy of a protein.

    Whitespace and other non-letter characters are dropped and the
    sequence is uppercased; the stop marker "*" is kept and counted.

    Args:
        sequence: One-letter protein sequence

    Returns:
        ProteinProperties

    Example:
        >>> props = protein_properties("MK*")
        >>> props.molecular_weight, props.isoelectric_point, props.hydropathy
        (295.4, 7.5, -1.0)
    """
    protein = _NON_RESIDUES.sub("", str(sequence or "")).upper()
    composition = residue_composition(protein)
    props = ProteinProperties(
        sequence=protein,
        length=len(protein),
        molecular_weight=molecular_weight(protein),
        isoelectric_point=isoelectric_point(composition),
        hydropathy=mean_hydropathy(protein),
        composition=MappingProxyType(composition),
    )
    logger.debug(
        "Protein of %d aa: MW %.2f Da, pI %.2f",
        props.length, props.molecular_weight, props.isoelectric_point,
    )
    return props
