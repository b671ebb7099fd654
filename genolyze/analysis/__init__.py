"""
Sequence analyzers.

This module provides:
- Base composition and GC/AT content and skew
- Codon and amino acid usage
- Reading-frame translation with protein properties
- ORF detection on the three forward frames
- Positional (non-aligned) mutation comparison
- Protein molecular weight, pI and hydropathy
- A dispatcher that validates inputs before running an analysis
"""

from genolyze.analysis.composition import CompositionResult, composition, gc_content
from genolyze.analysis.codon_usage import CodonUsageResult, codon_usage
from genolyze.analysis.translation import TranslationResult, translate, translate_frames
from genolyze.analysis.orfs import ORF, OrfReport, find_orfs, summarize_orfs
from genolyze.analysis.mutations import (
    Mutation,
    MutationAnalysis,
    MutationEffect,
    MutationType,
    compare_mutations,
)
from genolyze.analysis.protein import ProteinProperties, protein_properties
from genolyze.analysis.tools import ANALYSIS_TOOLS, AnalysisTool, get_tool, run_analysis

__all__ = [
    "CompositionResult",
    "composition",
    "gc_content",
    "CodonUsageResult",
    "codon_usage",
    "TranslationResult",
    "translate",
    "translate_frames",
    "ORF",
    "OrfReport",
    "find_orfs",
    "summarize_orfs",
    "Mutation",
    "MutationAnalysis",
    "MutationEffect",
    "MutationType",
    "compare_mutations",
    "ProteinProperties",
    "protein_properties",
    "ANALYSIS_TOOLS",
    "AnalysisTool",
    "get_tool",
    "run_analysis",
]
