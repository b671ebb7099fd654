#!/usr/bin/env python3
"""
Example: Sequence Analysis with genolyze

This example demonstrates the analysis capabilities of genolyze:
- Normalizing and validating pasted/FASTA input
- Base composition and GC statistics
- Codon usage
- Translation in three frames
- Finding ORFs
- Comparing a reference and a mutant
- Protein properties
"""

import sys
sys.path.insert(0, '..')

from genolyze import (
    normalize,
    validate,
    composition,
    codon_usage,
    translate_frames,
    summarize_orfs,
    compare_mutations,
    protein_properties,
    run_analysis,
    UnsupportedKindError,
)


GENE = """>demo gene fragment
ATGGTGAGCAAGGGCGAGGAGCTGTTCACCGGGGTGGTGCCCATCCTGGTCGAGCTGGACGGCGACGTAAACGGC
CACAAGTTCAGCGTGTCCGGCGAGGGCGAGGGCGATGCCACCTACGGCAAGCTGACCCTGAAGTTCATCTGA
"""


def demo_normalization():
    """Demonstrate input normalization and validation."""
    print("\n" + "=" * 60)
    print("NORMALIZATION")
    print("=" * 60)

    seq = normalize(GENE, "dna")
    print(f"\nNormalized length: {len(seq)} bp")
    print(f"Valid DNA: {validate(seq.sequence, seq.kind)}")

    rna = normalize("augc cgu\nuag", "rna")
    print(f"\nRNA input '{rna}' valid: {validate(rna.sequence, rna.kind)}")
    print(f"Same text as DNA: {normalize(rna.sequence, 'dna')}")
    return seq


def demo_composition(seq):
    """Demonstrate composition statistics."""
    print("\n" + "=" * 60)
    print("COMPOSITION")
    print("=" * 60)

    result = composition(seq)
    print(f"\nCounts: {result.composition}")
    print(f"GC content: {result.gc_content}%   AT content: {result.at_content}%")
    print(f"GC skew: {result.gc_skew}   AT skew: {result.at_skew}")


def demo_codon_usage(seq):
    """Demonstrate codon usage."""
    print("\n" + "=" * 60)
    print("CODON USAGE")
    print("=" * 60)

    usage = codon_usage(seq)
    print(f"\nTotal codons: {usage.total_codons}")
    print(f"Most frequent: {usage.most_frequent}")
    print(f"Least frequent: {usage.least_frequent}")
    print(f"Codon bias: {usage.codon_bias}")


def demo_translation(seq):
    """Demonstrate translation in all three frames."""
    print("\n" + "=" * 60)
    print("TRANSLATION")
    print("=" * 60)

    for result in translate_frames(seq):
        print(f"\nFrame {result.frame + 1}: {result.protein[:40]}...")
        print(f"  MW: {result.molecular_weight} Da  pI: {result.isoelectric_point}"
              f"  hydropathy: {result.hydropathy}")


def demo_orf_finding(seq):
    """Demonstrate ORF finding."""
    print("\n" + "=" * 60)
    print("ORF FINDING")
    print("=" * 60)

    report = summarize_orfs(seq)
    print(f"\nFound {report.total_orfs} ORF(s), coverage {report.coverage}%")
    print(f"Frame distribution: {report.frame_distribution}")
    for orf in report.orfs[:3]:
        print(f"\n  Position: {orf.start}-{orf.end} (frame {orf.frame})")
        print(f"  Protein ({orf.length} aa): {orf.protein}")


def demo_mutations():
    """Demonstrate mutation comparison."""
    print("\n" + "=" * 60)
    print("MUTATIONS")
    print("=" * 60)

    reference = "ATGTGGCTTAAAGGG"
    mutant = "ATGTGACTCAAGGG"
    print(f"\nReference: {reference}")
    print(f"Mutant:    {mutant}")

    analysis = compare_mutations(reference, mutant)
    print(f"\n{analysis.total_mutations} mutations ({analysis.mutation_rate:.2f}%)")
    for m in analysis.mutations:
        print(f"  Position {m.position}: {m.original or '-'} -> {m.mutated or '-'}"
              f"  {m.type.value}, {m.effect.value}")


def demo_protein():
    """Demonstrate protein properties and the dispatcher."""
    print("\n" + "=" * 60)
    print("PROTEIN PROPERTIES")
    print("=" * 60)

    props = protein_properties("MVSKGEELFTGVVPILVELDGDVNGHKFSVSGEGEGDATYGK")
    print(f"\nLength: {props.length} aa")
    print(f"MW: {props.molecular_weight} Da  pI: {props.isoelectric_point}"
          f"  hydropathy: {props.hydropathy}")

    try:
        run_analysis("gc-content", [normalize("MVSKGEE", "protein")])
    except UnsupportedKindError as e:
        print(f"\nDispatcher refused protein input: {e}")


def main():
    print("=" * 60)
    print("genolyze Sequence Analysis Demo")
    print("=" * 60)

    seq = demo_normalization()
    demo_composition(seq)
    demo_codon_usage(seq)
    demo_translation(seq)
    demo_orf_finding(seq)
    demo_mutations()
    demo_protein()

    print("\n" + "=" * 60)
    print("Demo Complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
