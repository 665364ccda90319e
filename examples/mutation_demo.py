#!/usr/bin/env python3
"""
Mutation feature demo

Shows how a mutation track entry derives its label, tooltip links and color
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from mutrack import Mutation, GenomeManager, PreferencesManager


def demo_labels():
    """Display name and canonical allele id"""
    print("=== Labels ===\n")

    mutation = Mutation("TCGA-A1-A0SB", "chr7", 140453135, 140453136, "Missense_Mutation")
    mutation.ref_allele = "A"
    mutation.alt_allele1 = "T"
    mutation.alt_allele2 = "T"

    print(f"  Name: {mutation.name}")
    print(f"  Allele id: {mutation.get_canonical_allele_id()}")
    print(f"  Description: {mutation.get_description()}")
    print()
    return mutation


def demo_links(mutation):
    """Links depend on the active genome"""
    print("=== Links ===\n")

    for genome_id in ["hg19", "hg38"]:
        GenomeManager.get_instance().set_genome_id(genome_id)
        print(f"  Genome {genome_id}:")
        print(f"    Mutation Assessor: {mutation.get_mutation_assessor_url()}")
        print(f"    CRAVAT: {mutation.get_cravat_link()}")
    print()


def demo_colors(mutation):
    """Colors follow the user's color scheme"""
    print("=== Colors ===\n")

    print(f"  Default: {mutation.color.to_hex()}")
    PreferencesManager.get_preferences().set_mutation_color("Missense_Mutation", "orange")
    print(f"  After scheme change: {mutation.color.to_hex()}")
    print()


def demo_copy(mutation):
    """Copies keep labels but not alleles"""
    print("=== Copy ===\n")

    copy = mutation.copy()
    print(f"  Copy name: {copy.name}")
    print(f"  Copy ref allele: {copy.ref_allele}")
    print(f"  Copy allele id: {copy.get_canonical_allele_id()}")
    print()


def main():
    mutation = demo_labels()
    demo_links(mutation)
    demo_colors(mutation)
    demo_copy(mutation)

    GenomeManager.get_instance().set_genome_id("hg38")
    mutation.attributes = {"Hugo_Symbol": "BRAF", "Protein_Change": "p.V600E"}
    print("=== Tooltip ===\n")
    print(mutation.get_value_string(140453136, 0).replace("<br", "\n<br"))


if __name__ == "__main__":
    main()
