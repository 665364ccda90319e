#!/usr/bin/env python3
"""
External annotation links

URL and hyperlink builders for the Mutation Assessor and CRAVAT services.
Builders return None when a link cannot be made; callers omit it.
"""

from typing import Optional

from ..config.genome import BUILD_38_GENOME_IDS
from .naming import ensure_chr_prefix, select_alt_allele

MUTATION_ASSESSOR_URL = "http://mutationassessor.org/r3/?cm=var&var="
CRAVAT_VARIANT_URL = "http://www.cravat.us/CRAVAT/variant.html?variant="


def mutation_assessor_url(genome_id: str, allele_id: Optional[str]) -> Optional[str]:
    """
    Build a Mutation Assessor query URL

    Args:
        genome_id: Active genome id, e.g. 'hg19'
        allele_id: Canonical 'chromosome,position,ref,alt' identifier

    Returns:
        Optional[str]: URL, None without an allele id
    """
    if allele_id is None:
        return None
    return f"{MUTATION_ASSESSOR_URL}{genome_id},{allele_id}"


def cravat_link(genome_id: str, chromosome: str, start: int,
                ref_allele: Optional[str],
                alt_allele1: Optional[str],
                alt_allele2: Optional[str]) -> Optional[str]:
    """
    Build a CRAVAT variant hyperlink

    CRAVAT only serves build 38, any other genome yields None.

    Args:
        genome_id: Active genome id
        chromosome: Chromosome name, with or without 'chr'
        start: 0-based start
        ref_allele: Reference allele, None yields no link
        alt_allele1: First alternate allele
        alt_allele2: Second alternate allele

    Returns:
        Optional[str]: HTML anchor element

    Examples:
        >>> cravat_link("hg38", "22", 40418495, "A", "G", "G")
        "<a target='_blank' href='http://www.cravat.us/CRAVAT/variant.html?variant=chr22_40418496_+_A_G'>Cravat A->G</a>"
    """
    if genome_id not in BUILD_38_GENOME_IDS:
        return None
    if ref_allele is None:
        return None

    # An unresolved alternate is an empty field, as in the allele id
    alt_allele = select_alt_allele(ref_allele, alt_allele1, alt_allele2) or ""
    position = start + 1
    # Strand is always forward
    variant = f"{ensure_chr_prefix(chromosome)}_{position}_+_{ref_allele}_{alt_allele}"
    return (f"<a target='_blank' href='{CRAVAT_VARIANT_URL}{variant}'>"
            f"Cravat {ref_allele}->{alt_allele}</a>")
