#!/usr/bin/env python3
"""
Mutation naming module

Builds display labels and canonical allele identifiers from mutation fields
"""

from typing import Optional


def select_alt_allele(ref_allele: str,
                      alt_allele1: Optional[str],
                      alt_allele2: Optional[str]) -> Optional[str]:
    """
    Pick the allele that differs from the reference

    The first alternate is used unless it equals the reference, in which case
    the call is heterozygous on the second alternate.
    """
    if ref_allele == alt_allele1:
        return alt_allele2
    return alt_allele1


def strip_chr_prefix(chromosome: str) -> str:
    if chromosome.startswith("chr"):
        return chromosome[3:]
    return chromosome


def ensure_chr_prefix(chromosome: str) -> str:
    if chromosome.startswith("chr"):
        return chromosome
    return "chr" + chromosome


def format_display_name(chromosome: str, start: int, end: int,
                        ref_allele: Optional[str] = None,
                        alt_allele1: Optional[str] = None,
                        alt_allele2: Optional[str] = None) -> str:
    """
    Build the display name of a mutation

    Args:
        chromosome: Chromosome name
        start: 0-based start
        end: End position, shown as-is
        ref_allele: Reference allele
        alt_allele1: First alternate allele
        alt_allele2: Second alternate allele

    Returns:
        str: Name such as 'chr7:140,453,136 A>T'

    Examples:
        >>> format_display_name("chr7", 100, 100, "A", "G", "G")
        'chr7:101 A>G'
        >>> format_display_name("chr7", 100, 105)
        'chr7:101-105'
    """
    # Fixed comma grouping, generated text does not follow the process locale
    name = f"{chromosome}:{start + 1:,}"
    if end > start + 1:
        name += f"-{end}"

    if ref_allele is not None and alt_allele1 is not None:
        if alt_allele1 != ref_allele:
            name += f" {ref_allele}>{alt_allele1}"
        # An unknown second allele is not a change
        if alt_allele2 is not None and alt_allele2 != alt_allele1 and alt_allele2 != ref_allele:
            name += f" {ref_allele}>{alt_allele2}"
    return name


def format_allele_id(chromosome: str, start: int, ref_allele: str,
                     alt_allele1: Optional[str],
                     alt_allele2: Optional[str]) -> str:
    """
    Build the 'chromosome,position,ref,alt' identifier

    The chromosome is written without its 'chr' prefix and the position is
    1-based. An unresolved alternate allele is written as an empty field.

    Examples:
        >>> format_allele_id("chr7", 100, "A", "A", "T")
        '7,101,A,T'
    """
    alt_allele = select_alt_allele(ref_allele, alt_allele1, alt_allele2)
    return f"{strip_chr_prefix(chromosome)},{start + 1},{ref_allele},{alt_allele or ''}"
