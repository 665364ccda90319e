"""
Mutation feature module
"""

from .mutation import Mutation
from .naming import format_display_name, format_allele_id, select_alt_allele
from .links import mutation_assessor_url, cravat_link

__all__ = [
    'Mutation',
    'format_display_name',
    'format_allele_id',
    'select_alt_allele',
    'mutation_assessor_url',
    'cravat_link'
]
