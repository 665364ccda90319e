"""
Feature Module
"""

from .feature import GenomicFeature, BasicFeature, Strand, UnsupportedFeatureOperation

__all__ = [
    'GenomicFeature',
    'BasicFeature',
    'Strand',
    'UnsupportedFeatureOperation'
]
