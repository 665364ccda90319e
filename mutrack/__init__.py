"""
mutrack - Mutation features for genome browser tracks

Main features:
- Mutation call records with lazily derived display names
- Mutation Assessor and CRAVAT annotation links
- Mutation coloring from a user-configurable color scheme
- Generic genomic feature interface

Author: mutrack developers
"""

__version__ = "0.1.0"
__author__ = "mutrack developers"

# Export main API interfaces
from .mutations import Mutation
from .features import GenomicFeature, BasicFeature, Strand, UnsupportedFeatureOperation
from .config import Color, ColorTable, GenomeManager, Preferences, PreferencesManager

__all__ = [
    '__version__',
    '__author__',
    # Features
    'Mutation',
    'GenomicFeature',
    'BasicFeature',
    'Strand',
    'UnsupportedFeatureOperation',
    # Configuration
    'Color',
    'ColorTable',
    'GenomeManager',
    'Preferences',
    'PreferencesManager'
]
