"""
Configuration module - genome identity, user preferences and color tables
"""

from .color_tables import Color, ColorTable, parse_color
from .genome import GenomeManager, DEFAULT_GENOME_ID, BUILD_38_GENOME_IDS
from .preferences import Preferences, PreferencesManager, load_default_preferences

__all__ = [
    'Color',
    'ColorTable',
    'parse_color',
    'GenomeManager',
    'DEFAULT_GENOME_ID',
    'BUILD_38_GENOME_IDS',
    'Preferences',
    'PreferencesManager',
    'load_default_preferences'
]
