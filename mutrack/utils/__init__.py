"""
Utility modules
"""

from .format_utils import print_attributes, get_attribute_string
__all__ = [
    'print_attributes',
    'get_attribute_string'
]
