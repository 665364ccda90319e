"""
HTML formatting helpers for popup and tooltip text
"""

from typing import Dict


def get_attribute_string(value: str, max_length: int) -> str:
    """
    Break a long attribute value into lines of at most max_length characters

    Examples:
        >>> get_attribute_string("ACGTACGT", 3)
        'ACG<br>TAC<br>GT'
    """
    if len(value) <= max_length:
        return value
    chunks = [value[i:i + max_length] for i in range(0, len(value), max_length)]
    return "<br>".join(chunks)


def print_attributes(attributes: Dict[str, str], max_length: int = 100) -> str:
    """
    Render attributes as '<br>key = value' lines

    Args:
        attributes: Attribute mapping, rendered in iteration order
        max_length: Maximum line width for values

    Returns:
        str: HTML fragment, empty when there are no attributes
    """
    lines = []
    for key, value in attributes.items():
        lines.append(f"<br>{key} = {get_attribute_string(str(value), max_length)}")
    return "".join(lines)
