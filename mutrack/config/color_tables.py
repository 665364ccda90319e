#!/usr/bin/env python3
"""
Color table module

Category to color lookup tables used to paint features by their type
"""

from typing import Dict, Iterator, NamedTuple, Optional, Tuple, Union

import matplotlib.colors as mcolors


class Color(NamedTuple):
    """RGB color with 0-255 integer components"""
    red: int
    green: int
    blue: int

    def to_hex(self) -> str:
        """Return '#rrggbb' representation"""
        return mcolors.to_hex((self.red / 255, self.green / 255, self.blue / 255))

    def to_rgb_string(self) -> str:
        """Return 'r,g,b' representation used in preference files"""
        return f"{self.red},{self.green},{self.blue}"


ColorSpec = Union[Color, str, Tuple[int, int, int]]


def parse_color(spec: ColorSpec) -> Color:
    """
    Convert a color specification to Color

    Args:
        spec: Color instance, (r, g, b) tuple, 'r,g,b' string, hex string
              or any matplotlib color name

    Returns:
        Color: Parsed color

    Examples:
        >>> parse_color("170,20,240")
        Color(red=170, green=20, blue=240)
        >>> parse_color("#ff0000")
        Color(red=255, green=0, blue=0)
    """
    if isinstance(spec, Color):
        return spec

    if isinstance(spec, str) and "," in spec:
        parts = [p.strip() for p in spec.split(",")]
        if len(parts) != 3:
            raise ValueError(f"RGB color must have 3 components, got {len(parts)}: {spec}")
        try:
            components = [int(p) for p in parts]
        except ValueError:
            raise ValueError(f"Invalid RGB color: {spec}") from None
        return _checked_color(components, spec)

    if isinstance(spec, (tuple, list)):
        if len(spec) != 3:
            raise ValueError(f"RGB color must have 3 components, got {len(spec)}: {spec}")
        return _checked_color([int(c) for c in spec], spec)

    # Hex strings and named colors
    red, green, blue = mcolors.to_rgb(spec)
    return Color(round(red * 255), round(green * 255), round(blue * 255))


def _checked_color(components, spec) -> Color:
    if any(c < 0 or c > 255 for c in components):
        raise ValueError(f"RGB components must be between 0-255: {spec}")
    return Color(*components)


class ColorTable:
    """
    Mutable category to color mapping

    Aliases name another category and are resolved on every lookup, so
    recoloring a category also recolors its aliases. Lookups of unknown keys
    return the table default, which may be None ("no mapping").
    """

    def __init__(self, colors: Optional[Dict[str, ColorSpec]] = None,
                 default: Optional[ColorSpec] = None):
        self._colors: Dict[str, Color] = {}
        self._aliases: Dict[str, str] = {}
        self.default: Optional[Color] = parse_color(default) if default is not None else None
        for key, color in (colors or {}).items():
            self.put(key, color)

    def get(self, key: str) -> Optional[Color]:
        if key in self._colors:
            return self._colors[key]
        target = self._aliases.get(key)
        return self._colors.get(target, self.default)

    lookup = get

    def put(self, key: str, color: ColorSpec):
        self._colors[key] = parse_color(color)

    def put_alias(self, alias: str, category: str):
        """Make alias look up the color of category"""
        self._aliases[alias] = category

    def remove(self, key: str):
        self._colors.pop(key, None)

    def keys(self):
        return self._colors.keys()

    def items(self):
        return self._colors.items()

    def aliases(self) -> Dict[str, str]:
        return dict(self._aliases)

    def copy(self) -> "ColorTable":
        table = ColorTable(default=self.default)
        table._colors = dict(self._colors)
        table._aliases = dict(self._aliases)
        return table

    def __contains__(self, key: str) -> bool:
        return key in self._colors

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._colors)

    def __repr__(self) -> str:
        return f"ColorTable({len(self._colors)} colors, default={self.default})"
