#!/usr/bin/env python3
"""
User preferences module

Holds the user-configurable mutation color scheme. Features read the current
preferences through PreferencesManager on every lookup, so edits made after a
feature was created are picked up immediately.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from .color_tables import ColorSpec, ColorTable

logger = logging.getLogger(__name__)

DEFAULT_PREFERENCES_FILE = Path(__file__).parent / "data" / "mutation_colors.json"


class Preferences:
    """
    Preference store

    Example config data:
        {
            "mutation_colors": {
                "default": "0,180,225",
                "colors": {"Missense": "170,20,240"},
                "aliases": {"Missense_Mutation": "Missense"}
            }
        }
    """

    def __init__(self, config_data: Optional[Dict] = None, config_file: Optional[str] = None):
        """
        Initialize preferences

        Args:
            config_data: Preference dictionary data
            config_file: JSON preference file path

        An empty store (no mutation colors) is created when neither is given.
        """
        self._mutation_color_scheme = ColorTable()
        if config_file:
            self._load_from_file(config_file)
        elif config_data:
            self._load_from_dict(config_data)

    def _load_from_file(self, config_file: str):
        """Load preferences from JSON file"""
        config_path = Path(config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Preferences file does not exist: {config_file}")

        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)

        logger.debug("Loaded preferences from %s", config_path)
        self._load_from_dict(config_data)

    def _load_from_dict(self, config_data: Dict):
        """Load preferences from dictionary"""
        color_data = config_data.get('mutation_colors', {})
        table = ColorTable(color_data.get('colors', {}), default=color_data.get('default'))

        # Aliases map alternative category spellings onto configured categories
        for alias, target in color_data.get('aliases', {}).items():
            if target not in table:
                raise ValueError(f"Color alias '{alias}' refers to unknown category '{target}'")
            table.put_alias(alias, target)

        self._mutation_color_scheme = table

    def get_mutation_color_scheme(self) -> ColorTable:
        return self._mutation_color_scheme

    def set_mutation_color_scheme(self, color_table: ColorTable):
        self._mutation_color_scheme = color_table

    def set_mutation_color(self, category: str, color: ColorSpec):
        """Override the color of one mutation category"""
        self._mutation_color_scheme.put(category, color)

    def to_dict(self) -> Dict:
        table = self._mutation_color_scheme
        return {
            'mutation_colors': {
                'default': table.default.to_rgb_string() if table.default else None,
                'colors': {key: color.to_rgb_string() for key, color in table.items()},
                'aliases': table.aliases(),
            }
        }

    def save(self, output_path: str) -> str:
        """Write preferences as JSON, returns the output path"""
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=4)
        return output_path


def load_default_preferences() -> Preferences:
    """Load the bundled default preferences"""
    return Preferences(config_file=str(DEFAULT_PREFERENCES_FILE))


class PreferencesManager:
    """
    Process-wide access point for the active preferences

    Defaults are loaded lazily on first access.
    """

    _preferences: Optional[Preferences] = None

    @classmethod
    def get_preferences(cls) -> Preferences:
        if cls._preferences is None:
            cls._preferences = load_default_preferences()
        return cls._preferences

    @classmethod
    def set_preferences(cls, preferences: Preferences):
        cls._preferences = preferences

    @classmethod
    def load_preferences(cls, config_file: str) -> Preferences:
        """Replace the active preferences with the content of a JSON file"""
        cls._preferences = Preferences(config_file=config_file)
        logger.info("Active preferences loaded from %s", config_file)
        return cls._preferences

    @classmethod
    def reset(cls):
        """Drop the active preferences, defaults are reloaded on next access"""
        cls._preferences = None
