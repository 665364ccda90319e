#!/usr/bin/env python3
"""
Genome identity module

Tracks which reference genome is currently loaded
"""

import logging
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_GENOME_ID = "hg19"

# Genome ids treated as human build 38
BUILD_38_GENOME_IDS = ("hg38", "GRCh38")


class GenomeManager:
    """
    Holder of the active genome id

    A single shared instance is obtained with get_instance(). The id is read
    on demand by link builders, so switching genomes affects output of
    existing features.
    """

    _instance: Optional["GenomeManager"] = None

    def __init__(self, genome_id: str = DEFAULT_GENOME_ID):
        self._genome_id = genome_id

    @classmethod
    def get_instance(cls) -> "GenomeManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        cls._instance = None

    def current_genome_id(self) -> str:
        return self._genome_id

    @property
    def genome_id(self) -> str:
        return self._genome_id

    def set_genome_id(self, genome_id: str):
        if genome_id != self._genome_id:
            logger.debug("Switching genome from %s to %s", self._genome_id, genome_id)
        self._genome_id = genome_id
