#!/usr/bin/env python3
"""
Generic genomic feature interface

Defines the capability set the track rendering layer relies on when it draws
heterogeneous feature kinds (genes, mutations, ...) side by side
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional


class Strand(Enum):
    """Feature strand enumeration"""
    POSITIVE = "+"
    NEGATIVE = "-"
    NONE = "."   # Strand is not meaningful for this feature


class UnsupportedFeatureOperation(NotImplementedError):
    """Raised when a feature kind does not provide an optional capability"""


class GenomicFeature(ABC):
    """
    Abstract genomic feature

    Coordinates are 0-based, half-open. Implementations that cannot answer the
    coding-region or amino-acid queries raise UnsupportedFeatureOperation.
    """

    @property
    @abstractmethod
    def chr(self) -> str:
        """Chromosome name"""

    @property
    def contig(self) -> str:
        """Alias of chr, used by contig-oriented callers"""
        return self.chr

    @property
    @abstractmethod
    def start(self) -> int:
        """Start position (0-based, inclusive)"""

    @property
    @abstractmethod
    def end(self) -> int:
        """End position (0-based, exclusive)"""

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def feature_type(self) -> str:
        return "feature"

    @property
    @abstractmethod
    def strand(self) -> Strand:
        ...

    @property
    @abstractmethod
    def score(self) -> float:
        ...

    @abstractmethod
    def has_score(self) -> bool:
        ...

    @property
    @abstractmethod
    def name(self) -> Optional[str]:
        ...

    @property
    @abstractmethod
    def color(self) -> Any:
        ...

    @abstractmethod
    def get_description(self) -> str:
        """HTML description shown in popups"""

    @abstractmethod
    def get_value_string(self, position: float, mouse_x: int, window_function: Any = None) -> str:
        """
        Tooltip text for a genomic position

        Args:
            position: Genomic position under the mouse
            mouse_x: Screen pixel coordinate
            window_function: Aggregation function of the track, may be ignored

        Returns:
            str: HTML fragment
        """

    @abstractmethod
    def overlaps(self, other: "GenomicFeature") -> bool:
        ...

    @abstractmethod
    def get_amino_acid_sequence(self, exon_index: int) -> Any:
        ...

    @property
    @abstractmethod
    def cd_start(self) -> int:
        """Coding region start"""

    @property
    @abstractmethod
    def cd_end(self) -> int:
        """Coding region end"""


class BasicFeature(GenomicFeature):
    """
    Plain interval feature

    Stores every attribute it reports. Coding bounds default to the feature
    interval when not given.
    """

    def __init__(self, chromosome: str, start: int, end: int,
                 strand: Strand = Strand.NONE,
                 name: Optional[str] = None,
                 score: Optional[float] = None,
                 color: Any = None,
                 cd_start: Optional[int] = None,
                 cd_end: Optional[int] = None):
        if end < start:
            raise ValueError("End position cannot be less than start position")
        self._chr = chromosome
        self._start = start
        self._end = end
        self._strand = strand
        self._name = name
        self._score = score
        self._color = color
        self._cd_start = start if cd_start is None else cd_start
        self._cd_end = end if cd_end is None else cd_end

    @property
    def chr(self) -> str:
        return self._chr

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def strand(self) -> Strand:
        return self._strand

    @property
    def score(self) -> float:
        return 0.0 if self._score is None else self._score

    def has_score(self) -> bool:
        return self._score is not None

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def color(self) -> Any:
        return self._color

    @color.setter
    def color(self, color: Any):
        self._color = color

    def get_description(self) -> str:
        return self._name or f"{self._chr}:{self._start + 1}-{self._end}"

    def get_value_string(self, position: float, mouse_x: int, window_function: Any = None) -> str:
        return self.get_description()

    def overlaps(self, other: GenomicFeature) -> bool:
        """Check interval intersection on the same chromosome"""
        return (self._chr == other.chr
                and self._start < other.end
                and other.start < self._end)

    def get_amino_acid_sequence(self, exon_index: int) -> Any:
        raise UnsupportedFeatureOperation("Not supported yet.")

    @property
    def cd_start(self) -> int:
        return self._cd_start

    @property
    def cd_end(self) -> int:
        return self._cd_end

    def __repr__(self) -> str:
        return f"BasicFeature({self._chr}:{self._start}-{self._end}, strand={self._strand.value})"
