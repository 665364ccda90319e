#!/usr/bin/env python3
"""
Mutation feature module

Implements the mutation call displayed on mutation tracks, with lazily derived
labels, external annotation links and color lookup from the user's mutation
color scheme
"""

from typing import Any, Dict, Optional

from ..config.color_tables import Color
from ..config.genome import GenomeManager
from ..config.preferences import PreferencesManager
from ..features.feature import GenomicFeature, Strand, UnsupportedFeatureOperation
from ..utils.format_utils import print_attributes
from .links import cravat_link, mutation_assessor_url
from .naming import format_allele_id, format_display_name

ATTRIBUTE_MAX_LENGTH = 100


class Mutation(GenomicFeature):
    """
    Mutation call for one sample at one genomic interval

    Identity fields are fixed at construction. Alleles and attributes are
    filled in afterwards by the loader. The display name and the canonical
    allele id are computed on first access and cached; later changes to
    alleles or coordinates do not refresh them.

    Attributes:
        ref_allele: Reference allele, None if unknown
        alt_allele1: First alternate allele, None if unknown
        alt_allele2: Second alternate allele, None if unknown
        attributes: Extra annotations shown in the tooltip
    """

    def __init__(self, sample_id: str, chromosome: str, start: int, end: int, mutation_type: str):
        """
        Initialize mutation

        Args:
            sample_id: Sample (run) id
            chromosome: Chromosome name
            start: 0-based start
            end: End position (exclusive)
            mutation_type: Mutation category, e.g. 'Missense_Mutation'
        """
        self._sample_id = sample_id
        self._chr = chromosome
        self._start = start
        self._end = end
        self._mutation_type = mutation_type
        self._name: Optional[str] = None
        self._oma_name: Optional[str] = None
        self.ref_allele: Optional[str] = None
        self.alt_allele1: Optional[str] = None
        self.alt_allele2: Optional[str] = None
        self.attributes: Optional[Dict[str, str]] = None

    @classmethod
    def from_mutation(cls, source: "Mutation") -> "Mutation":
        """
        Create a label snapshot of another mutation

        Copies identity, coordinates, category, the display name and an
        allele id already computed on the source. Alleles and attributes are
        not copied, so the copy reports no allele id until alleles are set on
        it, and may then diverge from the source.
        """
        mutation = cls(source.sample_id, source.chr, source.start, source.end, source.mutation_type)
        mutation._name = source.name
        mutation._oma_name = source._oma_name
        return mutation

    def copy(self) -> "Mutation":
        return Mutation.from_mutation(self)

    @property
    def sample_id(self) -> str:
        return self._sample_id

    @property
    def mutation_type(self) -> str:
        return self._mutation_type

    @property
    def feature_type(self) -> str:
        return "mutation"

    @property
    def chr(self) -> str:
        return self._chr

    @chr.setter
    def chr(self, chromosome: str):
        self._chr = chromosome

    @property
    def start(self) -> int:
        return self._start

    @start.setter
    def start(self, start: int):
        self._start = start

    @property
    def end(self) -> int:
        return self._end

    @end.setter
    def end(self, end: int):
        self._end = end

    @property
    def name(self) -> str:
        """Display name, e.g. 'chr7:101 A>G'"""
        if self._name is None:
            self._name = format_display_name(self._chr, self._start, self._end,
                                             self.ref_allele, self.alt_allele1, self.alt_allele2)
        return self._name

    @name.setter
    def name(self, name: Optional[str]):
        self._name = name

    def get_canonical_allele_id(self) -> Optional[str]:
        """
        Return the 'chromosome,position,ref,alt' id used by Mutation Assessor

        None while the reference allele is unknown.
        """
        if self.ref_allele is None:
            return None
        if self._oma_name is None:
            self._oma_name = format_allele_id(self._chr, self._start, self.ref_allele,
                                              self.alt_allele1, self.alt_allele2)
        return self._oma_name

    def get_mutation_assessor_url(self) -> Optional[str]:
        if self.ref_allele is None:
            return None
        genome_id = GenomeManager.get_instance().current_genome_id()
        return mutation_assessor_url(genome_id, self.get_canonical_allele_id())

    def get_cravat_link(self) -> Optional[str]:
        genome_id = GenomeManager.get_instance().current_genome_id()
        return cravat_link(genome_id, self._chr, self._start,
                           self.ref_allele, self.alt_allele1, self.alt_allele2)

    def get_description(self) -> str:
        return f"{self.name}<br>{self._mutation_type}"

    def get_value_string(self, position: float, mouse_x: int, window_function: Any = None) -> str:
        """
        Tooltip text: type, attributes and annotation links

        Links are rebuilt on every call so they follow the active genome.
        """
        buf = f"Type: {self._mutation_type}"
        if self.attributes is not None:
            buf += print_attributes(self.attributes, ATTRIBUTE_MAX_LENGTH)

        oma_url = self.get_mutation_assessor_url()
        if oma_url is not None:
            buf += f"<br/><a href=\"{oma_url}\">Mutation Assessor</a>"

        link = self.get_cravat_link()
        if link is not None:
            buf += f"<br/>{link}"
        return buf

    @property
    def color(self) -> Optional[Color]:
        """Color of the mutation category in the current color scheme"""
        color_table = PreferencesManager.get_preferences().get_mutation_color_scheme()
        return color_table.get(self._mutation_type)

    @color.setter
    def color(self, color: Any):
        # Ignored, colors always come from the mutation color scheme
        pass

    @property
    def strand(self) -> Strand:
        return Strand.NONE

    @property
    def score(self) -> float:
        return 0.0

    def has_score(self) -> bool:
        return False

    def overlaps(self, other: GenomicFeature) -> bool:
        # Mutations are not used in overlap queries
        return False

    def get_amino_acid_sequence(self, exon_index: int) -> Any:
        raise UnsupportedFeatureOperation("Not supported yet.")

    @property
    def cd_start(self) -> int:
        raise UnsupportedFeatureOperation("Not supported yet.")

    @property
    def cd_end(self) -> int:
        raise UnsupportedFeatureOperation("Not supported yet.")

    def __repr__(self) -> str:
        return (f"Mutation(sample={self._sample_id}, "
                f"pos={self._chr}:{self._start}-{self._end}, "
                f"type={self._mutation_type}, "
                f"alleles={self.ref_allele}/{self.alt_allele1}/{self.alt_allele2})")
