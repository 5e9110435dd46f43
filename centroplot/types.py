"""
Type definitions for centroplot

Data model shared by the loader, the layout engine and the plotter.
All model types are immutable (frozen) so a loaded Dataset can be handed
from stage to stage without copies.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, List, Literal, Optional, Tuple, TypedDict, Union
from pathlib import Path

from .utils import centromere_midpoint, longest_arm

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

HorizontalAlign = Literal['left', 'center', 'right']
"""Horizontal text alignment relative to the anchor point"""

VerticalAlign = Literal['top', 'center', 'bottom']
"""Vertical text alignment relative to the anchor point"""


# Input table columns
SPECIES_COLUMN = 'species'
CHROMOSOME_COLUMN = 'chromosome'
LENGTH_COLUMN = 'chromosome length (bp)'
CEN_START_COLUMN = 'centromeric region start'
CEN_END_COLUMN = 'centromeric region end'

REQUIRED_COLUMNS: Tuple[str, ...] = (
    SPECIES_COLUMN,
    CHROMOSOME_COLUMN,
    LENGTH_COLUMN,
    CEN_START_COLUMN,
    CEN_END_COLUMN,
)


TableRow = TypedDict('TableRow', {
    'species': str,
    'chromosome': str,
    'chromosome length (bp)': str,
    'centromeric region start': str,
    'centromeric region end': str,
}, total=False)
"""One row of the centromere table, as read from the TSV (all values are strings)"""


@dataclass(frozen=True)
class ChromosomeRecord:
    """
    A single chromosome with its centromeric region

    Attributes:
        id: Chromosome name ('1', 'X', 'IV', ...)
        length: Chromosome length (bp)
        centromere_start: Start of the centromeric region (bp)
        centromere_end: End of the centromeric region (bp)
    """
    id: str
    length: int
    centromere_start: int
    centromere_end: int

    @property
    def centromere_position(self) -> float:
        """Midpoint of the centromeric region (bp)"""
        return centromere_midpoint(self.centromere_start, self.centromere_end)

    @property
    def left_arm(self) -> float:
        """Length of the arm before the centromere (bp)"""
        return self.centromere_position

    @property
    def right_arm(self) -> float:
        """Length of the arm after the centromere (bp)"""
        return self.length - self.centromere_position

    @property
    def longest_arm(self) -> float:
        """Longest of the two arms (bp)"""
        return longest_arm(self.length, self.centromere_position)


@dataclass(frozen=True)
class SpeciesChromosomeSet:
    """
    Chromosomes of one species, in input row order

    Attributes:
        species: Species name (e.g. 'Homo sapiens')
        records: Chromosome records, one per chromosome id
    """
    species: str
    records: Tuple[ChromosomeRecord, ...] = ()

    def __iter__(self) -> Iterator[ChromosomeRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)

    @property
    def chromosome_ids(self) -> List[str]:
        return [record.id for record in self.records]

    def get(self, chromosome_id: str) -> Optional[ChromosomeRecord]:
        """Get the record for a chromosome id, or None"""
        for record in self.records:
            if record.id == chromosome_id:
                return record
        return None


@dataclass(frozen=True)
class Dataset:
    """
    All species loaded from one table

    Read-only mapping from species name to its SpeciesChromosomeSet.
    Species keep the order in which they first appear in the table.

    Example:
        >>> dataset = load_dataset('centromeric-regions.tsv')
        >>> dataset['Homo sapiens'].get('1').centromere_position
        123605523.5
    """
    species_sets: Tuple[SpeciesChromosomeSet, ...] = ()

    def __getitem__(self, species: str) -> SpeciesChromosomeSet:
        for species_set in self.species_sets:
            if species_set.species == species:
                return species_set
        raise KeyError(species)

    def __contains__(self, species: object) -> bool:
        return any(s.species == species for s in self.species_sets)

    def __iter__(self) -> Iterator[str]:
        return iter(self.species_names)

    def __len__(self) -> int:
        return len(self.species_sets)

    @property
    def species_names(self) -> List[str]:
        """Species names in table order"""
        return [s.species for s in self.species_sets]

    @property
    def total_chromosomes(self) -> int:
        """Number of chromosome records across all species"""
        return sum(len(s) for s in self.species_sets)

    def items(self) -> List[Tuple[str, SpeciesChromosomeSet]]:
        return [(s.species, s) for s in self.species_sets]

    def to_dict(self) -> Dict[str, List[ChromosomeRecord]]:
        """Plain dict of species name to list of records"""
        return {s.species: list(s.records) for s in self.species_sets}
