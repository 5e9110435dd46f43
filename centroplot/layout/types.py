"""
Layout types for centroplot
Data structures for layout engine results

All types are immutable (frozen) for safety and testability.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class ArmGeometry:
    """
    Scaled arm lengths of one chromosome, measured from its centromere

    Attributes:
        left_arm_length: Drawn length left of the centromere (px)
        right_arm_length: Drawn length right of the centromere (px)
    """
    left_arm_length: float
    right_arm_length: float

    @property
    def total_length(self) -> float:
        """Drawn length of the whole chromosome (px)"""
        return self.left_arm_length + self.right_arm_length


@dataclass(frozen=True)
class ChromosomeLayout:
    """
    Placement of one chromosome row

    The bar is drawn from anchor_x - left_arm_length to
    anchor_x + right_arm_length at anchor_y, with the centromere at the anchor.

    Attributes:
        chromosome_id: Chromosome name
        length: Chromosome length (bp)
        centromere_position: Centromere position (bp)
        anchor_x: Horizontal position of the centromere (px)
        anchor_y: Vertical position of the row (px)
        geometry: Scaled arm lengths
        label_x: Horizontal position of the name label (px)
    """
    chromosome_id: str
    length: int
    centromere_position: float
    anchor_x: float
    anchor_y: float
    geometry: ArmGeometry
    label_x: float

    @property
    def x_start(self) -> float:
        """Left end of the bar (px)"""
        return self.anchor_x - self.geometry.left_arm_length

    @property
    def x_end(self) -> float:
        """Right end of the bar (px)"""
        return self.anchor_x + self.geometry.right_arm_length


@dataclass(frozen=True)
class SpeciesLayout:
    """
    Placement of one species block: title plus chromosome rows

    Attributes:
        species: Species name
        scale: Pixels per base pair for every chromosome of the species
        title_x: Horizontal position of the title (px)
        title_y: Baseline of the title (px)
        chromosomes: Chromosome rows in table order
    """
    species: str
    scale: float
    title_x: float
    title_y: float
    chromosomes: Tuple[ChromosomeLayout, ...]

    @property
    def n_chromosomes(self) -> int:
        return len(self.chromosomes)


@dataclass
class LayoutResult:
    """
    Complete layout for one rendering pass

    Attributes:
        canvas_width: Canvas width (px)
        canvas_height: Canvas height needed for all rows (px)
        species: Species blocks, top to bottom
        skipped: Species that could not be laid out, with the reason
    """
    canvas_width: float
    canvas_height: float
    species: Tuple[SpeciesLayout, ...]
    skipped: Dict[str, str] = field(default_factory=dict)

    @property
    def n_species(self) -> int:
        """Number of species laid out"""
        return len(self.species)

    @property
    def total_chromosomes(self) -> int:
        """Number of chromosome rows"""
        return sum(s.n_chromosomes for s in self.species)

    def get_species(self, species: str) -> Optional[SpeciesLayout]:
        """Get the layout of a species, or None if missing or skipped"""
        for species_layout in self.species:
            if species_layout.species == species:
                return species_layout
        return None

    def iter_rows(self) -> List[Tuple[SpeciesLayout, ChromosomeLayout]]:
        """All (species, chromosome) row pairs, top to bottom"""
        return [(s, c) for s in self.species for c in s.chromosomes]
