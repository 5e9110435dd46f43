"""
Layout Module for centroplot
Scale factors and row placement for chromosome plots

Public API:
    - LayoutEngine: Main layout calculation engine
    - compute_species_scale / compute_draw_geometry: Pure numeric helpers
    - LayoutResult: Complete layout solution
    - SpeciesLayout: One species block
    - ChromosomeLayout: One chromosome row
    - ArmGeometry: Scaled arm lengths
"""

from .engine import LayoutEngine, compute_species_scale, compute_draw_geometry
from .types import (
    ArmGeometry,
    ChromosomeLayout,
    SpeciesLayout,
    LayoutResult,
)

__all__ = [
    'LayoutEngine',
    'compute_species_scale',
    'compute_draw_geometry',
    'ArmGeometry',
    'ChromosomeLayout',
    'SpeciesLayout',
    'LayoutResult',
]
