"""centroplot: Centromere-centered chromosome plots for several species"""

from .config import PlotConfig, LayoutConfig, StyleConfig
from .exceptions import (
    CentroplotError, MalformedRowError, EmptyRecordSetError, DegenerateScaleError, CanvasSizeError)
from .types import ChromosomeRecord, SpeciesChromosomeSet, Dataset
from .io import TableLoader, load_dataset
from .layout import LayoutEngine, compute_species_scale, compute_draw_geometry
from . import utils
from .visualizer import ChromosomePlotter, MatplotlibSurface

__version__ = "0.1.0"
__all__ = [
    "PlotConfig", "LayoutConfig", "StyleConfig",
    "CentroplotError", "MalformedRowError", "EmptyRecordSetError", "DegenerateScaleError", "CanvasSizeError",
    "ChromosomeRecord", "SpeciesChromosomeSet", "Dataset",
    "TableLoader", "load_dataset",
    "LayoutEngine", "compute_species_scale", "compute_draw_geometry",
    "utils", "ChromosomePlotter", "MatplotlibSurface"]
