"""
Layout Engine for centroplot
Pure layout logic: scale factors and row placement

Each species gets one scale factor so that its longest chromosome arm
fits half the canvas. Every chromosome is centered on its centromere at
the middle of the canvas, one row per chromosome.
"""
from __future__ import annotations
from typing import Dict, List, Optional, Sequence
import logging
import numpy as np

from ..config import PlotConfig
from ..exceptions import CanvasSizeError, DegenerateScaleError, EmptyRecordSetError
from ..types import ChromosomeRecord, Dataset
from .types import ArmGeometry, ChromosomeLayout, LayoutResult, SpeciesLayout

logger = logging.getLogger(__name__)


class LayoutEngine:
    """
    Computes species scale factors and chromosome placement

    Algorithm:
    1. For each species, find the longest arm over its chromosomes
    2. Scale = (half canvas width - margin) / longest arm
    3. Stack species blocks top to bottom: title, then one row per chromosome
    """

    def __init__(self, config: Optional[PlotConfig] = None) -> None:
        """
        Initialize layout engine

        Args:
            config: Plot configuration (defaults if None)
        """
        self.config: PlotConfig = config or PlotConfig()
        self.layout_config = self.config.layout

    @staticmethod
    def compute_species_scale(
        records: Sequence[ChromosomeRecord],
        available_width: float,
        margin: float
    ) -> float:
        """
        Scale factor that fits the longest arm of a species

        Args:
            records: Chromosomes of one species
            available_width: Width available for one arm plus margin (px)
            margin: Space kept free at the canvas edge (px)

        Returns:
            Pixels per base pair

        Raises:
            EmptyRecordSetError: records is empty
            DegenerateScaleError: every chromosome has zero-length arms, or
                the margin leaves no positive width to draw in
        """
        if len(records) == 0:
            raise EmptyRecordSetError("Cannot compute a scale for an empty set of chromosomes")

        arms = np.array([record.longest_arm for record in records], dtype=float)
        max_arm = float(arms.max())
        if max_arm == 0:
            raise DegenerateScaleError("Longest chromosome arm is 0 bp, scale is undefined")

        drawable_width = available_width - margin
        if drawable_width <= 0:
            raise DegenerateScaleError(
                f"No positive width left for drawing: available width {available_width} px, "
                f"margin {margin} px"
            )

        return drawable_width / max_arm

    @staticmethod
    def compute_draw_geometry(record: ChromosomeRecord, scale: float) -> ArmGeometry:
        """
        Scaled arm lengths of a chromosome

        Args:
            record: Chromosome record
            scale: Pixels per base pair

        Returns:
            ArmGeometry with left and right arm lengths (px)
        """
        return ArmGeometry(
            left_arm_length=scale * record.centromere_position,
            right_arm_length=scale * (record.length - record.centromere_position),
        )

    def calculate_layout(
        self,
        dataset: Dataset,
        canvas_width: Optional[float] = None
    ) -> LayoutResult:
        """
        Calculate placement of every species block and chromosome row

        Species whose scale cannot be computed are logged, recorded in
        LayoutResult.skipped and left out of the canvas.

        Args:
            dataset: Loaded chromosome data
            canvas_width: Canvas width (px), config default if None

        Returns:
            LayoutResult

        Raises:
            CanvasSizeError: canvas width is not positive or margin is negative
        """
        cfg = self.layout_config
        width = float(canvas_width if canvas_width is not None else cfg.canvas_width)
        if not width > 0:
            raise CanvasSizeError(f"Canvas width must be positive, got {width:g} px")
        if cfg.margin < 0:
            raise CanvasSizeError(f"Margin must not be negative, got {cfg.margin:g} px")
        center_x = width / 2

        logger.info(f"Calculating layout for {len(dataset)} species on a {width:.0f} px wide canvas")

        species_layouts: List[SpeciesLayout] = []
        skipped: Dict[str, str] = {}
        y = cfg.top_padding

        for species, species_set in dataset.items():
            try:
                scale = self.compute_species_scale(species_set.records, center_x, cfg.margin)
            except (EmptyRecordSetError, DegenerateScaleError) as e:
                logger.error(f"Skipping species '{species}': {e}")
                skipped[species] = str(e)
                continue

            y += cfg.species_spacing
            title_y = y
            y += cfg.title_gap

            rows: List[ChromosomeLayout] = []
            for record in species_set:
                rows.append(ChromosomeLayout(
                    chromosome_id=record.id,
                    length=record.length,
                    centromere_position=record.centromere_position,
                    anchor_x=center_x,
                    anchor_y=y,
                    geometry=self.compute_draw_geometry(record, scale),
                    label_x=cfg.label_x,
                ))
                y += cfg.row_spacing

            logger.debug(f"  {species}: {len(rows)} chromosomes, scale={scale:.3e} px/bp")
            species_layouts.append(SpeciesLayout(
                species=species,
                scale=scale,
                title_x=center_x,
                title_y=title_y,
                chromosomes=tuple(rows),
            ))

        canvas_height = y + cfg.bottom_padding
        logger.info(f"Layout complete: {len(species_layouts)} species, "
                    f"{len(skipped)} skipped, canvas height {canvas_height:.0f} px")

        return LayoutResult(
            canvas_width=width,
            canvas_height=canvas_height,
            species=tuple(species_layouts),
            skipped=skipped,
        )


def compute_species_scale(
    records: Sequence[ChromosomeRecord],
    available_width: float,
    margin: float
) -> float:
    """Convenience function for LayoutEngine.compute_species_scale"""
    return LayoutEngine.compute_species_scale(records, available_width, margin)


def compute_draw_geometry(record: ChromosomeRecord, scale: float) -> ArmGeometry:
    """Convenience function for LayoutEngine.compute_draw_geometry"""
    return LayoutEngine.compute_draw_geometry(record, scale)
