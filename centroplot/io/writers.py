"""
I/O Writers

Writes computed layouts as tables.
"""

from __future__ import annotations
from pathlib import Path
import logging
import pandas as pd

from ..layout import LayoutResult
from ..types import PathLike

logger = logging.getLogger(__name__)

LAYOUT_COLUMNS = [
    'species',
    'chromosome',
    'length',
    'centromere_position',
    'scale',
    'anchor_x',
    'anchor_y',
    'left_arm_length',
    'right_arm_length',
]


class LayoutWriter:
    """Writes per-chromosome geometry in TSV format"""

    @staticmethod
    def to_dataframe(layout: LayoutResult) -> pd.DataFrame:
        """
        One row per chromosome with its scale and drawn geometry

        Args:
            layout: Result of LayoutEngine.calculate_layout

        Returns:
            DataFrame with LAYOUT_COLUMNS
        """
        records = [
            {
                'species': species.species,
                'chromosome': row.chromosome_id,
                'length': row.length,
                'centromere_position': row.centromere_position,
                'scale': species.scale,
                'anchor_x': row.anchor_x,
                'anchor_y': row.anchor_y,
                'left_arm_length': row.geometry.left_arm_length,
                'right_arm_length': row.geometry.right_arm_length,
            }
            for species, row in layout.iter_rows()
        ]
        return pd.DataFrame(records, columns=LAYOUT_COLUMNS)

    def write(self, layout: LayoutResult, output_file: PathLike) -> pd.DataFrame:
        """
        Write layout geometry to a TSV file

        Args:
            layout: Layout to write
            output_file: Path to output TSV file

        Returns:
            The DataFrame that was written
        """
        if layout.total_chromosomes == 0:
            logger.warning("No chromosomes in layout, writing header only")

        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        df = self.to_dataframe(layout)
        df.to_csv(output_file, sep='\t', index=False)
        logger.info(f"Wrote {len(df)} chromosome rows to {output_file}")
        return df


def write_layout(layout: LayoutResult, output_file: PathLike) -> pd.DataFrame:
    """Convenience function for LayoutWriter.write"""
    return LayoutWriter().write(layout, output_file)
