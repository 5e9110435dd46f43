"""
Chromosome visualizer

Draws each chromosome as a horizontal bar split at its centromere,
one block of rows per species. Drawing goes through a small
DrawingSurface interface; MatplotlibSurface is the bundled implementation.
"""

from __future__ import annotations
from contextlib import contextmanager
from typing import ContextManager, Iterator, Optional, Protocol, Tuple
from pathlib import Path
import logging
import matplotlib.pyplot as plt
import matplotlib.patches as patches
from matplotlib.figure import Figure

from .config import PlotConfig
from .layout import LayoutEngine, LayoutResult
from .types import Dataset, HorizontalAlign, PathLike, VerticalAlign

logger = logging.getLogger(__name__)


class DrawingSurface(Protocol):
    """
    Drawing capabilities needed to render a layout

    Coordinates are canvas pixels with y growing downward. Segment and
    circle positions are relative to the current origin.
    """

    def translate_origin(self, x: float, y: float) -> ContextManager[object]:
        """Move the origin by (x, y) until the returned context exits"""
        ...

    def draw_segment(self, x_start: float, x_end: float, stroke_width: float, color: str) -> None:
        """Horizontal segment at the origin's y"""
        ...

    def draw_circle(self, diameter: float, color: str) -> None:
        """Filled circle centered on the origin"""
        ...

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        size: float,
        halign: HorizontalAlign,
        valign: VerticalAlign,
        color: str
    ) -> None:
        """Text anchored at (x, y) relative to the origin"""
        ...


class MatplotlibSurface:
    """
    DrawingSurface backed by a matplotlib Figure

    The axes cover the whole figure and map one data unit to one pixel
    at the configured DPI.
    """

    def __init__(
        self,
        width: float,
        height: float,
        dpi: int = 100,
        background_color: str = '#dcdcdc'
    ) -> None:
        self.width = width
        self.height = height
        self.dpi = dpi
        self._origin: Tuple[float, float] = (0.0, 0.0)

        self.fig: Figure = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        self.fig.patch.set_facecolor(background_color)
        self.ax = self.fig.add_axes([0, 0, 1, 1])
        self.ax.set_xlim(0, width)
        self.ax.set_ylim(height, 0)  # y grows downward like a canvas
        self.ax.axis('off')

    @property
    def origin(self) -> Tuple[float, float]:
        return self._origin

    def _px_to_points(self, px: float) -> float:
        return px * 72.0 / self.dpi

    @contextmanager
    def translate_origin(self, x: float, y: float) -> Iterator['MatplotlibSurface']:
        previous = self._origin
        self._origin = (previous[0] + x, previous[1] + y)
        try:
            yield self
        finally:
            self._origin = previous

    def draw_segment(self, x_start: float, x_end: float, stroke_width: float, color: str) -> None:
        ox, oy = self._origin
        self.ax.plot([ox + x_start, ox + x_end], [oy, oy],
                     color=color,
                     linewidth=self._px_to_points(stroke_width),
                     solid_capstyle='round',
                     zorder=2)

    def draw_circle(self, diameter: float, color: str) -> None:
        circle = patches.Circle(self._origin, diameter / 2,
                                facecolor=color, edgecolor='none', zorder=3)
        self.ax.add_patch(circle)

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        size: float,
        halign: HorizontalAlign,
        valign: VerticalAlign,
        color: str
    ) -> None:
        ox, oy = self._origin
        self.ax.text(ox + x, oy + y, text,
                     fontsize=self._px_to_points(size),
                     ha=halign, va=valign, color=color)

    def save(self, output_file: PathLike) -> None:
        Path(output_file).parent.mkdir(parents=True, exist_ok=True)
        self.fig.savefig(output_file, dpi=self.dpi,
                         facecolor=self.fig.get_facecolor(), edgecolor='none')


class ChromosomePlotter:
    """
    Renders chromosome layouts

    Example:
        >>> dataset = load_dataset('centromeric-regions.tsv')
        >>> plotter = ChromosomePlotter(PlotConfig.publication())
        >>> fig = plotter.plot(dataset, 'chromosomes.png')
    """

    def __init__(self, config: Optional[PlotConfig] = None) -> None:
        """
        Initialize ChromosomePlotter

        Args:
            config: Plot configuration. If None, uses default settings.
        """
        self.config: PlotConfig = config or PlotConfig()
        self.layout_engine = LayoutEngine(self.config)

    def render(self, layout: LayoutResult, surface: DrawingSurface) -> None:
        """
        Draw a computed layout on a surface

        Args:
            layout: Result of LayoutEngine.calculate_layout
            surface: Any object with the DrawingSurface capabilities
        """
        style = self.config.style

        for species in layout.species:
            surface.draw_text(species.species, species.title_x, species.title_y,
                              size=style.title_fontsize, halign='center', valign='bottom',
                              color=style.text_color)

            for row in species.chromosomes:
                surface.draw_text(row.chromosome_id, row.label_x, row.anchor_y,
                                  size=style.label_fontsize, halign='left', valign='center',
                                  color=style.text_color)

                with surface.translate_origin(row.anchor_x, row.anchor_y):
                    surface.draw_segment(-row.geometry.left_arm_length,
                                         row.geometry.right_arm_length,
                                         stroke_width=style.chromosome_width,
                                         color=style.chromosome_color)
                    surface.draw_circle(style.centromere_diameter, color=style.centromere_color)

        logger.debug(f"Rendered {layout.total_chromosomes} chromosomes "
                     f"in {layout.n_species} species")

    def plot(
        self,
        dataset: Dataset,
        output_file: PathLike = 'chromosomes.png',
        canvas_width: Optional[float] = None,
        show: bool = False
    ) -> Figure:
        """
        Lay out, draw and save all species of a dataset

        Args:
            dataset: Loaded chromosome data
            output_file: Path to save figure
            canvas_width: Canvas width (px), config default if None
            show: Whether to display the plot

        Returns:
            matplotlib Figure object
        """
        layout = self.layout_engine.calculate_layout(dataset, canvas_width)
        for species, reason in layout.skipped.items():
            logger.warning(f"Species '{species}' not drawn: {reason}")

        surface = MatplotlibSurface(layout.canvas_width, layout.canvas_height,
                                    dpi=self.config.dpi,
                                    background_color=self.config.style.background_color)
        try:
            self.render(layout, surface)
            surface.save(output_file)
        except Exception:
            plt.close(surface.fig)
            raise
        logger.info(f"Plot saved to {output_file}")

        if show:
            plt.show()

        return surface.fig
