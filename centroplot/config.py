"""
centroplot configuration

Canvas arrangement and drawing style for chromosome plots.
All sizes are in canvas pixels.
"""
from dataclasses import dataclass, field


@dataclass
class LayoutConfig:
    """
    Canvas arrangement of species blocks and chromosome rows

    Chromosomes are centered on their centromere at half the canvas width,
    so each arm gets at most half the canvas minus the margin.
    """

    # ============================================================
    # CANVAS
    # ============================================================
    canvas_width: int = 1200
    """Default canvas width (px)"""

    margin: float = 50.0
    """Space kept free between the longest arm and the canvas edge (px)"""

    # ============================================================
    # VERTICAL SPACING
    # ============================================================
    top_padding: float = 0.0
    """Space above the first species block (px)"""

    species_spacing: float = 50.0
    """Space before each species title (px)"""

    title_gap: float = 10.0
    """Space between a species title and its first chromosome (px)"""

    row_spacing: float = 30.0
    """Distance between consecutive chromosome rows (px)"""

    bottom_padding: float = 30.0
    """Space below the last chromosome row (px)"""

    # ============================================================
    # LABELS
    # ============================================================
    label_x: float = 20.0
    """Horizontal position of chromosome name labels (px)"""


@dataclass
class StyleConfig:
    """Colors, stroke widths and font sizes"""

    background_color: str = '#dcdcdc'
    """Canvas background"""

    chromosome_color: str = '#969696'
    """Chromosome bar color"""

    centromere_color: str = '#646464'
    """Centromere circle fill"""

    text_color: str = '#000000'
    """Species titles and chromosome labels"""

    chromosome_width: float = 17.0
    """Stroke width of chromosome bars (px)"""

    centromere_diameter: float = 18.0
    """Diameter of the centromere circle (px)"""

    title_fontsize: float = 32.0
    """Species title size (px)"""

    label_fontsize: float = 20.0
    """Chromosome label size (px)"""


@dataclass
class PlotConfig:
    """
    Complete plot configuration

    Example:
        >>> config = PlotConfig.publication()
        >>> plotter = ChromosomePlotter(config)
    """

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    """Layout configuration"""

    style: StyleConfig = field(default_factory=StyleConfig)
    """Style configuration"""

    dpi: int = 100
    """DPI for saved figures (pixels per inch of the canvas)"""

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def publication(cls) -> 'PlotConfig':
        """
        High-quality settings for publication figures

        - 300 DPI
        - White background for print
        """
        config = cls()
        config.dpi = 300
        config.style.background_color = '#ffffff'
        return config

    @classmethod
    def presentation(cls) -> 'PlotConfig':
        """
        Settings for slides

        - Wider canvas
        - Larger fonts and thicker bars
        """
        config = cls()
        config.layout.canvas_width = 1600
        config.layout.row_spacing = 36.0
        config.style.chromosome_width = 21.0
        config.style.centromere_diameter = 22.0
        config.style.title_fontsize = 40.0
        config.style.label_fontsize = 24.0
        return config

    @classmethod
    def compact(cls) -> 'PlotConfig':
        """
        Compact settings for many chromosomes

        - Tighter rows
        - Thinner bars
        """
        config = cls()
        config.layout.species_spacing = 36.0
        config.layout.row_spacing = 16.0
        config.style.chromosome_width = 8.0
        config.style.centromere_diameter = 9.0
        config.style.title_fontsize = 20.0
        config.style.label_fontsize = 11.0
        return config

    @classmethod
    def from_preset(cls, name: str) -> 'PlotConfig':
        """Build a configuration from a preset name ('default' or a preset method)"""
        presets = {
            'default': cls,
            'publication': cls.publication,
            'presentation': cls.presentation,
            'compact': cls.compact,
        }
        if name not in presets:
            raise ValueError(f"Unknown preset: {name}. Use one of {sorted(presets)}")
        return presets[name]()
