"""
Unit tests for the layout engine

Scale factors, arm geometry and placement of species blocks on the canvas.
"""
import random

import pytest

from centroplot.config import PlotConfig
from centroplot.exceptions import CanvasSizeError, DegenerateScaleError, EmptyRecordSetError
from centroplot.io import TableLoader
from centroplot.layout import LayoutEngine, compute_draw_geometry, compute_species_scale
from centroplot.types import ChromosomeRecord, Dataset, SpeciesChromosomeSet


@pytest.mark.unit
class TestComputeSpeciesScale:
    """Tests for compute_species_scale"""

    def test_human_chr1_scenario(self, human_chr1):
        scale = compute_species_scale([human_chr1], available_width=500, margin=50)
        assert scale == pytest.approx(450 / 125350898.5)
        assert scale == pytest.approx(3.590e-6, rel=1e-3)

    def test_longest_arm_drives_scale(self):
        records = [
            ChromosomeRecord('a', 1000, 100, 100),  # longest arm 900
            ChromosomeRecord('b', 400, 200, 200),   # longest arm 200
        ]
        assert compute_species_scale(records, 1000, 100) == pytest.approx(1.0)

    def test_order_invariant(self, sample_rows):
        records = list(TableLoader.load(sample_rows)['Homo sapiens'])
        expected = compute_species_scale(records, 600, 50)

        shuffled = records[:]
        random.Random(7).shuffle(shuffled)
        assert compute_species_scale(shuffled, 600, 50) == expected
        assert compute_species_scale(list(reversed(records)), 600, 50) == expected

    def test_empty_records_raise(self):
        with pytest.raises(EmptyRecordSetError):
            compute_species_scale([], 500, 50)

    def test_zero_arm_raises(self):
        record = ChromosomeRecord('0', 0, 0, 0)
        with pytest.raises(DegenerateScaleError):
            compute_species_scale([record], 500, 50)

    @pytest.mark.parametrize("available_width, margin", [(50, 50), (40, 50), (0, 0)])
    def test_no_drawing_width_raises(self, human_chr1, available_width, margin):
        with pytest.raises(DegenerateScaleError, match="No positive width"):
            compute_species_scale([human_chr1], available_width, margin)

    def test_static_method_matches_function(self, human_chr1):
        assert LayoutEngine.compute_species_scale([human_chr1], 500, 50) == \
            compute_species_scale([human_chr1], 500, 50)


@pytest.mark.unit
class TestComputeDrawGeometry:
    """Tests for compute_draw_geometry"""

    def test_human_chr1_scenario(self, human_chr1):
        scale = compute_species_scale([human_chr1], 500, 50)
        geometry = compute_draw_geometry(human_chr1, scale)

        assert geometry.left_arm_length == pytest.approx(443.734, abs=0.01)
        assert geometry.right_arm_length == pytest.approx(450.0)

    def test_arms_sum_to_scaled_length(self, sample_rows):
        dataset = TableLoader.load(sample_rows)
        for species_set in dataset.species_sets:
            for record in species_set:
                for scale in (1e-6, 0.5, 3.0):
                    geometry = compute_draw_geometry(record, scale)
                    assert geometry.total_length == pytest.approx(scale * record.length)

    def test_centromere_at_end(self):
        record = ChromosomeRecord('acro', 1000, 0, 0)
        geometry = compute_draw_geometry(record, 0.1)
        assert geometry.left_arm_length == 0
        assert geometry.right_arm_length == pytest.approx(100.0)


@pytest.mark.unit
class TestCalculateLayout:
    """Tests for LayoutEngine.calculate_layout"""

    def test_rows_stacked_per_species(self, sample_rows):
        dataset = TableLoader.load(sample_rows)
        layout = LayoutEngine().calculate_layout(dataset, canvas_width=1000)

        human, yeast = layout.species
        assert human.species == 'Homo sapiens'
        assert human.title_y == 50
        assert [row.anchor_y for row in human.chromosomes] == [60, 90, 120]

        # cursor after human rows is 150
        assert yeast.title_y == 200
        assert [row.anchor_y for row in yeast.chromosomes] == [210, 240, 270]
        assert layout.canvas_height == 300 + 30

    def test_bars_centered_and_fit(self, sample_rows):
        dataset = TableLoader.load(sample_rows)
        layout = LayoutEngine().calculate_layout(dataset, canvas_width=1000)

        for species in layout.species:
            assert species.title_x == 500
            longest = max(
                max(row.geometry.left_arm_length, row.geometry.right_arm_length)
                for row in species.chromosomes
            )
            assert longest == pytest.approx(500 - 50)
            for row in species.chromosomes:
                assert row.anchor_x == 500
                assert row.label_x == 20
                assert row.x_start >= 50 - 1e-9
                assert row.x_end <= 950 + 1e-9

    def test_default_canvas_width_from_config(self, sample_rows):
        config = PlotConfig()
        config.layout.canvas_width = 800
        layout = LayoutEngine(config).calculate_layout(TableLoader.load(sample_rows))
        assert layout.canvas_width == 800
        assert layout.species[0].chromosomes[0].anchor_x == 400

    def test_empty_species_skipped(self, human_chr1):
        dataset = Dataset(species_sets=(
            SpeciesChromosomeSet('Empty species'),
            SpeciesChromosomeSet('Homo sapiens', (human_chr1,)),
        ))
        layout = LayoutEngine().calculate_layout(dataset, canvas_width=1000)

        assert 'Empty species' in layout.skipped
        assert layout.get_species('Empty species') is None
        assert layout.n_species == 1
        assert layout.species[0].title_y == 50

    def test_degenerate_species_skipped(self, human_chr1):
        dataset = Dataset(species_sets=(
            SpeciesChromosomeSet('Homo sapiens', (human_chr1,)),
            SpeciesChromosomeSet('Point', (ChromosomeRecord('0', 0, 0, 0),)),
        ))
        layout = LayoutEngine().calculate_layout(dataset, canvas_width=1000)

        assert list(layout.skipped) == ['Point']
        assert layout.total_chromosomes == 1

    def test_narrow_canvas_skips_every_species(self, sample_rows):
        layout = LayoutEngine().calculate_layout(TableLoader.load(sample_rows), canvas_width=80)

        assert layout.n_species == 0
        assert set(layout.skipped) == {'Homo sapiens', 'Saccharomyces cerevisiae'}

    @pytest.mark.parametrize("canvas_width", [0, -100])
    def test_non_positive_canvas_width_raises(self, sample_rows, canvas_width):
        with pytest.raises(CanvasSizeError, match="must be positive"):
            LayoutEngine().calculate_layout(TableLoader.load(sample_rows), canvas_width=canvas_width)

    def test_negative_margin_raises(self, sample_rows):
        config = PlotConfig()
        config.layout.margin = -10
        with pytest.raises(CanvasSizeError, match="must not be negative"):
            LayoutEngine(config).calculate_layout(TableLoader.load(sample_rows), canvas_width=1000)

    def test_empty_dataset(self):
        layout = LayoutEngine().calculate_layout(Dataset(), canvas_width=1000)
        assert layout.n_species == 0
        assert layout.canvas_height == 30

    def test_compact_preset_spacing(self, sample_rows):
        layout = LayoutEngine(PlotConfig.compact()).calculate_layout(
            TableLoader.load(sample_rows), canvas_width=1000)
        rows = layout.species[0].chromosomes
        assert rows[1].anchor_y - rows[0].anchor_y == 16
