"""
Unit tests for layout export
"""
import pandas as pd
import pytest

from centroplot.io import LayoutWriter, TableLoader, write_layout
from centroplot.io.writers import LAYOUT_COLUMNS
from centroplot.layout import LayoutEngine


@pytest.mark.unit
def test_to_dataframe_one_row_per_chromosome(sample_rows):
    layout = LayoutEngine().calculate_layout(TableLoader.load(sample_rows), canvas_width=1000)
    df = LayoutWriter.to_dataframe(layout)

    assert list(df.columns) == LAYOUT_COLUMNS
    assert len(df) == 6
    assert list(df['chromosome']) == ['1', '2', 'X', 'I', 'II', 'III']
    assert (df['anchor_x'] == 500).all()


@pytest.mark.unit
def test_write_layout_roundtrip_values(sample_rows, tmp_path):
    layout = LayoutEngine().calculate_layout(TableLoader.load(sample_rows), canvas_width=1000)
    output = tmp_path / 'out' / 'layout.tsv'
    write_layout(layout, output)

    df = pd.read_csv(output, sep='\t', dtype={'chromosome': str})
    human = df[df['species'] == 'Homo sapiens']
    assert len(human) == 3
    assert human['scale'].nunique() == 1
    row = human.iloc[0]
    assert row['left_arm_length'] + row['right_arm_length'] == \
        pytest.approx(row['scale'] * row['length'])


@pytest.mark.unit
def test_write_empty_layout(tmp_path):
    from centroplot.types import Dataset

    layout = LayoutEngine().calculate_layout(Dataset(), canvas_width=1000)
    output = tmp_path / 'empty.tsv'
    df = write_layout(layout, output)

    assert df.empty
    assert output.read_text().strip().split('\t') == LAYOUT_COLUMNS
