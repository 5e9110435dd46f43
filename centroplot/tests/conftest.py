"""
Shared pytest fixtures for centroplot tests

Supports both development mode (pytest from the repo root) and installed mode (pip install -e .)
"""
import sys
from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

# Repo root, two levels above this file's package (centroplot/tests/ -> repo)
REPO_ROOT = Path(__file__).parent.parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from centroplot.types import ChromosomeRecord  # noqa: E402

HEADER = [
    'species',
    'chromosome',
    'chromosome length (bp)',
    'centromeric region start',
    'centromeric region end',
]


def _make_row(species, chromosome, length, start, end):
    return dict(zip(HEADER, [species, chromosome, str(length), str(start), str(end)]))


@pytest.fixture
def make_row():
    """Factory for table rows as TableReader returns them (all strings)"""
    return _make_row


@pytest.fixture
def sample_rows(make_row):
    """Two species, three chromosomes each"""
    return [
        make_row('Homo sapiens', '1', 248956422, 122026460, 125184587),
        make_row('Homo sapiens', '2', 242193529, 92188146, 94090557),
        make_row('Homo sapiens', 'X', 156040895, 58605580, 62412542),
        make_row('Saccharomyces cerevisiae', 'I', 230218, 151465, 151582),
        make_row('Saccharomyces cerevisiae', 'II', 813184, 238207, 238323),
        make_row('Saccharomyces cerevisiae', 'III', 316620, 114385, 114501),
    ]


@pytest.fixture
def write_table(tmp_path):
    """Factory writing rows to a TSV file and returning its path"""
    def _write(rows, header=None, name='centromeric-regions.tsv'):
        header = header or HEADER
        lines = ['\t'.join(header)]
        for row in rows:
            lines.append('\t'.join(str(row.get(col, '')) for col in header))
        path = tmp_path / name
        path.write_text('\n'.join(lines) + '\n', encoding='utf-8')
        return path
    return _write


@pytest.fixture
def sample_table(write_table, sample_rows):
    """Path to a TSV file holding sample_rows"""
    return write_table(sample_rows)


@pytest.fixture
def human_chr1():
    """Human chromosome 1 (GRCh38 centromere model)"""
    return ChromosomeRecord(id='1', length=248956422,
                            centromere_start=122026460, centromere_end=125184587)


# Pytest configuration
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual functions"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests running the command-line pipeline"
    )
