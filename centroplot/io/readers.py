"""
I/O Readers

Reads centromere tables and builds the in-memory Dataset.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Mapping, Optional
from pathlib import Path
import logging
import re
import pandas as pd

from ..exceptions import MalformedRowError
from ..types import (
    CEN_END_COLUMN,
    CEN_START_COLUMN,
    CHROMOSOME_COLUMN,
    LENGTH_COLUMN,
    REQUIRED_COLUMNS,
    SPECIES_COLUMN,
    ChromosomeRecord,
    Dataset,
    PathLike,
    SpeciesChromosomeSet,
    TableRow,
)

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")
DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?$")


class TableReader:
    """Reads centromere TSV files"""

    @staticmethod
    def read(filepath: PathLike) -> List[TableRow]:
        """
        Read a tab-separated centromere table with a header row

        Every cell is kept as a string; type conversion is done by TableLoader.

        Args:
            filepath: Path to the TSV file

        Returns:
            List of rows as dicts keyed by (stripped) column name

        Raises:
            MalformedRowError: a required column is missing from the header
        """
        if not Path(filepath).exists():
            raise FileNotFoundError(f"Table file not found: {filepath}")

        table: pd.DataFrame = pd.read_csv(
            filepath, sep='\t', dtype=str, keep_default_na=False, encoding='utf-8'
        )
        table.columns = [str(col).strip() for col in table.columns]
        missing = [col for col in REQUIRED_COLUMNS if col not in table.columns]
        if missing:
            raise MalformedRowError(
                f"{filepath}: missing required column(s) " + ", ".join(f"'{col}'" for col in missing),
                column=missing[0]
            )
        logger.debug(f"Read {len(table)} rows with columns {list(table.columns)} from {filepath}")

        return table.to_dict('records')  # type: ignore[return-value]


class TableLoader:
    """
    Builds a Dataset from table rows

    Species and chromosomes are keyed by name: a repeated
    (species, chromosome) pair replaces the earlier values but keeps
    the position of the first occurrence.
    """

    @staticmethod
    def _get_text(row: Mapping[str, object], column: str, row_number: int) -> str:
        if column not in row:
            raise MalformedRowError(f"missing column '{column}'", row_number, column)
        value = row[column]
        text = '' if value is None or pd.isna(value) else str(value).strip()
        if not text:
            raise MalformedRowError(f"empty value in column '{column}'", row_number, column, value)
        return text

    @classmethod
    def _get_int(cls, row: Mapping[str, object], column: str, row_number: int) -> int:
        text = cls._get_text(row, column, row_number)
        if INTEGER_PATTERN.match(text):
            return int(text)
        if not DECIMAL_PATTERN.match(text):
            raise MalformedRowError(
                f"non-numeric value '{text}' in column '{column}'", row_number, column, text
            )
        number = float(text)
        if not number.is_integer():
            raise MalformedRowError(
                f"non-integer value '{text}' in column '{column}'", row_number, column, text
            )
        return int(number)

    @classmethod
    def parse_row(cls, row: Mapping[str, object], row_number: int) -> ChromosomeRecord:
        """
        Convert one table row into a ChromosomeRecord

        Args:
            row: Row mapping of column name to value
            row_number: 1-based data row number, used in error messages

        Returns:
            ChromosomeRecord

        Raises:
            MalformedRowError: missing/empty/non-integer column, or
                coordinates that put the centromere outside the chromosome
        """
        chromosome_id = cls._get_text(row, CHROMOSOME_COLUMN, row_number)
        length = cls._get_int(row, LENGTH_COLUMN, row_number)
        cen_start = cls._get_int(row, CEN_START_COLUMN, row_number)
        cen_end = cls._get_int(row, CEN_END_COLUMN, row_number)

        if length <= 0:
            raise MalformedRowError(
                f"chromosome length must be positive, got {length}", row_number, LENGTH_COLUMN, length
            )
        if cen_start < 0:
            raise MalformedRowError(
                f"centromere start must not be negative, got {cen_start}",
                row_number, CEN_START_COLUMN, cen_start
            )
        if cen_end < cen_start:
            raise MalformedRowError(
                f"centromere end {cen_end} is before start {cen_start}",
                row_number, CEN_END_COLUMN, cen_end
            )

        record = ChromosomeRecord(
            id=chromosome_id,
            length=length,
            centromere_start=cen_start,
            centromere_end=cen_end,
        )
        if record.centromere_position > length:
            raise MalformedRowError(
                f"centromere position {record.centromere_position} exceeds "
                f"chromosome length {length}",
                row_number, CEN_END_COLUMN, cen_end
            )
        return record

    @classmethod
    def load(cls, table_rows: Iterable[Mapping[str, object]]) -> Dataset:
        """
        Build a Dataset from table rows

        Args:
            table_rows: Rows with at least the species, chromosome, length and
                centromeric region start/end columns. Rows are not modified.

        Returns:
            Dataset with species in order of first appearance
        """
        species_records: Dict[str, Dict[str, ChromosomeRecord]] = {}

        for row_number, row in enumerate(table_rows, start=1):
            species = cls._get_text(row, SPECIES_COLUMN, row_number)
            record = cls.parse_row(row, row_number)

            chromosomes = species_records.setdefault(species, {})
            if record.id in chromosomes:
                logger.warning(
                    f"Row {row_number}: duplicate chromosome '{record.id}' for "
                    f"'{species}', replacing earlier values"
                )
            chromosomes[record.id] = record

        dataset = Dataset(species_sets=tuple(
            SpeciesChromosomeSet(species=species, records=tuple(chromosomes.values()))
            for species, chromosomes in species_records.items()
        ))
        logger.info(f"Loaded {dataset.total_chromosomes} chromosomes for {len(dataset)} species")
        return dataset


def read_table(filepath: PathLike) -> List[TableRow]:
    """
    Convenience function to read a centromere table

    Args:
        filepath: Path to the TSV file

    Returns:
        List of rows
    """
    return TableReader.read(filepath)


def load_dataset(filepath: Optional[PathLike] = None) -> Dataset:
    """
    Read and load a centromere table in one step

    Args:
        filepath: Path to the TSV file (bundled default table if None)

    Returns:
        Dataset
    """
    if filepath is None:
        from ..data import DEFAULT_CENTROMERE_TABLE
        filepath = DEFAULT_CENTROMERE_TABLE
    return TableLoader.load(read_table(filepath))
