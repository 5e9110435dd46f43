"""I/O utilities for centroplot"""

from .readers import TableReader, TableLoader, read_table, load_dataset
from .writers import LayoutWriter, write_layout

__all__ = [
    'TableReader', 'TableLoader',
    'read_table', 'load_dataset',
    'LayoutWriter', 'write_layout']
