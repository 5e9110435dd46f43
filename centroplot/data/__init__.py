"""
Default data files for centroplot
"""
import os

# Path to package data directory
DATA_DIR = os.path.dirname(os.path.abspath(__file__))

# Default centromere table (human, mouse and budding yeast chromosomes)
DEFAULT_CENTROMERE_TABLE = os.path.join(DATA_DIR, 'centromeric-regions.tsv')
