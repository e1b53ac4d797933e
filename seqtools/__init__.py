"""
seqtools: a small toolkit for FASTA/FASTQ files.

Streamed commands (count, length, freqs, random, ids, convert, select) and an
interactive terminal viewer for multiple sequence alignments.
"""

__version__ = "0.1.0"

from seqtools.errors import SeqtoolsError, MainError, SeqError, ViewerError
from seqtools.io import Record, read_fastx, read_fasta, write_fasta, write_fastq
from seqtools.stats import SummaryStats

__all__ = [
    "SeqtoolsError",
    "MainError",
    "SeqError",
    "ViewerError",
    "Record",
    "read_fastx",
    "read_fasta",
    "write_fasta",
    "write_fastq",
    "SummaryStats",
]
