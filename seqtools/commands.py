"""Streamed FASTX commands: counting, statistics, generation and selection."""

from __future__ import annotations

import logging
import sys
from collections import Counter
from pathlib import Path
from typing import Iterable, List, Optional, Union

import numpy as np

from seqtools.errors import SeqError
from seqtools.io import Record, open_input, open_output, read_fastx, write_records
from seqtools.stats import SummaryStats, text_histogram

logger = logging.getLogger(__name__)

PathLike = Union[str, Path, None]

CHARSETS = {
    "dna": "ACGT",
    "rna": "ACGU",
    "protein": "ACDEFGHIKLMNPQRSTVWY",
}


def count(input_path: PathLike) -> int:
    """Print and return the number of records."""
    n = sum(1 for _ in read_fastx(input_path))
    print(f"{n} sequences")
    return n


def length(input_path: PathLike, summary: bool = False, histogram: bool = False) -> None:
    """Print per-record lengths, or a summary of the length distribution."""
    if not summary:
        for record in read_fastx(input_path):
            print(f"{record.name}\t{len(record.seq)}")
        return

    lengths = [len(record.seq) for record in read_fastx(input_path)]
    if not lengths:
        logger.warning("No sequences found, nothing to summarise")
        return
    stats = SummaryStats.from_values(lengths)
    if histogram:
        print(text_histogram(lengths), file=sys.stderr)
        print(stats.to_row(), file=sys.stderr)
    else:
        print(stats.to_column())


def frequencies(input_path: PathLike, per_sequence: bool = False) -> None:
    """Print character frequencies, globally or per record."""
    if per_sequence:
        for record in read_fastx(input_path):
            counter = Counter(record.seq)
            total = sum(counter.values())
            fields = [record.name]
            for char in sorted(counter):
                pct = counter[char] / total * 100
                fields.append(f"{char}: {counter[char]} {pct:.2f}%")
            print("\t".join(fields))
        return

    counter: Counter = Counter()
    for record in read_fastx(input_path):
        counter.update(record.seq)
    total = sum(counter.values())
    for char in sorted(counter):
        pct = counter[char] / total * 100
        print(f"{char}\t{counter[char]}\t{pct:.2f} %")


def generate_random(
    num: int = 10,
    mean_length: float = 100.0,
    std: float = 0.0,
    sequence_type: str = "dna",
    out: PathLike = None,
    fmt: str = "fasta",
    seed: Optional[int] = None,
) -> List[Record]:
    """Write *num* random sequences with normally distributed lengths."""
    if std < 0:
        raise ValueError("Standard deviation must be non-negative")
    rng = np.random.default_rng(seed)
    charset = np.array(list(CHARSETS[sequence_type]))

    lengths = np.clip(rng.normal(mean_length, std, size=num), 0, None).astype(int)
    records = []
    for i, n in enumerate(lengths):
        seq = "".join(rng.choice(charset, size=int(n)))
        records.append(Record(f"S{i}", seq))

    with open_output(out) as fh:
        write_records(fh, records, fmt)

    if std > 0 and num > 0:
        print(text_histogram(lengths.tolist()), file=sys.stderr)
        print(SummaryStats.from_values(lengths.tolist()).to_row(), file=sys.stderr)
    logger.debug("Generated %d %s sequences", num, sequence_type)
    return records


def ids(input_path: PathLike) -> None:
    """Print the full header line of every record."""
    for record in read_fastx(input_path):
        print(record.name)


def convert(input_path: PathLike, to: str = "fasta", out: PathLike = None) -> None:
    """Rewrite records in another format."""
    with open_output(out) as fh:
        write_records(fh, read_fastx(input_path), to)


def _read_id_file(ids_file: PathLike) -> List[str]:
    with open_input(ids_file) as fh:
        return [line.strip() for line in fh if line.strip()]


def _output_format(records: List[Record]) -> str:
    return "fastq" if records and records[0].is_fastq else "fasta"


def select_by_ids(
    input_path: PathLike,
    wanted: Optional[Iterable[str]] = None,
    ids_file: PathLike = None,
    out: PathLike = None,
) -> List[Record]:
    """Write the records whose id was requested, in input order."""
    requested = list(wanted or [])
    if ids_file is not None:
        requested.extend(_read_id_file(ids_file))
    wanted_set = set(requested)

    selected = [r for r in read_fastx(input_path) if r.id in wanted_set]
    missing = wanted_set - {r.id for r in selected}
    if missing:
        raise SeqError("identifier not found in input", sorted(missing)[0])

    with open_output(out) as fh:
        write_records(fh, selected, _output_format(selected))
    return selected


def select_by_index(
    input_path: PathLike,
    wanted: Optional[Iterable[str]] = None,
    ids_file: PathLike = None,
    out: PathLike = None,
) -> List[Record]:
    """Write the records at the requested 0-based indices, in input order."""
    raw = list(wanted or [])
    if ids_file is not None:
        raw.extend(_read_id_file(ids_file))
    indices = set()
    for value in raw:
        try:
            indices.add(int(value))
        except ValueError:
            raise SeqError("index is not an integer", value) from None

    selected = []
    n_records = 0
    for i, record in enumerate(read_fastx(input_path)):
        n_records = i + 1
        if i in indices:
            selected.append(record)
    out_of_range = sorted(i for i in indices if i < 0 or i >= n_records)
    if out_of_range:
        raise SeqError(f"index out of range for {n_records} sequences", str(out_of_range[0]))

    with open_output(out) as fh:
        write_records(fh, selected, _output_format(selected))
    return selected
