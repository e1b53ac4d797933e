"""Sequence I/O – FASTA/FASTQ reading and writing (plain, gzip, bzip2, xz)."""

from __future__ import annotations

import bz2
import gzip
import io
import logging
import lzma
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import IO, BinaryIO, Generator, Iterable, Iterator, Optional, Tuple, Union

from seqtools.errors import MainError, SeqError

logger = logging.getLogger(__name__)

_OPENERS = {
    ".gz": gzip.open,
    ".bz2": bz2.open,
    ".xz": lzma.open,
}

# Leading bytes of each compressed format; input is sniffed, not named
_MAGIC = [
    (b"\x1f\x8b", gzip.open),
    (b"BZh", bz2.open),
    (b"\xfd7zXZ\x00", lzma.open),
]
_MAGIC_LEN = max(len(prefix) for prefix, _ in _MAGIC)

# Placeholder quality when a record without qualities is written as FASTQ
DEFAULT_QUALITY = "I"


@dataclass
class Record:
    """A named biological sequence, with qualities when read from FASTQ."""

    name: str
    seq: str
    qual: Optional[str] = None

    @property
    def id(self) -> str:
        """First whitespace-separated token of the header."""
        parts = self.name.split()
        return parts[0] if parts else ""

    @property
    def is_fastq(self) -> bool:
        return self.qual is not None


@contextmanager
def _decoded(raw: BinaryIO, owned: bool = True) -> Iterator[IO[str]]:
    """Wrap a binary stream as text, decompressing it if its magic bytes match."""
    if not hasattr(raw, "peek"):
        raw = io.BufferedReader(raw)  # type: ignore[arg-type]
    magic = raw.peek(_MAGIC_LEN)[:_MAGIC_LEN]  # type: ignore[attr-defined]
    opener = next((op for prefix, op in _MAGIC if magic.startswith(prefix)), None)
    if opener is None:
        fh = io.TextIOWrapper(raw, encoding="utf-8")
    else:
        logger.debug("Detected %s compressed input", opener.__module__)
        fh = opener(raw, "rt", encoding="utf-8")
    try:
        yield fh
    finally:
        if opener is None and not owned:
            # leave stdin open for the caller
            fh.detach()
        else:
            fh.close()


@contextmanager
def open_input(filepath: Union[str, Path, None]) -> Iterator[IO[str]]:
    """Open *filepath* for reading text, or stdin when it is ``None``.

    gzip, bzip2 and xz input is recognised by its leading bytes, so
    compressed stdin and files without a compression suffix work too.
    """
    if filepath is None:
        raw = getattr(sys.stdin, "buffer", None)
        if raw is None:
            # stdin was replaced by a text-only stream
            yield sys.stdin
            return
        with _decoded(raw, owned=False) as fh:
            yield fh
        return
    with open(filepath, "rb") as raw:
        with _decoded(raw) as fh:
            yield fh


@contextmanager
def open_output(filepath: Union[str, Path, None]) -> Iterator[IO[str]]:
    """Open *filepath* for writing text, or stdout when it is ``None``.

    Compression is picked from the file suffix.
    """
    if filepath is None:
        yield sys.stdout
        return
    filepath = Path(filepath)
    opener = _OPENERS.get(filepath.suffix, open)
    with opener(filepath, "wt") as fh:  # type: ignore[operator]
        yield fh


def read_fastx(filepath: Union[str, Path, None] = None) -> Generator[Record, None, None]:
    """Yield :class:`Record` objects from a FASTA or FASTQ file.

    The format is detected from the first non-blank line (``>`` or ``@``).
    Reads stdin when *filepath* is ``None``.  Input that is neither, or that
    cannot be decoded, raises :class:`MainError`.
    """
    source = "<stdin>" if filepath is None else str(filepath)
    try:
        with open_input(filepath) as fh:
            lines = (line.rstrip("\n").rstrip("\r") for line in fh)
            for line in lines:
                if not line.strip():
                    continue
                if line.startswith(">"):
                    yield from _parse_fasta(line, lines)
                elif line.startswith("@"):
                    yield from _parse_fastq(line, lines, source)
                else:
                    raise MainError(f"{source} does not start with a FASTA or FASTQ header")
                return
    except (UnicodeDecodeError, EOFError, lzma.LZMAError) as e:
        raise MainError(f"Could not read {source}: {e}") from e


def _parse_fasta(header: str, lines: Iterator[str]) -> Generator[Record, None, None]:
    name = header[1:]
    parts: list[str] = []
    for line in lines:
        if line.startswith(">"):
            yield Record(name, "".join(parts))
            name = line[1:]
            parts = []
        else:
            parts.append(line.strip())
    yield Record(name, "".join(parts))


def _parse_fastq(
    header: str, lines: Iterator[str], source: str
) -> Generator[Record, None, None]:
    line: Optional[str] = header
    while line is not None:
        if not line.strip():
            line = next(lines, None)
            continue
        if not line.startswith("@"):
            raise MainError(f"{source}: expected '@' at start of FASTQ record")
        name = line[1:]
        seq = next(lines, None)
        plus = next(lines, None)
        qual = next(lines, None)
        if seq is None or plus is None or not plus.startswith("+"):
            raise SeqError("truncated FASTQ record, missing '+' line", name)
        if qual is None or len(qual) != len(seq):
            raise SeqError("quality and sequence lengths differ", name)
        yield Record(name, seq, qual)
        line = next(lines, None)


def read_fasta(filepath: Union[str, Path]) -> Generator[Tuple[str, str], None, None]:
    """Yield (id, sequence) tuples from a FASTA or FASTQ file."""
    for record in read_fastx(filepath):
        yield record.id, record.seq


def load_alignment(filepath: Union[str, Path]) -> Tuple[list[str], list[str]]:
    """Read a whole file into parallel header and sequence lists."""
    ids: list[str] = []
    seqs: list[str] = []
    for record in read_fastx(filepath):
        ids.append(record.name)
        seqs.append(record.seq)
    logger.debug("Loaded %d sequences from %s", len(seqs), filepath)
    return ids, seqs


def write_fasta(
    fh: IO[str],
    sequences: Iterable[Union[Tuple[str, str], Record]],
    line_width: int = 0,
) -> None:
    """Write sequences as FASTA to an open text stream.

    *sequences* can be an iterable of ``(name, seq)`` tuples or
    ``Record`` objects.  A *line_width* of 0 writes each sequence on one line.
    """
    for item in sequences:
        if isinstance(item, Record):
            name, seq = item.name, item.seq
        else:
            name, seq = item
        fh.write(f">{name}\n")
        if seq and line_width > 0:
            for i in range(0, len(seq), line_width):
                fh.write(seq[i : i + line_width] + "\n")
        else:
            fh.write(seq + "\n")


def write_fastq(fh: IO[str], records: Iterable[Record]) -> None:
    """Write records as FASTQ, filling missing qualities with ``I``."""
    for record in records:
        qual = record.qual if record.qual is not None else DEFAULT_QUALITY * len(record.seq)
        fh.write(f"@{record.name}\n{record.seq}\n+\n{qual}\n")


def write_records(fh: IO[str], records: Iterable[Record], fmt: str) -> None:
    """Write *records* in *fmt* (``"fasta"`` or ``"fastq"``)."""
    if fmt == "fastq":
        write_fastq(fh, records)
    elif fmt == "fasta":
        write_fasta(fh, records)
    else:
        raise ValueError(f"Unknown format: {fmt}")
