"""Shared test fixtures for seqtools tests."""

import gzip
import pytest

from seqtools.viewer.layout import Rect


@pytest.fixture
def nucleic_seqs():
    """Two short DNA rows of equal length."""
    return ["Seq1", "Seq2"], ["AAAAAAAAA", "CCCCCCCCC"]


@pytest.fixture
def protein_seqs():
    """Gapped protein alignment of uneven lengths."""
    return ["p1", "p2", "p3"], ["MKV-LIT", "MRVELI", "MKVDLITHY"]


@pytest.fixture
def tall_alignment():
    """More rows and columns than a small frame can show."""
    import random

    random.seed(42)
    ids = [f"read{i}" for i in range(40)]
    seqs = ["".join(random.choice("ACGT-") for _ in range(random.randint(50, 150))) for _ in ids]
    return ids, seqs


@pytest.fixture
def model_factory():
    """Build an AlignmentModel with a given inner frame size."""
    from seqtools.viewer.model import AlignmentModel

    def _make(ids, seqs, height=0, width=0, title="test.fa"):
        model = AlignmentModel(ids, seqs, title)
        model.set_frame(height, width)
        return model

    return _make


@pytest.fixture
def viewport():
    """A typical 80x30 terminal."""
    return Rect(0, 0, 80, 30)


@pytest.fixture
def fasta_file(tmp_path):
    p = tmp_path / "test.fa"
    p.write_text(">seq1 first record\nACGTACGT\n>seq2\nGGGG\nAAAA\n>seq3\nAC\n")
    return p


@pytest.fixture
def fastq_file(tmp_path):
    p = tmp_path / "test.fq"
    p.write_text("@r1\nACGT\n+\nIIII\n@r2 second\nGGA\n+r2\n#II\n")
    return p


@pytest.fixture
def fasta_gz_file(tmp_path):
    p = tmp_path / "test.fa.gz"
    with gzip.open(p, "wt") as f:
        f.write(">seq1\nACGTACGT\n>seq2\nGGGGAAAA\n")
    return p
