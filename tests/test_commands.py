"""Tests for the streamed FASTX commands."""

import pytest

from seqtools import commands
from seqtools.errors import SeqError
from seqtools.io import Record, read_fastx


class TestCount:
    def test_count(self, fasta_file, capsys):
        assert commands.count(fasta_file) == 3
        assert capsys.readouterr().out == "3 sequences\n"

    def test_count_fastq(self, fastq_file, capsys):
        assert commands.count(fastq_file) == 2


class TestLength:
    def test_per_record(self, fasta_file, capsys):
        commands.length(fasta_file)
        assert capsys.readouterr().out == "seq1 first record\t8\nseq2\t8\nseq3\t2\n"

    def test_summary(self, fasta_file, capsys):
        commands.length(fasta_file, summary=True)
        out = capsys.readouterr().out
        assert "Min:\t2" in out
        assert "Max:\t8" in out
        assert "Median:\t8" in out

    def test_summary_histogram_goes_to_stderr(self, fasta_file, capsys):
        commands.length(fasta_file, summary=True, histogram=True)
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "#" in captured.err
        assert "Min: 2\tMax: 8" in captured.err


class TestFrequencies:
    def test_global(self, tmp_path, capsys):
        p = tmp_path / "f.fa"
        p.write_text(">a\nAAC\n>b\nAG\n")
        commands.frequencies(p)
        assert capsys.readouterr().out.splitlines() == [
            "A\t3\t60.00 %",
            "C\t1\t20.00 %",
            "G\t1\t20.00 %",
        ]

    def test_per_sequence(self, tmp_path, capsys):
        p = tmp_path / "f.fa"
        p.write_text(">a\nAAC\n>b\nGG\n")
        commands.frequencies(p, per_sequence=True)
        assert capsys.readouterr().out.splitlines() == [
            "a\tA: 2 66.67%\tC: 1 33.33%",
            "b\tG: 2 100.00%",
        ]


class TestRandom:
    def test_fixed_length(self, tmp_path):
        out = tmp_path / "r.fa"
        records = commands.generate_random(num=5, mean_length=20, out=out, seed=1)
        assert [r.name for r in records] == ["S0", "S1", "S2", "S3", "S4"]
        assert all(len(r.seq) == 20 for r in records)
        assert all(set(r.seq) <= set("ACGT") for r in records)
        assert list(read_fastx(out)) == records

    def test_seed_is_reproducible(self, tmp_path):
        a = commands.generate_random(num=3, std=5, out=tmp_path / "a.fa", seed=7)
        b = commands.generate_random(num=3, std=5, out=tmp_path / "b.fa", seed=7)
        assert a == b

    def test_protein_fastq(self, tmp_path, capsys):
        out = tmp_path / "r.fq"
        commands.generate_random(num=4, mean_length=30, std=10, sequence_type="protein",
                                 out=out, fmt="fastq", seed=3)
        records = list(read_fastx(out))
        assert len(records) == 4
        assert all(r.qual == "I" * len(r.seq) for r in records)
        assert "Min:" in capsys.readouterr().err

    def test_lengths_never_negative(self, tmp_path):
        records = commands.generate_random(num=50, mean_length=1, std=10,
                                           out=tmp_path / "r.fa", seed=0)
        assert all(len(r.seq) >= 0 for r in records)

    def test_negative_std_rejected(self):
        with pytest.raises(ValueError):
            commands.generate_random(std=-1)


class TestIdsAndConvert:
    def test_ids(self, fasta_file, capsys):
        commands.ids(fasta_file)
        assert capsys.readouterr().out == "seq1 first record\nseq2\nseq3\n"

    def test_convert_to_fastq(self, fasta_file, tmp_path):
        out = tmp_path / "out.fq"
        commands.convert(fasta_file, to="fastq", out=out)
        records = list(read_fastx(out))
        assert records[0] == Record("seq1 first record", "ACGTACGT", "IIIIIIII")

    def test_convert_to_fasta_stdout(self, fastq_file, capsys):
        commands.convert(fastq_file, to="fasta")
        assert capsys.readouterr().out == ">r1\nACGT\n>r2 second\nGGA\n"


class TestSelect:
    def test_by_ids_keeps_input_order(self, fasta_file, capsys):
        selected = commands.select_by_ids(fasta_file, ["seq3", "seq1"])
        assert [r.id for r in selected] == ["seq1", "seq3"]
        assert capsys.readouterr().out.startswith(">seq1 first record\n")

    def test_by_ids_file(self, fasta_file, tmp_path):
        ids_file = tmp_path / "ids.txt"
        ids_file.write_text("seq2\n\n")
        selected = commands.select_by_ids(fasta_file, None, ids_file, out=tmp_path / "o.fa")
        assert [r.id for r in selected] == ["seq2"]

    def test_unknown_id(self, fasta_file):
        with pytest.raises(SeqError) as excinfo:
            commands.select_by_ids(fasta_file, ["nope"])
        assert excinfo.value.seq_id == "nope"

    def test_by_index_keeps_fastq(self, fastq_file, capsys):
        selected = commands.select_by_index(fastq_file, ["1"])
        assert [r.id for r in selected] == ["r2"]
        assert capsys.readouterr().out == "@r2 second\nGGA\n+\n#II\n"

    def test_index_out_of_range(self, fasta_file):
        with pytest.raises(SeqError):
            commands.select_by_index(fasta_file, ["3"])

    def test_index_not_integer(self, fasta_file):
        with pytest.raises(SeqError):
            commands.select_by_index(fasta_file, ["first"])
