"""Exception hierarchy for seqtools."""

from __future__ import annotations


class SeqtoolsError(Exception):
    """Base class for every error raised by seqtools."""


class MainError(SeqtoolsError):
    """Command-line level misuse or an input file that is not FASTA/FASTQ."""

    def __init__(self, details: str):
        super().__init__(details)
        self.details = details

    def __str__(self) -> str:
        return f"Error in main thread: {self.details}"


class SeqError(SeqtoolsError):
    """A problem tied to a single sequence record."""

    def __init__(self, details: str, seq_id: str):
        super().__init__(details, seq_id)
        self.details = details
        self.seq_id = seq_id

    def __str__(self) -> str:
        return f"Error for sequence {self.seq_id}: {self.details}"


class ViewerError(SeqtoolsError):
    """Base class for failures of the interactive alignment viewer."""

    def __str__(self) -> str:
        return f"Error: {super().__str__()}"


class SetupError(ViewerError):
    """Raw mode or alternate screen could not be entered."""


class RenderError(ViewerError):
    """Writing a frame to the terminal failed."""


class InputError(ViewerError):
    """Reading the next terminal event failed."""
