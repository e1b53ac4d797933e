"""CLI entry point for seqtools."""

from __future__ import annotations

import argparse
import logging
import sys

from seqtools import __version__, commands
from seqtools.errors import MainError, SeqtoolsError

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="seqtools",
        description="seqtools – a simple utility to work with FASTX files from the "
                    "command line. Handles compressed files (.gz, .xz or .bz2).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-i", "--in", dest="input", metavar="FILE", default=None,
                        help="Path to an input FASTX file [default: stdin]")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log verbosity (-v info, -vv debug)")
    parser.add_argument("--log-file", metavar="FILE", default=None,
                        help="Write logs to FILE instead of stderr")

    # --in is also accepted after the sub-command
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-i", "--in", dest="input", metavar="FILE", default=argparse.SUPPRESS,
                        help="Path to an input FASTX file [default: stdin]")

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("count", parents=[common], help="Count the number of sequences")

    length_p = sub.add_parser("length", parents=[common], help="Get length of sequences")
    length_p.add_argument("-s", "--summary", action="store_true",
                          help="Report statistics about lengths instead of individual lengths")
    length_p.add_argument("-t", "--histogram", action="store_true",
                          help="Draw a histogram of lengths (with --summary)")

    freqs_p = sub.add_parser("freqs", parents=[common], help="Character frequencies")
    freqs_p.add_argument("-s", "--per-sequence", action="store_true",
                         help="Get frequencies per sequence instead of globally")

    random_p = sub.add_parser("random", help="Generate random sequences with normally distributed lengths")
    random_p.add_argument("-n", "--num", type=int, default=10, help="Number of sequences to generate")
    random_p.add_argument("-l", "--len", type=float, default=100.0, help="Average length of sequences")
    random_p.add_argument("-s", "--std", type=float, default=0.0, help="Standard deviation of length")
    random_p.add_argument("-t", "--sequence-type", choices=["dna", "rna", "protein"], default="dna")
    random_p.add_argument("-o", "--out", metavar="FILE", help="Output file [default: stdout]")
    random_p.add_argument("-f", "--format", choices=["fasta", "fastq"], default="fasta")
    random_p.add_argument("--seed", type=int, default=None, help="Random seed")

    sub.add_parser("ids", parents=[common], help="Extract sequence ids")

    convert_p = sub.add_parser("convert", parents=[common], help="Convert file to another format")
    convert_p.add_argument("-t", "--to", choices=["fasta", "fastq"], default="fasta")
    convert_p.add_argument("-o", "--out", metavar="FILE", help="Output file [default: stdout]")

    select_p = sub.add_parser("select", parents=[common],
                              help="Select sequences by identifier or index")
    select_p.add_argument("ids", nargs="*", help="Sequence identifiers")
    select_p.add_argument("-u", "--use-indices", action="store_true",
                          help="Interpret identifiers as 0-based indices")
    select_p.add_argument("-f", "--ids-file", metavar="FILE",
                          help="File containing one identifier per line")
    select_p.add_argument("-o", "--out", metavar="FILE", help="Output file [default: stdout]")

    sub.add_parser("view", parents=[common], help="Interactively view an alignment")

    return parser


def _setup_logging(verbosity: int, log_file: str | None) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        filename=log_file,
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command == "random" and (args.std < 0 or args.num < 0):
        parser.error("--num and --std must be non-negative")
    _setup_logging(args.verbose, args.log_file)

    try:
        if args.command is None:
            raise MainError("You must specify a command.")
        _dispatch(args)
    except SeqtoolsError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(e, file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


def _dispatch(args) -> None:
    if args.command == "count":
        commands.count(args.input)
    elif args.command == "length":
        commands.length(args.input, args.summary, args.histogram)
    elif args.command == "freqs":
        commands.frequencies(args.input, args.per_sequence)
    elif args.command == "random":
        commands.generate_random(
            num=args.num,
            mean_length=args.len,
            std=args.std,
            sequence_type=args.sequence_type,
            out=args.out,
            fmt=args.format,
            seed=args.seed,
        )
    elif args.command == "ids":
        commands.ids(args.input)
    elif args.command == "convert":
        commands.convert(args.input, args.to, args.out)
    elif args.command == "select":
        if args.use_indices:
            commands.select_by_index(args.input, args.ids, args.ids_file, args.out)
        else:
            commands.select_by_ids(args.input, args.ids, args.ids_file, args.out)
    elif args.command == "view":
        _cmd_view(args)


def _cmd_view(args) -> None:
    if args.input is None:
        raise MainError("The view command needs an input file (--in FILE); it cannot read stdin.")
    from seqtools.io import load_alignment
    from seqtools.viewer.app import view

    ids, seqs = load_alignment(args.input)
    view(ids, seqs, title=args.input)
