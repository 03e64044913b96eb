"""Reading sequencing reads out of FASTQ files."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike
from pathlib import Path

LINES_PER_RECORD = 4
MAX_READ_LENGTH = 100

StrPath = str | PathLike[str]


def _read_text(path: StrPath) -> str:
    return Path(path).read_text()


def count_lines(path: StrPath) -> int:
    """Return the number of newline characters in the file."""
    return _read_text(path).count("\n")


def read_count(path: StrPath) -> int:
    """Return the number of complete four-line records in the file."""
    return count_lines(path) // LINES_PER_RECORD


def read_length(path: StrPath) -> int:
    """Return the length of the second line, the first read's sequence."""
    parts = _read_text(path).split("\n")
    if len(parts) < 3:
        raise ValueError(f"{path}: no complete sequence line after the header")
    return len(parts[1])


def parse_reads(lines: Iterable[str]) -> list[str]:
    """Return the sequence line of every complete four-line record.

    Trailing line breaks are dropped and each sequence is cut to
    MAX_READ_LENGTH characters.
    """
    records = zip(*[iter(lines)] * LINES_PER_RECORD)
    return [
        sequence.rstrip("\r\n")[:MAX_READ_LENGTH]
        for _header, sequence, _separator, _quality in records
    ]


def extract_reads(path: StrPath) -> list[str]:
    """Return the read sequences stored in a FASTQ file."""
    complete_lines = _read_text(path).split("\n")[:-1]
    return parse_reads(complete_lines)