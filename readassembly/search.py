"""Searching reads for a motif."""

from __future__ import annotations

from collections.abc import Iterable

from readassembly.fastq import StrPath, extract_reads


def find_motif(reads: Iterable[str], motif: str) -> int | None:
    """Return the index of the first read containing ``motif``, or None."""
    return next((index for index, read in enumerate(reads) if motif in read), None)


def search_file(path: StrPath, motif: str) -> bool:
    """Return whether any read of the FASTQ file contains ``motif``."""
    return find_motif(extract_reads(path), motif) is not None