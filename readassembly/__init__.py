"""Genome assembly from FASTQ reads: parsing, overlaps, brute-force and greedy assembly, motif search."""

__version__ = "0.1.0"