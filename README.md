# readassembly

A library for assembling a genome from short sequencing reads stored in a
FASTQ file, and for looking up a motif among those reads.

## What it does

- **Reading FASTQ** (`readassembly.fastq`): `count_lines`, `read_count` and
  `read_length` report the number of lines, the number of complete four-line
  records and the length of the first read. `extract_reads` returns the
  sequence line of every record of a file; `parse_reads` does the same for
  lines already in memory. Sequences are cut to 100 characters.
- **Overlaps** (`readassembly.overlap`): `overlap_length` gives how far the
  end of one read matches the start of another, `merge` joins two reads on
  a given overlap and `merge_in_order` joins a whole list in the given order.
- **Exact superstring by brute force** (`readassembly.brute`):
  `shortest_common_superstring` tries every order of the reads produced by
  `swap_permutations` and keeps the shortest merge. Only practical for a
  handful of reads.
- **Greedy assembly** (`readassembly.greedy`): `overlap_graph` builds the
  matrix of pairwise overlaps; `greedy_assemble`, `path_assemble` and
  `merge_assemble` are three greedy strategies that repeatedly join reads
  along the largest overlaps.
- **Motif search** (`readassembly.search`): `find_motif` returns the index
  of the first read holding a motif, or `None`; `search_file` tells whether
  any read of a FASTQ file holds it.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from readassembly.brute import shortest_common_superstring
from readassembly.fastq import extract_reads
from readassembly.greedy import greedy_assemble
from readassembly.search import find_motif

reads = ["ACGGATGATC", "GATCAAGT", "AAGTCGGA"]
print(shortest_common_superstring(reads))
print(greedy_assemble(reads))
print(find_motif(reads, "CAAG"))

print(greedy_assemble(extract_reads("genome.fq")))
```

## What it does not do

There is no command-line program: the package installs no command, and
reading a file, assembling it and printing the result is done from Python
as shown above.