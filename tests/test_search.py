import pytest

from readassembly.search import find_motif, search_file

READS = ["AAAA", "CGTT", "TTCG", "GGGG"]


def test_find_motif_returns_first_match():
    assert find_motif(READS, "CG") == READS.index("CGTT")


def test_find_motif_last_read():
    assert find_motif(READS, "GGG") == len(READS) - 1


def test_find_motif_absent():
    assert find_motif(READS, "ACGTACGT") is None


def test_find_motif_no_reads():
    assert find_motif([], "A") is None


def test_find_motif_empty_motif_matches_first_read():
    assert find_motif(READS, "") == 0


def test_find_motif_accepts_iterator():
    assert find_motif(iter(READS), "TTC") == READS.index("TTCG")


@pytest.fixture
def fastq_file(tmp_path):
    path = tmp_path / "genome.fq"
    path.write_text("@r1\nACGTAC\n+\nIIIIII\n@r2\nGGTTAA\n+\nIIIIII\n")
    return path


def test_search_file_found(fastq_file):
    assert search_file(fastq_file, "TTA") is True


def test_search_file_not_found(fastq_file):
    assert search_file(fastq_file, "CCCC") is False


def test_search_file_ignores_quality_lines(fastq_file):
    assert search_file(fastq_file, "III") is False


def test_search_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        search_file(tmp_path / "absent.fq", "A")