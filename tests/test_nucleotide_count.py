import pytest

from katas.nucleotide_count import InvalidNucleotide, count, nucleotide_counts


def test_count_empty():
    assert count("A", "") == 0


def test_count_invalid_nucleotide():
    with pytest.raises(InvalidNucleotide) as info:
        count("X", "A")
    assert info.value.nucleotide == "X"


def test_count_invalid_dna():
    with pytest.raises(InvalidNucleotide) as info:
        count("A", "AX")
    assert info.value.nucleotide == "X"


def test_count_repetitive_cytosine():
    assert count("C", "CCCCC") == 5


def test_count_only_thymine():
    assert count("T", "GGGGGTAACCCGG") == 1


def test_counts_of_all_nucleotides():
    assert nucleotide_counts("ACGT") == {"A": 1, "C": 1, "G": 1, "T": 1}


@pytest.mark.parametrize(
    "dna, expected",
    [
        ("", {"A": 0, "T": 0, "C": 0, "G": 0}),
        ("G", {"A": 0, "C": 0, "G": 1, "T": 0}),
        ("GGGGGGG", {"A": 0, "T": 0, "C": 0, "G": 7}),
        (
            "AGCTTTTCATTCTGACTGCAACGGGCAATATGTCTCTGTGTGGATTAAAAAAAGAGTGTCTGATAGCAGC",
            {"A": 20, "T": 21, "C": 12, "G": 17},
        ),
    ],
)
def test_nucleotide_counts(dna, expected):
    assert nucleotide_counts(dna) == expected


@pytest.mark.parametrize("dna", ["GGXXX", "AGXXACT"])
def test_counts_invalid_nucleotide(dna):
    with pytest.raises(InvalidNucleotide) as info:
        nucleotide_counts(dna)
    assert info.value.nucleotide == "X"