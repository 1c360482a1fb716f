"""Count nucleotides in a DNA strand."""

from __future__ import annotations

NUCLEOTIDES = "ACGT"


class InvalidNucleotide(ValueError):
    """Raised for a character that is not one of A, C, G, T."""

    def __init__(self, nucleotide: str) -> None:
        super().__init__(f"invalid nucleotide: {nucleotide!r}")
        self.nucleotide = nucleotide


def _check_strand(dna: str) -> None:
    for char in dna:
        if char not in NUCLEOTIDES:
            raise InvalidNucleotide(char)


def count(nucleotide: str, dna: str) -> int:
    """Occurrences of one nucleotide in the strand."""
    if nucleotide not in NUCLEOTIDES or len(nucleotide) != 1:
        raise InvalidNucleotide(nucleotide)
    _check_strand(dna)
    return dna.count(nucleotide)


def nucleotide_counts(dna: str) -> dict[str, int]:
    """Occurrences of each of A, C, G and T in the strand."""
    _check_strand(dna)
    return {nucleotide: dna.count(nucleotide) for nucleotide in NUCLEOTIDES}