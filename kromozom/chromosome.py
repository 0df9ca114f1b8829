"""Chromosomes as ordered sequences of single-letter genes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

MUTATION_GENE = "X"
INDEX_ERROR_MESSAGE = "Hatali Indeks!"


class Chromosome:
    """An ordered, mutable sequence of single-character genes."""

    __slots__ = ("_genes",)

    def __init__(self, genes: Iterable[str] = ()) -> None:
        self._genes: list[str] = []
        for gene in genes:
            self.append(gene)

    def __len__(self) -> int:
        return len(self._genes)

    def __iter__(self) -> Iterator[str]:
        return iter(self._genes)

    def __str__(self) -> str:
        return "".join(self._genes)

    def __repr__(self) -> str:
        return f"Chromosome({str(self)!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._genes):
            raise IndexError(INDEX_ERROR_MESSAGE)

    def gene(self, index: int) -> str:
        """Return the gene at ``index``; negative indices are rejected."""
        self._check_index(index)
        return self._genes[index]

    def append(self, gene: str) -> None:
        """Add a single-character gene to the end of the chromosome."""
        if not isinstance(gene, str) or len(gene) != 1:
            raise ValueError(f"a gene is a single character, got {gene!r}")
        self._genes.append(gene)

    def mutate(self, index: int) -> None:
        """Replace the gene at ``index`` with the mutation marker."""
        self._check_index(index)
        self._genes[index] = MUTATION_GENE

    def representative(self) -> str | None:
        """Return the last gene smaller than the first one, else the first gene.

        An empty chromosome has no representative and yields ``None``.
        """
        if not self._genes:
            return None
        first = self._genes[0]
        return next((gene for gene in reversed(self._genes) if gene < first), first)


def _halves(chromosome: Chromosome) -> tuple[list[str], list[str]]:
    """Split genes into head and tail; an odd middle gene is dropped."""
    genes = list(chromosome)
    half = len(genes) // 2
    tail_start = half if len(genes) % 2 == 0 else half + 1
    return genes[:half], genes[tail_start:]


def cross(first: Chromosome, second: Chromosome) -> tuple[Chromosome, Chromosome]:
    """Cross two chromosomes into two new ones.

    The first child is the head of ``first`` followed by the tail of
    ``second``; the second child is the tail of ``first`` followed by the
    head of ``second``. The middle gene of an odd-length parent is skipped.
    """
    head1, tail1 = _halves(first)
    head2, tail2 = _halves(second)
    return Chromosome(head1 + tail2), Chromosome(tail1 + head2)