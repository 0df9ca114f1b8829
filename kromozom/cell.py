"""A cell holding chromosomes, with crossover and mutation operations."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from enum import Enum
from os import PathLike
from typing import NamedTuple, Union

from kromozom.chromosome import INDEX_ERROR_MESSAGE, Chromosome, cross

StrPath = Union[str, "PathLike[str]"]

_INTEGER = re.compile(r"\s*([+-]?\d+)")


class OperationKind(Enum):
    CROSSOVER = "C"
    MUTATION = "M"


class Operation(NamedTuple):
    kind: OperationKind
    first: int
    second: int


def parse_dna(text: str) -> list[Chromosome]:
    """Turn DNA text into chromosomes, one per line, ignoring spaces.

    Every line yields a chromosome, so a trailing newline gives a final
    empty one.
    """
    return [Chromosome(line.replace(" ", "")) for line in text.split("\n")]


def parse_operations(text: str) -> list[Operation]:
    """Read ``C a b`` and ``M a b`` operations; other characters are ignored."""
    operations: list[Operation] = []
    position = 0
    while position < len(text):
        char = text[position]
        position += 1
        if char not in ("C", "M"):
            continue
        values: list[int] = []
        for _ in range(2):
            match = _INTEGER.match(text, position)
            if match is None:
                raise ValueError(f"expected an integer at offset {position}")
            values.append(int(match.group(1)))
            position = match.end()
        operations.append(Operation(OperationKind(char), values[0], values[1]))
    return operations


class Cell:
    """An ordered collection of chromosomes."""

    def __init__(self, chromosomes: Iterable[Chromosome] = ()) -> None:
        self._chromosomes: list[Chromosome] = list(chromosomes)

    def __len__(self) -> int:
        return len(self._chromosomes)

    def __iter__(self) -> Iterator[Chromosome]:
        return iter(self._chromosomes)

    @classmethod
    def from_file(cls, path: StrPath) -> "Cell":
        """Build a cell from a DNA file."""
        with open(path, encoding="utf-8") as handle:
            return cls(parse_dna(handle.read()))

    def chromosome(self, index: int) -> Chromosome:
        """Return the chromosome at ``index``; negative indices are rejected."""
        if not 0 <= index < len(self._chromosomes):
            raise IndexError(INDEX_ERROR_MESSAGE)
        return self._chromosomes[index]

    def crossover(self, first: int, second: int) -> tuple[Chromosome, Chromosome]:
        """Cross two chromosomes and append both children to the cell."""
        children = cross(self.chromosome(first), self.chromosome(second))
        self._chromosomes.extend(children)
        return children

    def mutate(self, row: int, column: int) -> None:
        """Mutate gene ``column`` of chromosome ``row``."""
        self.chromosome(row).mutate(column)

    def apply_operations(self, text: str) -> None:
        """Apply every operation described in ``text`` in order."""
        for operation in parse_operations(text):
            if operation.kind is OperationKind.CROSSOVER:
                self.crossover(operation.first, operation.second)
            else:
                self.mutate(operation.first, operation.second)

    def run_operations(self, path: StrPath) -> None:
        """Apply the operations stored in a file."""
        with open(path, encoding="utf-8") as handle:
            self.apply_operations(handle.read())

    def summary(self) -> str:
        """One representative gene per chromosome, ``bos`` for empty ones."""
        return " ".join(
            chromosome.representative() or "bos" for chromosome in self._chromosomes
        )