"""Interactive text menu driving a cell."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

from kromozom.cell import Cell
from kromozom.chromosome import Chromosome

_MENU_TEXT = (
    "\nSecmek istediginiz secenegin rakamini girin\n"
    "1. Caprazlama\n"
    "2. Mutasyon\n"
    "3. Otomatik Islemler\n"
    "4. Ekrana yaz\n"
    "5. Programi kapat\n\n"
    "=> "
)
_INVALID_CHOICE = "Gecersiz Secenek!"
_EXIT_CHOICE = 5


class Menu:
    """Reads choices from ``stdin`` and runs the matching cell operation."""

    def __init__(
        self,
        cell: Cell,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        operations_path: str = "Islemler.txt",
    ) -> None:
        self.cell = cell
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self.operations_path = operations_path
        self._tokens = self._read_tokens()

    def _read_tokens(self) -> Iterator[str]:
        for line in self._stdin:
            yield from line.split()

    def _write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def _read_int(self) -> int:
        token = next(self._tokens, None)
        if token is None:
            raise EOFError
        return int(token)

    def _crossover(self) -> None:
        self._write(
            "\nSirasiyla caprazlama yapilacak kromozomlarin satir numaralarini girin\n\n"
        )
        self._write("ilk kromozom: ")
        first = self._read_int()
        self._write("ikinci kromozom: ")
        second = self._read_int()
        self.cell.crossover(first, second)

    def _mutation(self) -> None:
        self._write(
            "\nSirasiyla mutasyon yapilacak kromozomun sira numarasini "
            "ve genin sira numarasini girin\n\n"
        )
        self._write("Kromozom numarasi: ")
        row = self._read_int()
        self._write("Gen numarasi: ")
        column = self._read_int()
        self.cell.mutate(row, column)

    def _automatic(self) -> None:
        try:
            self.cell.run_operations(self.operations_path)
        except OSError:
            self._write("Islemler.txt Dosyasi Acilamadi!")

    def _show_summary(self) -> None:
        self._write(self.cell.summary() + "\n")

    def run(self) -> None:
        """Run the menu until the exit choice or the end of input."""
        actions = {
            1: self._crossover,
            2: self._mutation,
            3: self._automatic,
            4: self._show_summary,
        }
        while True:
            self._write(_MENU_TEXT)
            try:
                choice = self._read_int()
                if choice == _EXIT_CHOICE:
                    return
                action = actions.get(choice)
                if action is None:
                    self._write(_INVALID_CHOICE + "\n")
                    continue
                action()
            except EOFError:
                return
            except ValueError:
                self._write(_INVALID_CHOICE + "\n")
            except IndexError as error:
                self._write(f"{error}\n")


def main(argv: list[str] | None = None) -> int:
    """Load the DNA file and start the interactive menu."""
    parser = argparse.ArgumentParser(description="Chromosome crossover and mutation")
    parser.add_argument("--dna", default="Dna.txt", help="DNA file to load")
    parser.add_argument(
        "--operations", default="Islemler.txt", help="file of automatic operations"
    )
    args = parser.parse_args(argv)

    try:
        cell = Cell.from_file(args.dna)
    except OSError:
        sys.stdout.write("Dna.txt Dosyasi Acilamadi!")
        cell = Cell([Chromosome()])

    Menu(cell, sys.stdin, sys.stdout, args.operations).run()
    sys.stdout.write("\nProgram Kapandi")
    return 0