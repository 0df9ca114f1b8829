import pytest

from kromozom.cell import Cell, Operation, OperationKind, parse_dna, parse_operations
from kromozom.chromosome import Chromosome


def _cell(*rows):
    return Cell(Chromosome(row) for row in rows)


def test_parse_dna_splits_lines_and_skips_spaces():
    chromosomes = parse_dna("A B C\nD E")
    assert [str(c) for c in chromosomes] == ["ABC", "DE"]


def test_parse_dna_trailing_newline_gives_empty_chromosome():
    chromosomes = parse_dna("AB\n")
    assert len(chromosomes) == 2
    assert len(chromosomes[-1]) == 0


def test_parse_operations_reads_pairs():
    operations = parse_operations("C 0 1\nM 2 3\n")
    assert operations == [
        Operation(OperationKind.CROSSOVER, 0, 1),
        Operation(OperationKind.MUTATION, 2, 3),
    ]


def test_parse_operations_ignores_other_characters():
    assert parse_operations("x y z\n") == []


def test_parse_operations_rejects_missing_number():
    with pytest.raises(ValueError):
        parse_operations("C 1")


def test_from_file(tmp_path):
    path = tmp_path / "Dna.txt"
    path.write_text("A B\nC D E", encoding="utf-8")
    cell = Cell.from_file(path)
    assert [str(c) for c in cell] == ["AB", "CDE"]


def test_from_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        Cell.from_file(tmp_path / "missing.txt")


def test_chromosome_index_errors():
    cell = _cell("AB")
    with pytest.raises(IndexError, match="Hatali Indeks!"):
        cell.chromosome(1)
    with pytest.raises(IndexError):
        cell.chromosome(-1)


def test_crossover_appends_children():
    cell = _cell("ABCD", "EFGH")
    child1, child2 = cell.crossover(0, 1)
    assert len(cell) == 4
    assert cell.chromosome(2) is child1
    assert cell.chromosome(3) is child2
    assert len(child1) + len(child2) == 8


def test_crossover_with_itself():
    cell = _cell("ABCD")
    child1, child2 = cell.crossover(0, 0)
    assert str(child1) + str(child2) == "ABCDABCD"[:2] + "CD" + "CD" + "AB"


def test_mutate():
    cell = _cell("ABC", "DEF")
    cell.mutate(1, 0)
    assert cell.chromosome(1).gene(0) == "X"
    assert str(cell.chromosome(0)) == "ABC"


def test_mutate_bad_column():
    with pytest.raises(IndexError):
        _cell("ABC").mutate(0, 3)


def test_apply_operations_in_order():
    cell = _cell("ABCD", "EFGH")
    cell.apply_operations("C 0 1\nM 2 0\n")
    assert len(cell) == 4
    assert cell.chromosome(2).gene(0) == "X"


def test_run_operations(tmp_path):
    path = tmp_path / "Islemler.txt"
    path.write_text("M 0 1\n", encoding="utf-8")
    cell = _cell("AB")
    cell.run_operations(path)
    assert str(cell.chromosome(0)) == "AX"


def test_summary_marks_empty_chromosomes():
    cell = _cell("CAB", "", "ABC")
    assert cell.summary().split() == ["B", "bos", "A"]