# kromozom

A small chromosome simulator. It reads chromosomes from a DNA text file,
one chromosome per line with one character per gene (spaces are ignored).
You can then cross two chromosomes, mutate single genes and print a
one-letter summary of every chromosome in the cell.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

Put a `Dna.txt` file (and optionally an `Islemler.txt` file of operations)
in the current directory and run:

```
kromozom
```

Other file names can be given:

```
kromozom --dna my_dna.txt --operations my_ops.txt
```

If the DNA file cannot be opened, a message is printed and the menu starts
with a single empty chromosome.

The menu prompts are in Turkish. It offers:

1. Crossover: pick two chromosome rows. The first half of the first row
   followed by the second half of the second row forms one new chromosome;
   the second half of the first row followed by the first half of the
   second row forms another. For an odd length the middle gene is dropped.
   Both new chromosomes are appended to the cell.
2. Mutation: pick a chromosome row and a gene column; that gene becomes `X`.
3. Automatic operations: runs every operation listed in the operations file.
   If the file cannot be opened, a message is printed.
4. Print: for each chromosome, scanning from the last gene back, the first
   gene that sorts before the chromosome's first gene is printed; if there
   is none, the first gene itself. Empty chromosomes print `bos`. The
   entries are separated by spaces.
5. Quit (the menu also ends at the end of input).

Rows and columns are counted from 0. An out-of-range row or column prints
`Hatali Indeks!`; input that is not an integer prints `Gecersiz Secenek!`.

### DNA file

Each line is a chromosome; each non-space character is a gene. Every line
counts, so a trailing newline adds a final empty chromosome.

```
A B C D
E F G H
```

### Operations file

Each operation is a letter followed by two integers; any other characters
are ignored:

```
C 0 1
M 2 3
```

`C` is a crossover of two rows, `M` a mutation at row and column.

## Library use

```python
from kromozom.cell import Cell, parse_dna
from kromozom.chromosome import Chromosome, cross

cell = Cell(parse_dna("A B C D\nE F G H"))
cell.crossover(0, 1)          # appends ABGH and CDEF
cell.mutate(0, 1)             # row 0 becomes AXCD
cell.apply_operations("C 1 2\nM 0 0")
print(cell.summary())

left, right = cross(Chromosome("ABCD"), Chromosome("EFGH"))
print(left, right)            # ABGH CDEF
```

- `kromozom.chromosome.Chromosome`: a sequence of single-character genes
  with `len()`, iteration, `str()`, `gene(index)`, `append(gene)`,
  `mutate(index)` and `representative()` (the summary letter, or `None`
  when empty). `append` raises `ValueError` for anything but one character.
- `kromozom.chromosome.cross(first, second)`: returns the two children of a
  crossover without changing the parents.
- `kromozom.cell.Cell`: a list of chromosomes with `chromosome(index)`,
  `crossover(first, second)` (returns the two appended children),
  `mutate(row, column)`, `apply_operations(text)`, `run_operations(path)`,
  `summary()` and the constructor `Cell.from_file(path)`.
- `kromozom.cell.parse_dna(text)` and `kromozom.cell.parse_operations(text)`
  parse the two file formats; `parse_operations` raises `ValueError` when a
  `C` or `M` is not followed by two integers.
- `kromozom.menu.Menu(cell, stdin, stdout, operations_path)` runs the
  interactive menu over any text streams; `kromozom.menu.main(argv)` is the
  command-line entry point.

Out-of-range indexes raise `IndexError`.