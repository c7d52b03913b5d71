# threadsums

This package contains two small concurrency exercises:

- **Calculator** (`threadsums.calculator`): builds an array of one hundred ones and splits it into four inclusive ranges. Each range is summed on its own worker thread, and the partial sums are then added together.
- **Sudoku** (`threadsums.sudoku`, `threadsums.sudoku_cli`): a 9x9 sudoku grid with a backtracking solver. A batch of grids is solved concurrently, one worker thread per grid.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
threadsums-calculator
```

Sums the built-in array over the ranges 0–24, 25–49, 50–74 and 75–99. When every thread has finished, the command prints each partial sum in range order, followed by the grand total. With one hundred ones the total is 100. Any arguments are ignored.

```
threadsums-sudoku
```

Solves the five built-in grids. For each grid it prints a header and then the grid:

- `Grille #N resolue` when the grid was solved;
- `Grille #N echec` when it could not be solved.

Each row of the grid is printed as its values, with a space after each value. The fifth built-in grid has two 5s in its first row, so it cannot be solved. The command takes no arguments. If any are given, it prints `invalid argument: too many.` to standard error and exits with status 1.

## Library use

```python
from threadsums.calculator import format_array, generate_array, sum_of, threaded_sum
from threadsums.sudoku import SudokuGrid
from threadsums.sudoku_cli import solve_all

arr = generate_array()                  # [1] * 100
sum_of(arr, 0, 24)                      # 25; both ends are included
threaded_sum(arr, [(0, 49), (50, 99)])  # [50, 50]; one thread per range
threaded_sum(arr)                       # [25, 25, 25, 25] over the default ranges
format_array(arr, 0, 3)                 # "1 1 1 "; end is excluded

text = (
    "530070000600195000098000060800060003400803001"
    "700020006060000280000419005000080079"
)
grid = SudokuGrid.from_string(text)
grid.is_valid(0, 2, 4)   # True: 4 may go in row 0, column 2
grid.solve()             # True; the grid is filled in place
print(grid)

for solved, board in solve_all([text]):  # takes grid strings, returns (solved, grid) pairs
    print(solved)
    print(board)
```

### Calculator functions

- `sum_of(arr, start, end)` returns 0 when `start > end`. It raises `IndexError` when the range falls outside the array.
- `threaded_sum(arr, chunks=None)` returns the partial sums in the order the ranges were given. An empty list of ranges gives an empty list.

### SudokuGrid

- `SudokuGrid.from_string(text)` reads 81 digits row by row, where `0` marks an empty cell. It raises `ValueError` if the text has the wrong length or holds anything other than the digits 0–9.
- `SudokuGrid()` with no arguments is an empty board.
- `solve()` fills the empty cells by backtracking, trying values 1 to 9 in the first empty cell. It returns `False` when no solution exists, and in that case every cell it filled is cleared again.
- `str(grid)` gives one line per row, with a space after each value.

## What it does not do

The sudoku command only solves its built-in grids. It cannot read grids from the command line or from a file. To solve other grids, use `solve_all` or `SudokuGrid` from Python.