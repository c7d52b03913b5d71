"""Solve a batch of sudoku grids concurrently and print the results."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor

from threadsums.sudoku import SudokuGrid

DEFAULT_GRIDS: tuple[str, ...] = (
    "530070000600195000098000060800060003400803001700020006060000280000419005000080079",
    "002008000000600201076000380060402007000000000300701060041000720205004000000100900",
    "000000907000420180000705026100904000050000040000507009920108000034059000507000000",
    "300200000000107000706030500070009080900020004010800050009040301000702000000008006",
    "530570000600195000098000060800060003400803001700020006060000280000419005000080079",
)


def solve_all(grids: Iterable[str]) -> list[tuple[bool, SudokuGrid]]:
    """Solve every grid on its own thread; return ``(solved, grid)`` pairs in input order."""
    boards = [SudokuGrid.from_string(text) for text in grids]
    if not boards:
        return []
    with ThreadPoolExecutor(max_workers=len(boards)) as pool:
        outcomes = list(pool.map(SudokuGrid.solve, boards))
    return list(zip(outcomes, boards))


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the built-in grids and print each one with its outcome."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        print("invalid argument: too many.", file=sys.stderr)
        return 1
    for number, (solved, grid) in enumerate(solve_all(DEFAULT_GRIDS), start=1):
        print(f"\nGrille #{number} {'resolue' if solved else 'echec'} :")
        print(grid)
    return 0


if __name__ == "__main__":
    sys.exit(main())