from threadsums.sudoku import SudokuGrid
from threadsums.sudoku_cli import DEFAULT_GRIDS, main, solve_all

EASY = DEFAULT_GRIDS[0]
STUCK = "012345678" + "900000000" + "0" * 63


def _rows_complete(grid):
    return all(set(row) == set(range(1, 10)) for row in grid)


def test_solve_all_reports_in_order():
    results = solve_all([EASY, STUCK])
    assert [ok for ok, _ in results] == [True, False]


def test_solve_all_solved_grid_is_complete():
    (ok, grid), = solve_all([EASY])
    assert ok is True
    assert _rows_complete(grid.grid)


def test_solve_all_failed_grid_keeps_givens():
    (ok, grid), = solve_all([STUCK])
    assert ok is False
    assert "".join("".join(str(grid).split())) == STUCK


def test_solve_all_empty():
    assert solve_all([]) == []


def test_default_grids_load_and_render_unchanged():
    assert len(DEFAULT_GRIDS) == 5
    for text in DEFAULT_GRIDS:
        grid = SudokuGrid.from_string(text)
        assert "".join(str(grid).split()) == text


def test_main_rejects_arguments(capsys):
    assert main(["extra"]) == 1
    captured = capsys.readouterr()
    assert captured.err.strip() == "invalid argument: too many."
    assert captured.out == ""