import io

import pytest

from puzzlemath.supplies import game_with_cells, main


def test_two_by_two_needs_one():
    assert game_with_cells(2, 2) == 1


@pytest.mark.parametrize("a, b", [(1, 1), (2, 3), (5, 7), (10, 1)])
def test_even_grid_splits_into_blocks(a, b):
    assert game_with_cells(2 * a, 2 * b) == a * b


@pytest.mark.parametrize("n, m", [(1, 1), (3, 4), (7, 2), (9, 9), (100, 37)])
def test_symmetric(n, m):
    assert game_with_cells(n, m) == game_with_cells(m, n)


@pytest.mark.parametrize("a", range(1, 8))
@pytest.mark.parametrize("m", [1, 2, 5, 6])
def test_odd_size_rounds_up_to_even(a, m):
    assert game_with_cells(2 * a - 1, m) == game_with_cells(2 * a, m)


def test_each_package_covers_at_most_four_cells():
    for n in range(1, 20):
        for m in range(1, 20):
            assert 4 * game_with_cells(n, m) >= n * m


@pytest.mark.parametrize("grid, expected", [("2 2", 1), ("8 12", 24)])
def test_main(monkeypatch, capsys, tmp_path, grid, expected):
    monkeypatch.delenv("OUTPUT_PATH", raising=False)
    monkeypatch.setattr("sys.stdin", io.StringIO(grid + "\n"))
    assert main([]) == 0
    printed = capsys.readouterr().out

    saved = tmp_path / "packages.txt"
    monkeypatch.setenv("OUTPUT_PATH", str(saved))
    monkeypatch.setattr("sys.stdin", io.StringIO(grid + "\n"))
    main([])
    assert printed == saved.read_text() == f"{expected}\n"