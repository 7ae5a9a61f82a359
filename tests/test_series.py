import io

import pytest

from puzzlemath.series import MODULUS, main, summing_series


@pytest.mark.parametrize("n", [1, 2, 3, 10, 57, 400])
def test_matches_term_by_term_sum(n):
    total = sum(k * k - (k - 1) * (k - 1) for k in range(1, n + 1))
    assert summing_series(n) == total % MODULUS


def test_modulus_itself_is_zero():
    assert summing_series(MODULUS) == 0


@pytest.mark.parametrize("n", [1, 12345, 10**16])
def test_periodic_in_modulus(n):
    assert summing_series(n + MODULUS) == summing_series(n)


@pytest.mark.parametrize("n", [10**9, 10**12, 10**16, 10**16 - 1])
def test_result_below_modulus(n):
    assert 0 <= summing_series(n) < MODULUS


def test_main_round_trip(monkeypatch, capsys, tmp_path):
    stdin_text = "3\n2\n1\n10000000000000000\n"
    expected = "".join(f"{summing_series(n)}\n" for n in (2, 1, 10**16))

    monkeypatch.delenv("OUTPUT_PATH", raising=False)
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
    assert main([]) == 0
    assert capsys.readouterr().out == expected

    result_file = tmp_path / "series.txt"
    monkeypatch.setenv("OUTPUT_PATH", str(result_file))
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
    main([])
    assert result_file.read_text() == expected