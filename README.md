# puzzlemath

This package holds small solvers for a set of classic math puzzles. You can
import each puzzle as a plain function. Each puzzle also has a command that
reads the puzzle's input format and writes the answers.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Library use

```python
from puzzlemath.points import find_point
from puzzlemath.socks import maximum_draws
from puzzlemath.primes import is_prime, prime_count
from puzzlemath.supplies import game_with_cells
from puzzlemath.series import summing_series
from puzzlemath.tiles import moving_tiles
from puzzlemath.search import search_insert
from puzzlemath.routes import connecting_towns

find_point(0, 0, 1, 1)            # (2, 2): p reflected through q
maximum_draws(2)                  # 3 socks guarantee a matching pair
prime_count(100)                  # 3 distinct prime factors at most (e.g. 30)
game_with_cells(2, 2)             # 1 package supplies a 2x2 grid
summing_series(2)                 # n*n mod 1_000_000_007 -> 4
moving_tiles(10, 1, 2, [50, 100]) # times at which the overlap has each area
search_insert([1, 3, 5, 6], 5)    # 2
connecting_towns(4, [3, 4, 5])    # 60 paths, mod 1234567
```

Notes on the functions:

- `is_prime` tests divisibility by odd numbers only. It is meant for odd
  candidates of 3 or more, and it does not reject even numbers.
- `moving_tiles` raises `ValueError` when `s1 == s2`, because the overlap of
  the tiles then never changes.
- `connecting_towns` raises `ValueError` when `routes` holds fewer than
  `n - 1` counts. If it holds more, it uses only the first `n - 1`.
- `search_insert` expects a sorted list of distinct integers. It returns the
  index of `target`, or the index at which `target` would be inserted.

## Commands

Each command writes its answers one per line. If the `OUTPUT_PATH`
environment variable is set, the answers go to that file. If it is not set,
they go to standard output.

| Command | Input |
| --- | --- |
| `puzzlemath-find-point` | stdin: `n`, then `n` lines of `px py qx qy` |
| `puzzlemath-maximum-draws` | stdin: `t`, then `t` lines of `n` |
| `puzzlemath-prime-count` | stdin: `q`, then `q` lines of `n` |
| `puzzlemath-game-with-cells` | stdin: one line `n m` |
| `puzzlemath-summing-series` | stdin: `t`, then `t` lines of `n` |
| `puzzlemath-moving-tiles` | stdin: `l s1 s2`, then `n`, then `n` query lines |
| `puzzlemath-search-insert` | arguments: `[target [nums ...]]` |
| `puzzlemath-connecting-towns` | stdin: `t`, then for each case a line with `n` and a line of `n - 1` road counts |

`puzzlemath-moving-tiles` prints each time with up to 15 significant digits.

`puzzlemath-search-insert` reads nothing from standard input. The target
defaults to `5`. If no numbers are given, the list defaults to `1 3 5 6`.

Examples:

```
$ printf '2\n0 0 1 1\n1 1 2 2\n' | puzzlemath-find-point
2 2
3 3

$ puzzlemath-search-insert 4 1 3 5 6
2
```