# stormphrax

Pure-Python building blocks of a UCI chess engine. The package has no
dependencies beyond the standard library.

## What is inside

- `stormphrax.ttable`: a clustered transposition table (`TTable`, `TtFlag`,
  `ProbedEntry`). Each cluster holds three entries. Replacement takes account of
  entry depth and search age. Mate scores are adjusted by ply with
  `score_to_tt` and `score_from_tt`. A table must be `finalize()`d after
  construction or `resize()` before it is probed or written. `full()` reports
  occupancy in permille, and `advance_age()` starts a new search generation.
- `stormphrax.wdl`: the win/draw/loss model (`wdl_params`, `wdl_model`). It also
  normalises scores with `normalize_score` and `unnormalize_score_material58`.
- `stormphrax.tunable`: the engine's named search parameters (`Tunables`,
  `TunableParam`). Parameters are looked up by name, ignoring case. Setting a
  parameter with `Tunables.set` refreshes the tables derived from it: the
  late-move-reduction table (`lmr_table`, `lmr_reduction`) and the SEE piece
  values (`see_values`).
- `stormphrax.tuning_output`: renders parameters as text for external tuning
  tools, with `format_wf_tuning_params`, `format_ctt_tuning_params` and
  `format_ob_tuning_params`. Pass `"<all>"` among the names to select every
  parameter. An unknown name raises `UnknownParameterError`.
- `stormphrax.uci_go`: `parse_go` turns the arguments of `go` into a
  `GoCommand`, keeping only the clock values for the side to move.
  `check_time_control` returns a warning for cyclic or sudden-death time
  controls when they are enabled, and raises `TimeControlRejected` when they
  are not.
- `stormphrax.uci_position`: `parse_position` turns the arguments of `position`
  into a `PositionCommand` (startpos, fen, frc or dfrc, plus moves). Bad input
  raises `PositionCommandError`.
- `stormphrax.uci_setoption`: `parse_setoption` turns the arguments of
  `setoption` into a `SetOption` with a lower-cased name and a raw value, which
  `as_int` and `as_bool` read.
- Utilities:
  - `split.split` for tokenising command lines, dropping empty tokens.
  - `parse` for lenient number and boolean parsing (`try_parse_int`,
    `try_parse_float`, `try_parse_bool`, `try_parse_digit`).
  - `ranges.Range` for inclusive ranges with `contains` and `clamp`.
  - `bits` for 64-bit bit tricks, including software `pext` and `pdep`, and
    integer helpers `ceil_div`, `ilerp` and `pad`.
  - `rng` for the `Jsf64Rng` and `SeedGenerator` (SplitMix64) generators.
  - `flags` for testing, setting and toggling bit flags.
  - `timer.Instant` for monotonic time points.
  - `ctrlc` for running registered callbacks on SIGINT and SIGTERM.

## Installing

```
pip install .
pip install ".[test]"
```

The second command also installs pytest for running the tests.

## Example

```python
from stormphrax.ttable import TTable, TtFlag
from stormphrax.wdl import wdl_model
from stormphrax.split import split
from stormphrax.uci_go import parse_go

table = TTable(1, score_win=31000, max_depth=255)
table.finalize()
table.put(0x1234_5678_9ABC_DEF0, 35, 20, 0, 8, 0, TtFlag.EXACT, False)
entry = table.probe(0x1234_5678_9ABC_DEF0, 0)

win, loss = wdl_model(100, 58)

tokens = split("go wtime 60000 btime 60000 winc 1000 binc 1000", " ")
go = parse_go(tokens[1:], black_to_move=False)
```

## What it does not do

This package is not a playing engine. It has no board representation, move
generation, legality checking, evaluation network or search, and it provides
no command to run. The UCI modules only parse command arguments into data; they
do not validate moves or FEN strings, and they do not answer the GUI. There is
no endgame tablebase support.

## Running the tests

```
pytest
```