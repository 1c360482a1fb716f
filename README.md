# katas

A library of small, self-contained programming exercises. Each module solves one
problem and is imported on its own. The package needs nothing beyond the Python
standard library (Python 3.10 or later).

## Modules

| Module | What it provides |
| --- | --- |
| `katas.alphametics` | `solve(puzzle)` maps letters to distinct digits for puzzles such as `"SEND + MORE == MONEY"`, or returns `None` when there is no solution |
| `katas.allergies` | `Allergies(score)` with `is_allergic_to(allergen)` and `allergies()`; the `Allergen` enum |
| `katas.armstrong_numbers` | `is_armstrong_number(num)` |
| `katas.assembly_line` | `production_rate_per_hour(speed)` and `working_items_per_minute(speed)` for speeds 0 to 10; other speeds raise `ValueError` |
| `katas.grade_school` | `School` with `add(grade, student)`, `grades()` and `grade(grade)` |
| `katas.health_statistics` | `User` dataclass with `name`, `age` and `weight` |
| `katas.embedded_game` | `divmod(dividend, divisor)` truncating toward zero, `evens(iterable)` yielding every other item, and `Position(x, y).manhattan()` |
| `katas.lasagna` | `expected_minutes_in_oven`, `remaining_minutes_in_oven`, `preparation_time_in_minutes`, `elapsed_time_in_minutes` |
| `katas.forth` | `Forth` with `eval(text)` and `stack()`; errors are `ForthError` subclasses: `DivisionByZero`, `StackUnderflow`, `UnknownWord`, `InvalidWord` |
| `katas.poker` | `winning_hands(hands)` returns the hand strings that tie for best; `Card`, `Hand`, `Rank` and `Category` describe parsed hands |
| `katas.luhn` | `is_valid(code)` checks a Luhn checksum, ignoring whitespace |
| `katas.magazine_cutout` | `can_construct_note(magazine, note)` |
| `katas.minesweeper` | `annotate(minefield)` fills empty squares with counts of adjacent mines |
| `katas.nucleotide_count` | `count(nucleotide, dna)` and `nucleotide_counts(dna)`; invalid characters raise `InvalidNucleotide` |
| `katas.letter_frequency` | `frequency(texts, worker_count)` counts letters across texts using a thread pool; ASCII letters are folded to lower case |
| `katas.say` | `encode(n)` spells out an integer from zero up to 2**64 - 1 in American English |
| `katas.tournament` | `tally(results)` turns `home;away;win\|draw\|loss` lines into a league table |
| `katas.resistor_color` | `ResistorColor`, `color_to_value`, `value_to_color_string`, `colors` |
| `katas.role_playing_game` | `Player` with `revive()` and `cast_spell(mana_cost)` |
| `katas.rpn_calculator` | `evaluate(inputs)` over integers and `Operation` members; returns `None` for malformed expressions |
| `katas.logs` | `LogLevel` and `log`, `debug`, `info`, `warn`, `error`, producing `"[LEVEL]: message"` |
| `katas.short_fibonacci` | `create_empty`, `create_buffer(count)`, `fibonacci` |
| `katas.space_age` | `Duration.from_seconds(seconds)` and `Planet.<NAME>.years_during(duration)` |
| `katas.sublist` | `sublist(a, b)` returns a `Comparison`: `EQUAL`, `SUBLIST`, `SUPERLIST` or `UNEQUAL` |
| `katas.word_count` | `word_count(words)` counts lower-cased words |

## Examples

```python
from katas.alphametics import solve
from katas.say import encode
from katas.luhn import is_valid

sorted(solve("I + BB == ILL").items())   # [('B', 9), ('I', 1), ('L', 0)]
encode(1234)                             # 'one thousand two hundred thirty-four'
is_valid("055 444 285")                  # True
```

```python
from katas.forth import Forth, StackUnderflow

forth = Forth()
forth.eval(": double dup + ;")
forth.eval("1 2 + double")
forth.stack()              # [6]

try:
    Forth().eval("1 +")
except StackUnderflow:
    ...
```

```python
from katas.poker import winning_hands

winning_hands(["4S 5H 6C 8D KH", "2S 4H 6S 4D JH"])   # ['2S 4H 6S 4D JH']
```

## What it does not do

This is a library only: it installs no command-line program, and every
exercise is used by importing its module. The poker module does not rank five
of a kind; such a hand raises `ValueError`.

## Running the tests

Install the package with its test extra, then run pytest from the project
directory:

```
pip install -e ".[test]"
pytest
```