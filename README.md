# uwuspeak

Turn ordinary text into uwu speak. Every choice is driven by a random
generator seeded from the word being transformed, so the same input always
produces the same output.

Words that are URLs or `@mentions` are not rewritten.

## Installation

```
pip install uwuspeak
```

The package has no dependencies outside the standard library.

## Usage

```python
from uwuspeak.uwuifier import Uwuifier

uwuifier = Uwuifier()
print(uwuifier.uwuify_sentence("This package is amazing!"))

Uwuifier(words=1.0).uwuify_words("Tonight")  # 'Tonyight'
```

### Configuration

```python
from uwuspeak.uwuifier import SpacesModifier, Uwuifier

uwuifier = Uwuifier(
    words=0.8,
    spaces=SpacesModifier(faces=0.1, actions=0.05, stutters=0.15),
    exclamations=0.5,
)
```

- `words`: the probability (0 to 1) that each word rule is applied. The rules
  are `ove` → `uv`, `r`/`l` → `w`, `R`/`L` → `W`, and `n`/`N` followed by a
  vowel → `ny`/`Ny`/`NY` followed by that vowel.
- `spaces`: the probabilities of appending a face after a word, appending an
  action after a word, or stuttering the word's first letter (for example
  `h-h-hello`). Their sum must lie between 0 and 1. When a face or action is
  added to a capitalised word at the start of a sentence, its first letter is
  lowered unless most of the word's letters are upper case.
- `exclamations`: the probability that a trailing run of `!` and `?` is
  replaced by a livelier one such as `?!!` or `!!11`.

Values outside the allowed range raise `ValueError`, both in the constructor
and when `words_modifier`, `spaces_modifier` or `exclamations_modifier` is
assigned later. The defaults are `words=0.9`,
`SpacesModifier(faces=0.04, actions=0.02, stutters=0.1)` and
`exclamations=1.0`.

The faces, actions and exclamations to pick from are plain lists on the
instance (`faces`, `actions`, `exclamations`) and may be changed.

### Individual transformations

- `uwuify_words(sentence)`: word rewrites only
- `uwuify_exclamations(sentence)`: exclamation replacement only
- `uwuify_spaces(sentence)`: faces, actions and stutters only
- `uwuify_sentence(sentence)`: words, then exclamations, then spaces

Sentences are split on single spaces and joined back the same way.

### Deterministic random numbers

```python
from uwuspeak.seed import Seed

seed = Seed("hello")
seed.random(0, 1)       # float in [0, 1)
seed.random_int(1, 10)  # int between 1 and 10, inclusive
```

Both methods raise `ValueError` when the lower bound is not below the upper
bound.

### Helpers

`uwuspeak.utils` provides the predicates used above: `is_at`, `is_uri`,
`is_break` (whitespace only) and `get_capital_percentage`.

## What it does not do

uwuspeak is a library only: it installs no command-line tool, and text is
transformed by calling it from Python.

## Running the tests

```
pip install -e ".[test]"
pytest
```