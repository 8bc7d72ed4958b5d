"""Turn ordinary text into uwu speak.

Words, the spaces between them and trailing exclamations are transformed
with configurable probabilities. Every decision is drawn from a generator
seeded by the word itself, so the same input always gives the same output.

    >>> Uwuifier(words=1.0).uwuify_words("Tonight")
    'Tonyight'
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from .seed import Seed
from .utils import get_capital_percentage, is_at, is_break, is_uri


@dataclass(frozen=True)
class SpacesModifier:
    """Probabilities of adding a face, an action or a stutter after a word."""

    faces: float = 0.0
    actions: float = 0.0
    stutters: float = 0.0


DEFAULT_WORDS = 0.9
DEFAULT_SPACES = SpacesModifier(faces=0.04, actions=0.02, stutters=0.1)
DEFAULT_EXCLAMATIONS = 1.0

DEFAULT_FACES = (
    "(・`ω´・)", ";;w;;", "OwO", "UwU", ">w<",
    "^w^", "ÚwÚ", "^-^", ":3", "x3",
)
DEFAULT_EXCLAMATION_MARKS = ("!?", "?!!", "?!?1", "!!11", "?!?!")
DEFAULT_ACTIONS = (
    "*blushes*", "*whispers to self*", "*cries*", "*screams*",
    "*sweats*", "*twerks*", "*runs away*", "*screeches*",
    "*walks away*", "*sees bulge*", "*looks at you*",
    "*notices buldge*", "*starts twerking*", "*huggles tightly*",
    "*boops your nose*",
)

# Applied in order; "ove" must come before the r/l replacement.
_UWU_MAP = (
    (re.compile(r"ove"), "uv"),
    (re.compile(r"[rl]"), "w"),
    (re.compile(r"[RL]"), "W"),
    (re.compile(r"n([aeiou])"), r"ny\1"),
    (re.compile(r"N([aeiou])"), r"Ny\1"),
    (re.compile(r"N([AEIOU])"), r"NY\1"),
)

_TRAILING_EXCLAMATION = re.compile(r"[?!]+\Z")
_SENTENCE_END = ".!?-"


def _pick(seed: Seed, items: Sequence[str]) -> str:
    """Choose an item using the seed; a single item is chosen without drawing."""
    if len(items) == 1:
        return items[0]
    return items[seed.random_int(0, len(items) - 1)]


def _check_probability(name: str, value: float) -> None:
    if value < 0 or value > 1:
        raise ValueError(f"{name} value must be between 0 and 1")


class Uwuifier:
    """Transforms text into uwu speak."""

    def __init__(
        self,
        words: float = DEFAULT_WORDS,
        spaces: SpacesModifier | None = None,
        exclamations: float = DEFAULT_EXCLAMATIONS,
    ) -> None:
        self.faces: list[str] = list(DEFAULT_FACES)
        self.exclamations: list[str] = list(DEFAULT_EXCLAMATION_MARKS)
        self.actions: list[str] = list(DEFAULT_ACTIONS)
        self.words_modifier = words
        self.spaces_modifier = DEFAULT_SPACES if spaces is None else spaces
        self.exclamations_modifier = exclamations

    @property
    def words_modifier(self) -> float:
        """Probability that each word pattern is applied."""
        return self._words_modifier

    @words_modifier.setter
    def words_modifier(self, value: float) -> None:
        _check_probability("wordsModifier", value)
        self._words_modifier = value

    @property
    def spaces_modifier(self) -> SpacesModifier:
        """Probabilities for faces, actions and stutters."""
        return self._spaces_modifier

    @spaces_modifier.setter
    def spaces_modifier(self, value: SpacesModifier) -> None:
        total = value.faces + value.actions + value.stutters
        if total < 0 or total > 1:
            raise ValueError("spacesModifier sum must be between 0 and 1")
        self._spaces_modifier = value

    @property
    def exclamations_modifier(self) -> float:
        """Probability that a trailing exclamation is replaced."""
        return self._exclamations_modifier

    @exclamations_modifier.setter
    def exclamations_modifier(self, value: float) -> None:
        _check_probability("exclamationsModifier", value)
        self._exclamations_modifier = value

    def uwuify_words(self, sentence: str) -> str:
        """Replace letters in each word, leaving mentions and URIs alone."""
        return " ".join(self._uwuify_word(word) for word in sentence.split(" "))

    def _uwuify_word(self, word: str) -> str:
        if is_at(word) or is_uri(word):
            return word
        seed = Seed(word)
        for pattern, replacement in _UWU_MAP:
            if seed.random(0, 1) > self._words_modifier:
                continue
            word = pattern.sub(replacement, word)
        return word

    def uwuify_spaces(self, sentence: str) -> str:
        """Add faces, actions or stutters between words."""
        face_threshold = self._spaces_modifier.faces
        action_threshold = self._spaces_modifier.actions + face_threshold
        stutter_threshold = self._spaces_modifier.stutters + action_threshold

        result: list[str] = []
        for word in sentence.split(" "):
            if not word:
                result.append(word)
                continue

            seed = Seed(word)
            chance = seed.random(0, 1)
            first = word[0]
            previous = result[-1] if result else None

            if chance <= face_threshold and self.faces and not is_break(word):
                word = f"{word} {_pick(seed, self.faces)}"
                word = self._decapitalise(word, first, previous)
            elif chance <= action_threshold and self.actions and not is_break(word):
                word = f"{word} {_pick(seed, self.actions)}"
                word = self._decapitalise(word, first, previous)
            elif chance <= stutter_threshold and not is_uri(word) and not is_break(word):
                word = f"{first}-" * seed.random_int(0, 2) + word

            result.append(word)
        return " ".join(result)

    @staticmethod
    def _decapitalise(word: str, first: str, previous: str | None) -> str:
        """Lower the first letter when a face or action follows a sentence start."""
        if first != first.upper():
            return word
        if get_capital_percentage(word) > 0.5:
            return word
        lowered = first.lower() + word[1:]
        if previous is None:
            return lowered
        if previous and previous[-1] in _SENTENCE_END:
            return lowered
        return word

    def uwuify_exclamations(self, sentence: str) -> str:
        """Replace trailing runs of '?' and '!' with livelier ones."""
        return " ".join(self._uwuify_exclamation(word) for word in sentence.split(" "))

    def _uwuify_exclamation(self, word: str) -> str:
        seed = Seed(word)
        chance = seed.random(0, 1)
        if (
            not _TRAILING_EXCLAMATION.search(word)
            or chance > self._exclamations_modifier
            or is_break(word)
        ):
            return word
        stripped = _TRAILING_EXCLAMATION.sub("", word)
        return stripped + _pick(seed, self.exclamations)

    def uwuify_sentence(self, sentence: str) -> str:
        """Apply word, exclamation and space transformations in turn."""
        result = self.uwuify_words(sentence)
        result = self.uwuify_exclamations(result)
        return self.uwuify_spaces(result)