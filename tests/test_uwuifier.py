import pytest

from uwuspeak.uwuifier import (
    DEFAULT_EXCLAMATIONS,
    DEFAULT_SPACES,
    DEFAULT_WORDS,
    SpacesModifier,
    Uwuifier,
)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Stabbed", "Stabbed"),
        ("Tonight", "Tonyight"),
        ("Through", "Thwough"),
        ("Struggling", "Stwuggwing"),
        ("Netherlands", "Nyethewwands"),
        ("Grandpa", "Gwandpa"),
        ("love", "wuv"),
        ("move", "muv"),
        ("remove", "wemuv"),
    ],
)
def test_uwuify_words(text, expected):
    assert Uwuifier(words=1.0).uwuify_words(text) == expected


def test_uwuify_words_consistency():
    uwuifier = Uwuifier(words=0.5)
    text = "This is a test sentence with lots of r and l letters"
    first = uwuifier.uwuify_words(text)
    second = uwuifier.uwuify_words(text)
    assert first == second
    original_words = text.split(" ")
    result_words = first.split(" ")
    assert len(result_words) == len(original_words)
    untouchable = {"This", "is", "a", "test", "with", "of", "and"}
    for original, changed in zip(original_words, result_words):
        if original in untouchable:
            assert changed == original
        assert set(changed) <= set(original) | {"w", "y", "u"}


def test_uwuify_words_skips_mentions_and_uris():
    uwuifier = Uwuifier(words=1.0)
    text = "@roller https://roller.example.com/learn really"
    assert uwuifier.uwuify_words(text) == "@roller https://roller.example.com/learn weawwy"


def test_uwuify_spaces_adds_faces():
    uwuifier = Uwuifier(spaces=SpacesModifier(faces=1.0))
    result = uwuifier.uwuify_spaces("hello world")
    assert any(face in result for face in uwuifier.faces)


def test_uwuify_spaces_single_face():
    uwuifier = Uwuifier(spaces=SpacesModifier(faces=1.0))
    uwuifier.faces = ["OwO"]
    assert uwuifier.uwuify_spaces("hello world") == "hello OwO world OwO"


def test_uwuify_spaces_single_action():
    uwuifier = Uwuifier(spaces=SpacesModifier(actions=1.0))
    uwuifier.actions = ["*blushes*"]
    assert uwuifier.uwuify_spaces("hi there") == "hi *blushes* there *blushes*"


def test_uwuify_spaces_lowers_first_word_capital():
    uwuifier = Uwuifier(spaces=SpacesModifier(faces=1.0))
    uwuifier.faces = ["owo"]
    assert uwuifier.uwuify_spaces("Hello. World") == "hello. owo World owo"


def test_uwuify_spaces_keeps_shouted_word():
    uwuifier = Uwuifier(spaces=SpacesModifier(faces=1.0))
    uwuifier.faces = ["OWO"]
    assert uwuifier.uwuify_spaces("HEY") == "HEY OWO"


def test_uwuify_spaces_stutters_prefix_only():
    uwuifier = Uwuifier(spaces=SpacesModifier(stutters=1.0))
    words = "some words to stutter over here".split(" ")
    result = uwuifier.uwuify_spaces(" ".join(words)).split(" ")
    assert len(result) == len(words)
    for original, changed in zip(words, result):
        assert changed.endswith(original)
        prefix = changed[: len(changed) - len(original)]
        assert prefix in ("", f"{original[0]}-", f"{original[0]}-" * 2)


def test_uwuify_spaces_keeps_empty_words():
    uwuifier = Uwuifier(spaces=SpacesModifier(faces=1.0))
    uwuifier.faces = ["OwO"]
    assert uwuifier.uwuify_spaces("a  b") == "a OwO  b OwO"


@pytest.mark.parametrize("text", ["Hello!", "What?", "Wow!!", "Really?!"])
def test_uwuify_exclamations_replaces(text):
    uwuifier = Uwuifier(exclamations=1.0)
    result = uwuifier.uwuify_exclamations(text)
    assert any(mark in result for mark in uwuifier.exclamations)
    assert result.rstrip("?!1").rstrip() == text.rstrip("?!")


def test_uwuify_exclamations_single_choice():
    uwuifier = Uwuifier(exclamations=1.0)
    uwuifier.exclamations = ["!!"]
    assert uwuifier.uwuify_exclamations("Wow?! hi") == "Wow!! hi"


def test_uwuify_exclamations_zero_probability():
    uwuifier = Uwuifier(exclamations=0.0)
    assert uwuifier.uwuify_exclamations("Wow?!") == "Wow?!"


@pytest.mark.parametrize(
    "sentence",
    [
        "Hello world!",
        "This is a test sentence.",
        "Random text with multiple words and punctuation!",
    ],
)
def test_deterministic_behaviour(sentence):
    uwuifier = Uwuifier()
    first = uwuifier.uwuify_sentence(sentence)
    second = uwuifier.uwuify_sentence(sentence)
    assert first == second
    assert len(first.split(" ")) >= len(sentence.split(" "))
    assert first.strip() != ""


@pytest.mark.parametrize(
    ("sentence", "url"),
    [
        ("Check this out: https://www.example.com", "https://www.example.com"),
        ("Visit https://github.com/user/repo for more info", "https://github.com"),
    ],
)
def test_url_preservation(sentence, url):
    assert url in Uwuifier().uwuify_sentence(sentence)


def test_zero_modifiers_no_change():
    uwuifier = Uwuifier(
        words=0,
        spaces=SpacesModifier(faces=0, actions=0, stutters=0),
        exclamations=0,
    )
    text = "This should remain completely unchanged!"
    assert uwuifier.uwuify_sentence(text) == text


def test_transformation_occurs():
    text = "Hello world with letters to transform"
    result = Uwuifier(words=1.0).uwuify_sentence(text)
    assert result != text
    assert "w" in result


def test_defaults():
    uwuifier = Uwuifier()
    assert uwuifier.words_modifier == DEFAULT_WORDS == 0.9
    assert uwuifier.spaces_modifier == DEFAULT_SPACES
    assert uwuifier.spaces_modifier == SpacesModifier(0.04, 0.02, 0.1)
    assert uwuifier.exclamations_modifier == DEFAULT_EXCLAMATIONS == 1.0


def test_setters_store_valid_values():
    uwuifier = Uwuifier()
    uwuifier.words_modifier = 0.3
    uwuifier.spaces_modifier = SpacesModifier(0.2, 0.2, 0.2)
    uwuifier.exclamations_modifier = 0.7
    assert uwuifier.words_modifier == 0.3
    assert uwuifier.spaces_modifier == SpacesModifier(0.2, 0.2, 0.2)
    assert uwuifier.exclamations_modifier == 0.7


@pytest.mark.parametrize("value", [-0.1, 1.5])
def test_invalid_words_modifier(value):
    with pytest.raises(ValueError, match="wordsModifier"):
        Uwuifier(words=value)


@pytest.mark.parametrize("value", [-0.1, 1.5])
def test_invalid_exclamations_modifier(value):
    uwuifier = Uwuifier()
    with pytest.raises(ValueError, match="exclamationsModifier"):
        uwuifier.exclamations_modifier = value
    assert uwuifier.exclamations_modifier == 1.0


def test_invalid_spaces_modifier():
    with pytest.raises(ValueError, match="spacesModifier"):
        Uwuifier(spaces=SpacesModifier(faces=0.5, actions=0.5, stutters=0.5))