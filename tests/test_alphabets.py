import pytest

from secutil.alphabets import (
    DEFAULT_ALPHABET,
    Alphabet,
    alphabet_names,
    find_alphabet,
    resolve_alphabet,
)


@pytest.mark.parametrize("preset", list(Alphabet))
def test_presets_are_non_empty_and_distinct(preset):
    assert preset.value
    assert len(set(preset.value)) == len(preset.value)


def test_no_similarity_preset_excludes_look_alikes():
    for ch in "0Oo1lI5Ssuv":
        assert ch not in Alphabet.ALPHANUM_NO_SIMILARITY.value


def test_preset_sizes():
    assert len(Alphabet.NUMBER.value) == 10
    assert len(Alphabet.ALPHA.value) == 52
    assert len(Alphabet.ALPHANUM.value) == 62


@pytest.mark.parametrize(
    "selector, expected",
    [
        ("number", Alphabet.NUMBER),
        ("alpha", Alphabet.ALPHA),
        ("alphanum", Alphabet.ALPHANUM),
        ("alphanumnosim", Alphabet.ALPHANUM_NO_SIMILARITY),
        ("ALPHA", Alphabet.ALPHA),
        ("  number ", Alphabet.NUMBER),
        ("alphanum_no_similarity", Alphabet.ALPHANUM_NO_SIMILARITY),
        (Alphabet.NUMBER.value, Alphabet.NUMBER),
        (Alphabet.ALPHA, Alphabet.ALPHA),
    ],
)
def test_resolve_known_selectors(selector, expected):
    assert resolve_alphabet(selector) is expected


@pytest.mark.parametrize("selector", [None, "", "hex", "base64", 42, "0123"])
def test_unknown_selectors_fall_back_to_alphanum(selector):
    assert resolve_alphabet(selector) is DEFAULT_ALPHABET
    assert DEFAULT_ALPHABET is Alphabet.ALPHANUM


def test_alphabet_names():
    assert alphabet_names() == ["number", "alpha", "alphanum", "alphanumnosim"]


def test_resolve_with_explicit_default():
    assert resolve_alphabet("junk", default=Alphabet.NUMBER) is Alphabet.NUMBER
    assert resolve_alphabet(None, default=Alphabet.ALPHA) is Alphabet.ALPHA
    assert resolve_alphabet("alphanum", default=Alphabet.NUMBER) is Alphabet.ALPHANUM


@pytest.mark.parametrize("selector", [None, "", "hex", 42])
def test_find_alphabet_unknown_is_none(selector):
    assert find_alphabet(selector) is None
