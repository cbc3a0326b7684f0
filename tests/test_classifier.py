import string

import pytest

from charpredict.core.classifier import classify
from charpredict.core.states import REAL_STATES, State


@pytest.mark.parametrize("c", list("aeiouAEIOU"))
def test_vowels(c):
    assert classify(c) is State.VOWEL


def test_consonants_both_cases():
    for c in "bcdfghjklmnpqrstvwxyzBCDFGHJKLMNPQRSTVWXYZ":
        assert classify(c) is State.CONSONANT


def test_space_digits_punctuation():
    assert classify(' ') is State.SPACE
    for d in string.digits:
        assert classify(d) is State.DIGIT
    for p in '.,!?;:()[]{}"-\'':
        assert classify(p) is State.PUNCTUATION


@pytest.mark.parametrize("c", ['@', '#', '\t', '\n', 'é', '٣', '€', '_'])
def test_unrecognized_falls_back_to_consonant(c):
    assert classify(c) is State.CONSONANT


def test_total_and_never_start():
    chars = string.ascii_letters + string.digits + ' ' + '.,!?;:()[]{}"-\'' + '~^&*'
    for c in chars:
        assert classify(c) in REAL_STATES


@pytest.mark.parametrize("bad", ['', 'ab'])
def test_rejects_non_single_char(bad):
    with pytest.raises(ValueError):
        classify(bad)


def test_state_parse():
    assert State.parse("vowel") is State.VOWEL
    assert State.parse(" Start ") is State.START
    with pytest.raises(KeyError):
        State.parse("nope")
