import math

import pytest

from charpredict.analytics.stats import entropy_bits, normalize, top_confidence


def test_single_element_entropy_is_zero():
    assert entropy_bits([0.06]) == 0.0


def test_empty_entropy_is_zero():
    assert entropy_bits([]) == 0.0


def test_uniform_entropy():
    assert entropy_bits([0.1, 0.1, 0.1, 0.1]) == pytest.approx(2.0)


def test_entropy_renormalises():
    # same shape, different mass
    assert entropy_bits([0.2, 0.1]) == pytest.approx(entropy_bits([0.6, 0.3]))


def test_zero_entries_ignored():
    assert entropy_bits([0.5, 0.0, 0.5]) == pytest.approx(1.0)


def test_normalize():
    out = normalize([1.0, 3.0])
    assert out == [0.25, 0.75]
    assert normalize([0.0, 0.0]) == [0.0, 0.0]
    assert math.fsum(normalize([0.2, 0.1, 0.05])) == pytest.approx(1.0)


def test_top_confidence():
    assert top_confidence([0.2, 0.1]) == 0.2
    assert top_confidence([]) == 0.0
    assert top_confidence(iter([0.3])) == 0.3
