import math
from typing import Iterable


def normalize(probs: Iterable[float]) -> list[float]:
    probs = list(probs)
    s = math.fsum(probs)
    if s <= 0:
        return [0.0 for _ in probs]
    return [p / s for p in probs]


def entropy_bits(probs: Iterable[float]) -> float:
    # renormalises first: the input is usually a truncated top-k list
    H = 0.0
    for p in normalize(probs):
        if p > 0:
            H -= p * math.log2(p)
    return H


def top_confidence(probs: Iterable[float]) -> float:
    # input is already sorted descending
    for p in probs:
        return p
    return 0.0
