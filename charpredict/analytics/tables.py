from types import MappingProxyType
from typing import Iterator, Mapping

from charpredict.config import settings
from charpredict.core.states import REAL_STATES, State
from charpredict.core.validation import TableValidationError, check_distribution
from charpredict.logger import get_logger

logger = get_logger(__name__)

# rows: source state, columns: REAL_STATES order (START is never a target)
DEFAULT_TRANSITIONS: Mapping[State, tuple[float, ...]] = MappingProxyType({
    #                   V     C     S     D     P
    State.VOWEL:       (0.2, 0.5, 0.2, 0.05, 0.05),
    State.CONSONANT:   (0.6, 0.2, 0.15, 0.03, 0.02),
    State.SPACE:       (0.3, 0.5, 0.1, 0.05, 0.05),
    State.DIGIT:       (0.1, 0.1, 0.2, 0.5, 0.1),
    State.PUNCTUATION: (0.2, 0.3, 0.4, 0.05, 0.05),
    State.START:       (0.3, 0.5, 0.1, 0.05, 0.05),
})

# sparse: only the most frequent characters of each state
DEFAULT_EMISSIONS: Mapping[State, Mapping[str, float]] = MappingProxyType({
    State.VOWEL: MappingProxyType({
        'a': 0.25, 'e': 0.25, 'i': 0.15, 'o': 0.15, 'u': 0.15, 'A': 0.05,
    }),
    State.CONSONANT: MappingProxyType({
        't': 0.12, 'n': 0.10, 's': 0.10, 'r': 0.08, 'l': 0.08,
        'h': 0.07, 'd': 0.07, 'c': 0.06, 'm': 0.06, 'f': 0.05,
        'p': 0.05, 'g': 0.04, 'w': 0.04, 'y': 0.04, 'b': 0.04,
    }),
    State.SPACE: MappingProxyType({' ': 1.0}),
    State.DIGIT: MappingProxyType({
        '1': 0.15, '2': 0.12, '3': 0.11, '0': 0.11, '5': 0.10,
        '4': 0.09, '9': 0.08, '8': 0.08, '7': 0.08, '6': 0.08,
    }),
    State.PUNCTUATION: MappingProxyType({
        '.': 0.4, ',': 0.25, '!': 0.1, '?': 0.1, ';': 0.05,
        ':': 0.05, '(': 0.025, ')': 0.025,
    }),
})


class TransitionTable:
    """Fixed state-to-state probabilities, validated once at construction."""

    def __init__(self, rows: Mapping[State, tuple[float, ...]] = DEFAULT_TRANSITIONS,
                 tol: float | None = None):
        tol = settings.sum_tolerance if tol is None else tol
        table: dict[State, tuple[float, ...]] = {}
        for state in State:
            if state not in rows:
                raise TableValidationError("transition", state, reason="is missing")
            row = tuple(float(p) for p in rows[state])
            if len(row) != len(REAL_STATES):
                raise TableValidationError("transition", state, reason=f"has {len(row)} columns, "
                                           f"expected {len(REAL_STATES)}")
            check_distribution("transition", state, row, tol)
            table[state] = row
        self._rows = MappingProxyType(table)
        logger.info("TransitionTable ready", extra={"metrics": {"states": len(table)}})

    def transition_probability(self, from_state: State, to_state: State) -> float:
        if to_state is State.START:
            return 0.0
        return self._rows[from_state][REAL_STATES.index(to_state)]

    def row(self, from_state: State) -> Mapping[State, float]:
        return MappingProxyType(dict(zip(REAL_STATES, self._rows[from_state])))

    def edges(self, threshold: float = 0.1) -> Iterator[tuple[State, State, float]]:
        """Transitions with probability strictly above ``threshold``, self-loops excluded."""
        for src in State:
            for dst, p in zip(REAL_STATES, self._rows[src]):
                if p > threshold and src is not dst:
                    yield src, dst, p


class EmissionTable:
    """Per-state character distributions. Characters not listed have probability 0."""

    def __init__(self, distributions: Mapping[State, Mapping[str, float]] = DEFAULT_EMISSIONS,
                 tol: float | None = None):
        tol = settings.sum_tolerance if tol is None else tol
        table: dict[State, Mapping[str, float]] = {}
        for state in REAL_STATES:
            if state not in distributions:
                raise TableValidationError("emission", state, reason="is missing")
            dist = {c: float(p) for c, p in distributions[state].items()}
            check_distribution("emission", state, dist.values(), tol)
            table[state] = MappingProxyType(dist)
        self._dists = MappingProxyType(table)
        logger.info("EmissionTable ready", extra={"metrics": {
            "characters": {s.name: len(d) for s, d in table.items()},
        }})

    def emission_probability(self, state: State, character: str) -> float:
        dist = self._dists.get(state)
        if dist is None:
            return 0.0
        return dist.get(character, 0.0)

    def distribution(self, state: State) -> Mapping[str, float]:
        return self._dists.get(state, MappingProxyType({}))
