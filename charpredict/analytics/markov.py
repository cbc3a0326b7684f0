from dataclasses import dataclass

from charpredict.analytics.stats import entropy_bits
from charpredict.analytics.tables import EmissionTable, TransitionTable
from charpredict.config import settings
from charpredict.core.classifier import classify
from charpredict.core.states import REAL_STATES, State
from charpredict.logger import get_logger

logger = get_logger(__name__)

MAX_TOP_K = 8


@dataclass(frozen=True)
class Prediction:
    character: str
    state: State
    probability: float


@dataclass(frozen=True)
class PredictionResult:
    current_state: State
    predictions: tuple[Prediction, ...]
    entropy_bits: float


def current_state_of(text: str) -> State:
    """Only the last character counts; an empty buffer is START."""
    if not text:
        return State.START
    return classify(text[-1])


class PredictionEngine:
    """
    Ranks next-character candidates for a text buffer.

    Each candidate scores P(state | current) * P(char | state). The engine
    keeps no state between calls: the same text always gives the same result.
    """

    def __init__(self, transitions: TransitionTable | None = None,
                 emissions: EmissionTable | None = None, top_k: int | None = None):
        self.transitions = transitions or TransitionTable()
        self.emissions = emissions or EmissionTable()
        self.top_k = settings.top_k if top_k is None else top_k
        if not 1 <= self.top_k <= MAX_TOP_K:
            raise ValueError(f"top_k must be between 1 and {MAX_TOP_K}, got {self.top_k}")
        logger.info("PredictionEngine initialized", extra={"metrics": {"top_k": self.top_k}})

    def candidates(self, current: State) -> list[Prediction]:
        """All nonzero candidates from ``current``, in enumeration order (unsorted)."""
        out = []
        for nxt in REAL_STATES:
            p_trans = self.transitions.transition_probability(current, nxt)
            for char in self.emissions.distribution(nxt):
                p = p_trans * self.emissions.emission_probability(nxt, char)
                if p > 0:
                    out.append(Prediction(char, nxt, p))
        return out

    def rank(self, current: State) -> tuple[Prediction, ...]:
        # sorted() is stable, ties keep enumeration order
        ranked = sorted(self.candidates(current), key=lambda pr: pr.probability, reverse=True)
        return tuple(ranked[:self.top_k])

    def predict(self, text: str) -> PredictionResult:
        current = current_state_of(text)
        ranked = self.rank(current)
        H = entropy_bits(pr.probability for pr in ranked)
        logger.debug("prediction", extra={"metrics": {
            "length": len(text),
            "state": current.name,
            "top": ranked[0].character if ranked else None,
            "entropy": H,
        }})
        return PredictionResult(current, ranked, H)
