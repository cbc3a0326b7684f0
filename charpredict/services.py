from charpredict.analytics.markov import PredictionEngine, PredictionResult, current_state_of
from charpredict.analytics.stats import top_confidence
from charpredict.config import settings
from charpredict.core.states import REAL_STATES, State
from charpredict.logger import get_logger

logger = get_logger(__name__)

SPACE_GLYPH = '␣'

_engine: PredictionEngine | None = None


def get_engine() -> PredictionEngine:
    # built lazily so tables are validated before first use
    global _engine
    if _engine is None:
        _engine = PredictionEngine()
    return _engine


def display_char(c: str | None) -> str:
    if c is None or c == '':
        return 'None'
    return SPACE_GLYPH if c == ' ' else c


class PredictorSession:
    """One input session: the text buffer and its latest prediction."""

    def __init__(self, engine: PredictionEngine | None = None):
        self.engine = engine or get_engine()
        self.text = ''
        self.result: PredictionResult = self.engine.predict('')

    @property
    def current_state(self) -> State:
        return current_state_of(self.text)

    def update(self, text: str) -> PredictionResult:
        self.text = text
        self.result = self.engine.predict(text)
        return self.result

    def append(self, chars: str) -> PredictionResult:
        return self.update(self.text + chars)

    def clear(self) -> PredictionResult:
        return self.update('')


def transition_row(state: State, engine: PredictionEngine | None = None) -> dict[str, float]:
    engine = engine or get_engine()
    return {s.name: p for s, p in engine.transitions.row(state).items()}


def build_view(text: str, engine: PredictionEngine | None = None,
               result: PredictionResult | None = None) -> dict:
    engine = engine or get_engine()
    if result is None:
        result = engine.predict(text)
    last = text[-1] if text else None
    probs = [p.probability for p in result.predictions]
    return {
        'current_state': result.current_state.name,
        'last_character': last,
        'display_character': display_char(last),
        'sequence_length': len(text),
        'predictions': [
            {
                'character': p.character,
                'display_character': display_char(p.character),
                'state': p.state.name,
                'probability': p.probability,
                'percent': round(p.probability * 100, 1),
            }
            for p in result.predictions
        ],
        'transition_row': transition_row(result.current_state, engine),
        'stats': {
            'entropy_bits': result.entropy_bits,
            'top_confidence': top_confidence(probs),
            'active_states': len(REAL_STATES),
        },
    }


def build_graph(current: State, threshold: float | None = None,
                engine: PredictionEngine | None = None) -> dict:
    engine = engine or get_engine()
    threshold = settings.edge_threshold if threshold is None else threshold
    return {
        'current_state': current.name,
        'threshold': threshold,
        'nodes': [{'state': s.name, 'current': s is current} for s in State],
        'edges': [
            {'source': src.name, 'target': dst.name, 'probability': p}
            for src, dst, p in engine.transitions.edges(threshold)
        ],
    }


def get_tables(engine: PredictionEngine | None = None) -> dict:
    engine = engine or get_engine()
    return {
        'transitions': {s.name: transition_row(s, engine) for s in State},
        'emissions': {s.name: dict(engine.emissions.distribution(s)) for s in REAL_STATES},
    }
