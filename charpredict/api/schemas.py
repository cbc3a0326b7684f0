from pydantic import BaseModel


class PredictionItem(BaseModel):
    character: str
    display_character: str
    state: str
    probability: float
    percent: float


class StatsOut(BaseModel):
    entropy_bits: float
    top_confidence: float
    active_states: int


class PredictOut(BaseModel):
    current_state: str
    last_character: str | None
    display_character: str
    sequence_length: int
    predictions: list[PredictionItem]
    transition_row: dict[str, float]
    stats: StatsOut


class TransitionRowOut(BaseModel):
    state: str
    transitions: dict[str, float]


class GraphNode(BaseModel):
    state: str
    current: bool


class GraphEdge(BaseModel):
    source: str
    target: str
    probability: float


class GraphOut(BaseModel):
    current_state: str
    threshold: float
    nodes: list[GraphNode]
    edges: list[GraphEdge]


class TablesOut(BaseModel):
    transitions: dict[str, dict[str, float]]
    emissions: dict[str, dict[str, float]]
