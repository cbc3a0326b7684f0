from typing import Annotated
from fastapi import APIRouter, Depends, HTTPException, Header, Query
from charpredict.api.schemas import GraphOut, PredictOut, StatsOut, TablesOut, TransitionRowOut
from charpredict.analytics.markov import current_state_of
from charpredict.config import settings
from charpredict.core.states import State
from charpredict.services import build_graph, build_view, get_tables, transition_row

router = APIRouter()

TextQuery = Annotated[str, Query(max_length=settings.max_input_length)]


def _auth(api_key_header: str | None = Header(default=None, alias="X-API-Key")):
    if settings.api_key and api_key_header != settings.api_key:
        raise HTTPException(status_code=401, detail="Invalid API key")


@router.get('/predict', response_model=PredictOut, dependencies=[Depends(_auth)])
async def predict(text: TextQuery = ""):
    return build_view(text)


@router.get('/stats', response_model=StatsOut, dependencies=[Depends(_auth)])
async def stats(text: TextQuery = ""):
    return build_view(text)['stats']


@router.get('/transitions/{state}', response_model=TransitionRowOut, dependencies=[Depends(_auth)])
async def transitions(state: str):
    try:
        s = State.parse(state)
    except KeyError:
        raise HTTPException(404, detail=f"unknown state {state!r}")
    return {'state': s.name, 'transitions': transition_row(s)}


@router.get('/graph', response_model=GraphOut, dependencies=[Depends(_auth)])
async def graph(text: TextQuery = "", threshold: float | None = Query(default=None, ge=0.0, le=1.0)):
    return build_graph(current_state_of(text), threshold)


@router.get('/tables', response_model=TablesOut, dependencies=[Depends(_auth)])
async def tables():
    return get_tables()
