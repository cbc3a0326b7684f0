import pytest

from charpredict.core.states import State
from charpredict.services import (
    PredictorSession,
    build_graph,
    build_view,
    display_char,
    get_engine,
    get_tables,
    transition_row,
)


def test_session_state_follows_text():
    s = PredictorSession()
    assert s.current_state is State.START
    assert s.result.current_state is State.START
    s.update("hi")
    assert s.current_state is State.VOWEL
    s.append(" ")
    assert s.text == "hi "
    assert s.current_state is State.SPACE
    assert s.result.current_state is State.SPACE
    s.clear()
    assert s.text == ""
    assert s.current_state is State.START


def test_session_current_state_is_read_only():
    s = PredictorSession()
    with pytest.raises(AttributeError):
        s.current_state = State.DIGIT


def test_engine_is_shared():
    assert get_engine() is get_engine()


def test_display_char():
    assert display_char(' ') == '␣'
    assert display_char(None) == 'None'
    assert display_char('x') == 'x'


def test_view_for_empty_text():
    v = build_view("")
    assert v['current_state'] == 'START'
    assert v['last_character'] is None
    assert v['display_character'] == 'None'
    assert v['sequence_length'] == 0
    assert v['predictions'][0]['display_character'] == '␣'
    assert v['predictions'][0]['percent'] == 10.0
    assert v['stats']['active_states'] == 5
    assert v['stats']['top_confidence'] == v['predictions'][0]['probability']
    assert list(v['transition_row']) == ['VOWEL', 'CONSONANT', 'SPACE', 'DIGIT', 'PUNCTUATION']


def test_view_after_vowel():
    v = build_view("ba")
    assert v['current_state'] == 'VOWEL'
    assert v['last_character'] == 'a'
    assert v['sequence_length'] == 2
    assert v['transition_row']['CONSONANT'] == 0.5
    assert [p['character'] for p in v['predictions']][:2] == [' ', 't']
    assert v['predictions'][1]['percent'] == 6.0


def test_transition_row():
    assert transition_row(State.DIGIT) == {
        'VOWEL': 0.1, 'CONSONANT': 0.1, 'SPACE': 0.2, 'DIGIT': 0.5, 'PUNCTUATION': 0.1,
    }


def test_graph_highlights_current_state():
    g = build_graph(State.CONSONANT, threshold=0.1)
    current = [n['state'] for n in g['nodes'] if n['current']]
    assert current == ['CONSONANT']
    assert len(g['nodes']) == 6
    assert all(e['probability'] > 0.1 for e in g['edges'])
    assert all(e['source'] != e['target'] for e in g['edges'])
    assert all(e['target'] != 'START' for e in g['edges'])
    assert {'source': 'START', 'target': 'CONSONANT', 'probability': 0.5} in g['edges']


def test_graph_default_threshold():
    assert build_graph(State.START)['threshold'] == 0.1


def test_tables():
    t = get_tables()
    assert set(t['transitions']) == {s.name for s in State}
    assert 'START' not in t['emissions']
    assert t['emissions']['SPACE'] == {' ': 1.0}
