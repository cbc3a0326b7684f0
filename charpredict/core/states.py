from enum import IntEnum


class State(IntEnum):
    VOWEL = 0
    CONSONANT = 1
    SPACE = 2
    DIGIT = 3
    PUNCTUATION = 4
    # synthetic source state before any input; never a transition target
    START = 5

    @classmethod
    def parse(cls, name: str) -> "State":
        """Look up a state by name, ignoring case. Raises KeyError if unknown."""
        return cls[name.strip().upper()]


REAL_STATES: tuple[State, ...] = (
    State.VOWEL,
    State.CONSONANT,
    State.SPACE,
    State.DIGIT,
    State.PUNCTUATION,
)
