from charpredict.core.states import State

VOWELS = frozenset('aeiouAEIOU')
LETTERS = frozenset('abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ')
DIGITS = frozenset('0123456789')
PUNCTUATION = frozenset('.,!?;:()[]{}"-\'')


def classify(char: str) -> State:
    """
    Map a single character to its state.

    Anything outside ASCII letters, digits, space and the punctuation set
    falls back to CONSONANT, so every character has a state.
    """
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    if char in VOWELS:
        return State.VOWEL
    if char in LETTERS:
        return State.CONSONANT
    if char == ' ':
        return State.SPACE
    if char in DIGITS:
        return State.DIGIT
    if char in PUNCTUATION:
        return State.PUNCTUATION
    return State.CONSONANT
