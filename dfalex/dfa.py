"""Two table-driven automata: assignment targets and reserved words."""

from __future__ import annotations

from enum import Enum

IDENTIFIER_DEAD = 10
RESERVED_DEAD = 41

# Columns: letter, underscore, digit, space, equals sign.
_IDENTIFIER_TABLE = (
    (1, 2, 10, 10, 10),
    (3, 4, 5, 6, 7),
    (3, 4, 5, 6, 7),
    (8, 9, 5, 6, 7),
    (8, 9, 5, 6, 7),
    (8, 9, 5, 6, 7),
    (10, 10, 10, 6, 7),
    (10, 10, 10, 10, 10),
    (8, 9, 5, 6, 7),
    (8, 9, 5, 6, 7),
    (10, 10, 10, 10, 10),
)
_IDENTIFIER_ACCEPTING = frozenset({7})

# Every transition not listed here leads to the dead state.
_RESERVED_TABLE: dict[int, dict[str, int]] = {
    0: {"i": 1, "f": 2, "r": 3, "F": 4, "T": 5, "d": 6, "c": 7, "w": 8},
    1: {"f": 9, "s": 10, "m": 11},
    2: {"r": 12},
    3: {"e": 13},
    4: {"a": 14},
    5: {"r": 15},
    6: {"e": 16},
    7: {"l": 17},
    8: {"h": 18},
    11: {"p": 19},
    12: {"o": 20},
    13: {"t": 21},
    14: {"l": 22},
    15: {"u": 23},
    16: {"f": 24},
    17: {"a": 25},
    18: {"i": 26},
    19: {"o": 27},
    20: {"m": 28},
    21: {"u": 29},
    22: {"s": 30},
    23: {"e": 31},
    25: {"s": 32},
    26: {"l": 33},
    27: {"r": 34},
    29: {"r": 35},
    30: {"e": 36},
    32: {"s": 37},
    33: {"e": 38},
    34: {"t": 39},
    35: {"n": 40},
}
_RESERVED_ACCEPTING = frozenset({9, 10, 24, 28, 31, 36, 37, 38, 39, 40})


class TokenKind(Enum):
    IDENTIFIER = "Identificador"
    RESERVED_WORD = "Palabra reservada"
    REJECTED = "Rechazado"


def _is_letter(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z"


def _identifier_column(char: str) -> int | None:
    if _is_letter(char):
        return 0
    if char == "_":
        return 1
    if "0" <= char <= "9":
        return 2
    if char == " ":
        return 3
    if char == "=":
        return 4
    return None


def identifier_step(state: int, char: str) -> int:
    """Advance the identifier automaton by one character."""
    column = _identifier_column(char)
    if column is None:
        return IDENTIFIER_DEAD
    return _IDENTIFIER_TABLE[state][column]


def reserved_word_step(state: int, char: str) -> int:
    """Advance the reserved-word automaton by one character."""
    return _RESERVED_TABLE.get(state, {}).get(char, RESERVED_DEAD)


class LineRecognizer:
    """Runs both automata side by side over one line of input."""

    def __init__(self) -> None:
        self.reset()

    def feed(self, char: str) -> None:
        self.identifier_state = identifier_step(self.identifier_state, char)
        self.reserved_state = reserved_word_step(self.reserved_state, char)

    def result(self) -> TokenKind:
        """Classify what has been fed; the identifier automaton takes precedence."""
        if self.identifier_state in _IDENTIFIER_ACCEPTING:
            return TokenKind.IDENTIFIER
        if self.reserved_state in _RESERVED_ACCEPTING:
            return TokenKind.RESERVED_WORD
        return TokenKind.REJECTED

    def reset(self) -> None:
        self.identifier_state = 0
        self.reserved_state = 0


def classify(text: str) -> TokenKind:
    """Classify ``text`` as it stands, with no filtering applied."""
    recognizer = LineRecognizer()
    for char in text:
        recognizer.feed(char)
    return recognizer.result()