"""Reserved marker alphabet and restoration.

Every marker is a code point (or an ``&x&`` sequence) that does not occur in
ordinary text. Markers are restored in the reverse of the order in which the
pipeline introduces them.
"""

from typing import Tuple

PERIOD = "∯"

# Ellipses
ELLIPSIS_BEFORE_CAPITAL = "☏"
ELLIPSIS_FOUR_BEFORE_CAPITAL = "♚"
ELLIPSIS_SPACED = "♟"
ELLIPSIS_SPACED_FOUR = "♝"
ELLIPSIS_SPACED_BEFORE_CAPITAL = "♜"
ELLIPSIS_SPACED_AFTER_WORD = "♞"
ELLIPSIS = "ƪ"

# Punctuation inside quotes and brackets
IDEOGRAPHIC_FULL_STOP = "&ᓰ&"
FULLWIDTH_PERIOD = "&ᓱ&"
FULLWIDTH_EXCLAMATION = "&ᓳ&"
EXCLAMATION = "&ᓴ&"
QUESTION = "&ᓷ&"
QUESTION_SPACE = "&ᓸ&"
APOSTROPHE = "&⎋&"

# Double punctuation; these still terminate a sentence
QUESTION_EXCLAMATION = "☉"
EXCLAMATION_QUESTION = "☈"
DOUBLE_QUESTION = "☇"
DOUBLE_EXCLAMATION = "☄"

# Boundary helpers added by the splitter
TEMPORARY_END = "ȸ"
NEWLINE = "ȹ"

# (marker, original) in order of introduction
RESTORATIONS: Tuple[Tuple[str, str], ...] = (
    (PERIOD, "."),
    (ELLIPSIS_BEFORE_CAPITAL, ".."),
    (ELLIPSIS_FOUR_BEFORE_CAPITAL, "..."),
    (ELLIPSIS_SPACED, " . . ."),
    (ELLIPSIS_SPACED_FOUR, ". . . ."),
    (ELLIPSIS_SPACED_BEFORE_CAPITAL, ". . "),
    (ELLIPSIS_SPACED_AFTER_WORD, ". . ."),
    (ELLIPSIS, "..."),
    (IDEOGRAPHIC_FULL_STOP, "。"),
    (FULLWIDTH_PERIOD, "．"),
    (FULLWIDTH_EXCLAMATION, "！"),
    (EXCLAMATION, "!"),
    (QUESTION, "?"),
    (QUESTION_SPACE, "? "),
    (APOSTROPHE, "'"),
    (QUESTION_EXCLAMATION, "?!"),
    (EXCLAMATION_QUESTION, "!?"),
    (DOUBLE_QUESTION, "??"),
    (DOUBLE_EXCLAMATION, "!!"),
    (TEMPORARY_END, ""),
    (NEWLINE, "\n"),
)

MARKERS: Tuple[str, ...] = tuple(marker for marker, _ in RESTORATIONS)

# Characters that end a sentence once all masking is done
TERMINATORS = "。．.！!?？" + TEMPORARY_END + NEWLINE + (
    QUESTION_EXCLAMATION + EXCLAMATION_QUESTION + DOUBLE_QUESTION + DOUBLE_EXCLAMATION
)

def restore(text: str) -> str:
    """Map every marker back to its original punctuation."""
    for marker, original in reversed(RESTORATIONS):
        if marker in text:
            text = text.replace(marker, original)
    return text

def find_markers(text: str) -> Tuple[str, ...]:
    """Return the reserved markers already present in raw input."""
    return tuple(marker for marker in MARKERS if marker in text)
