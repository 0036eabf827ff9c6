"""Protect sentence-ending punctuation inside quotations and brackets.

Spans are located with a pairing regex, then relocated in the full text by
literal substring replacement. Both the text and every span are escaped the
same way around that relocation and the text is unescaped afterwards.
"""

import re
from typing import List, Tuple

from ..core.markers import (
    PERIOD, IDEOGRAPHIC_FULL_STOP, FULLWIDTH_PERIOD, FULLWIDTH_EXCLAMATION,
    EXCLAMATION, QUESTION, QUESTION_SPACE, APOSTROPHE,
)
from ..core.types import MatchType

BETWEEN_SINGLE_QUOTES_RE = re.compile(r"\s'(?:[^']|'[a-zA-Z])*'")
BETWEEN_DOUBLE_QUOTES_RE = re.compile(r'"(?:[^"\\]|\\.)*"')
BETWEEN_ARROW_QUOTES_RE = re.compile(r"«(?:[^»\\]|\\.)*»")
BETWEEN_SMART_QUOTES_RE = re.compile(r"“(?:[^”\\]|\\.)*”")
BETWEEN_SQUARE_BRACKETS_RE = re.compile(r"\[(?:[^\]\\]|\\.)*\]")
BETWEEN_PARENS_RE = re.compile(r"\((?:[^()\\]|\\.)*\)")
WORD_WITH_LEADING_APOSTROPHE_RE = re.compile(r"\s'(?:[^']|'[a-zA-Z])*'\S")
APOSTROPHE_BEFORE_SPACE_RE = re.compile(r"'\s")

# Processing order matters: later kinds see markers placed by earlier ones
SPAN_KINDS: Tuple[Tuple[str, MatchType, re.Pattern], ...] = (
    ("single_quotes", "single", BETWEEN_SINGLE_QUOTES_RE),
    ("double_quotes", "double", BETWEEN_DOUBLE_QUOTES_RE),
    ("square_brackets", "double", BETWEEN_SQUARE_BRACKETS_RE),
    ("parens", "double", BETWEEN_PARENS_RE),
    ("arrow_quotes", "double", BETWEEN_ARROW_QUOTES_RE),
    ("smart_quotes", "double", BETWEEN_SMART_QUOTES_RE),
)

SPAN_SUBSTITUTIONS: Tuple[Tuple[str, str], ...] = (
    (".", PERIOD),
    ("。", IDEOGRAPHIC_FULL_STOP),
    ("．", FULLWIDTH_PERIOD),
    ("！", FULLWIDTH_EXCLAMATION),
    ("!", EXCLAMATION),
    ("?", QUESTION),
    ("? ", QUESTION_SPACE),
)

_ESCAPE_TABLE = str.maketrans({
    "(": r"\(", ")": r"\)", "[": r"\[", "]": r"\]", "-": r"\-",
})
_UNESCAPE_RE = re.compile(r"\\([()\[\]\-])")

def escape_reserved(text: str) -> str:
    return text.translate(_ESCAPE_TABLE)

def unescape_reserved(text: str) -> str:
    return _UNESCAPE_RE.sub(r"\1", text)

class PunctuationReplacer:
    """
    Masks punctuation inside the given spans wherever they occur in text.

    Every substitution step is mirrored into all literal occurrences of the
    span's current content in the escaped text, so identical spans elsewhere
    in the text are protected too.
    """

    def __init__(self, text: str, matches: List[str], match_type: MatchType = "double"):
        self.text = text
        self.matches = matches
        self.match_type = match_type

    def replace(self) -> str:
        self.text = escape_reserved(self.text)
        for match in self.matches:
            content = escape_reserved(match)
            for char, marker in SPAN_SUBSTITUTIONS:
                content = self._sub(content, char, marker)
            if self.match_type != "single":
                self._sub(content, "'", APOSTROPHE)
        return unescape_reserved(self.text)

    def _sub(self, content: str, char: str, marker: str) -> str:
        replaced = content.replace(char, marker)
        if replaced != content:
            self.text = self.text.replace(content, replaced)
        return replaced

def find_spans(text: str, pattern: re.Pattern) -> List[str]:
    """Non-overlapping matches of ``pattern`` with surrounding whitespace trimmed."""
    return [m.group(0).strip() for m in pattern.finditer(text)]

def _skip_single_quotes(text: str) -> bool:
    # 'tis and similar elisions would pair with a later quote
    return bool(WORD_WITH_LEADING_APOSTROPHE_RE.search(text)) and not APOSTROPHE_BEFORE_SPACE_RE.search(text)

def sub_pattern(text: str, match_type: MatchType, pattern: re.Pattern) -> str:
    """Protect punctuation inside every span ``pattern`` finds in text."""
    matches = find_spans(text, pattern)
    if not matches:
        return text
    return PunctuationReplacer(text, matches, match_type).replace()

class BetweenPunctuation:
    """Span protection stage of the pipeline."""

    def __init__(self, kinds: Tuple[Tuple[str, MatchType, re.Pattern], ...] = SPAN_KINDS):
        self.kinds = kinds

    def transform(self, text: str) -> str:
        for name, match_type, pattern in self.kinds:
            if match_type == "single" and _skip_single_quotes(text):
                continue
            text = sub_pattern(text, match_type, pattern)
        return text
