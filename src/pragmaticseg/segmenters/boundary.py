"""Sentence boundary splitting of fully protected text."""

import re
from typing import List

from ..core.markers import (
    EXCLAMATION, QUESTION, QUESTION_EXCLAMATION, EXCLAMATION_QUESTION,
    DOUBLE_QUESTION, DOUBLE_EXCLAMATION, TEMPORARY_END, NEWLINE, TERMINATORS,
    restore,
)
from ..core.rules import RuleSet
from ..core.types import Rule

SENTENCE_BOUNDARY_RE = re.compile(
    r"（[^）]*）(?=\s?[A-Z])"
    r"|「[^」]*」(?=\s[A-Z])"
    r"|\([^)]{2,}\)(?=\s[A-Z])"
    r"|'[^']*[^,]'(?=\s[A-Z])"
    r'|"[^"]*[^,]"(?=\s[A-Z])'
    r"|“[^”]*[^,]”(?=\s[A-Z])"
    r"|\S.*?[" + re.escape(TERMINATORS) + r"]"
    r"|[" + re.escape(TERMINATORS) + r"]"
)

QUOTATION_AT_END_OF_SENTENCE_RE = re.compile(r"[!?.\-][\"'”“]\s[A-Z]")
SPLIT_SPACE_QUOTATION_AT_END_OF_SENTENCE_RE = re.compile(r"(?<=[!?.\-][\"'”“])\s(?=[A-Z])")

PARENS_BETWEEN_DOUBLE_QUOTES_RE = re.compile(r"[\"”]\s\(.*\)\s[\"“]")
_SPACE_BEFORE_PAREN_RE = re.compile(r"\s(?=\()")
_SPACE_AFTER_PAREN_RE = re.compile(r"(?<=\))\s")

# Wow!!! Really???
CONTINUOUS_PUNCTUATION_RE = re.compile(r"(?<=\S)[!?]{3,}(?=\s|\Z)")

DOUBLE_PUNCTUATION_RULES = RuleSet("double_punctuation", (
    Rule.compile(r"\?!", QUESTION_EXCLAMATION, name="question_exclamation"),
    Rule.compile(r"!\?", EXCLAMATION_QUESTION, name="exclamation_question"),
    Rule.compile(r"\?\?", DOUBLE_QUESTION, name="double_question"),
    Rule.compile(r"!!", DOUBLE_EXCLAMATION, name="double_exclamation"),
))

MID_SENTENCE_PUNCTUATION_RULES = RuleSet("mid_sentence_punctuation", (
    Rule.compile(r"(\?)(?=['\"])", QUESTION, name="question_mark_in_quotation"),
    Rule.compile(r"(!)(?=['\"])", EXCLAMATION, name="exclamation_in_quotation"),
    Rule.compile(r"(!)(?=,\s[a-z])", EXCLAMATION, name="exclamation_before_comma"),
    Rule.compile(r"(!)(?=\s[a-z])", EXCLAMATION, name="exclamation_mid_sentence"),
))

EXCLAMATION_WORDS = ("Yahoo!", "Yum!", "Y!J", "!Kung", "!Xuun", "!Xun", "!Xung", "!Ku", "!Xo")
EXCLAMATION_WORDS_RE = re.compile(
    r"(?<!\w)(?:%s)(?!\w)" % "|".join(re.escape(w) for w in EXCLAMATION_WORDS))

def _mask_continuous(match: re.Match) -> str:
    run = match.group(0)
    masked = run[:-1].replace("!", EXCLAMATION).replace("?", QUESTION)
    return masked + run[-1]

def _hard_breaks_around_parens(match: re.Match) -> str:
    return _SPACE_AFTER_PAREN_RE.sub("\r", _SPACE_BEFORE_PAREN_RE.sub("\r", match.group(0)))

class BoundarySplitter:
    """
    Splits protected text on true sentence boundaries and restores markers.

    Args:
        min_length: Minimum character length of a returned sentence
    """

    def __init__(self, min_length: int = 0):
        self.min_length = min_length

    def split(self, text: str) -> List[str]:
        text = PARENS_BETWEEN_DOUBLE_QUOTES_RE.sub(_hard_breaks_around_parens, text)
        sentences: List[str] = []
        for part in text.split("\r"):
            for raw in self.scan(part):
                sentences.extend(self.post_process(raw))
        return [s for s in sentences if s and len(s) >= self.min_length]

    def scan(self, segment: str) -> List[str]:
        """Boundary-pattern matches of one hard-break segment, markers still in place."""
        segment = segment.rstrip().replace("\n", NEWLINE)
        if not segment:
            return []
        segment = self.mask_punctuation(segment)
        if segment[-1] not in TERMINATORS:
            segment += TEMPORARY_END
        return SENTENCE_BOUNDARY_RE.findall(segment)

    @staticmethod
    def mask_punctuation(segment: str) -> str:
        segment = EXCLAMATION_WORDS_RE.sub(lambda m: m.group(0).replace("!", EXCLAMATION), segment)
        segment = CONTINUOUS_PUNCTUATION_RE.sub(_mask_continuous, segment)
        segment = DOUBLE_PUNCTUATION_RULES.transform(segment)
        return MID_SENTENCE_PUNCTUATION_RULES.transform(segment)

    @staticmethod
    def post_process(raw: str) -> List[str]:
        sentence = restore(raw).strip()
        if not sentence:
            return []
        if QUOTATION_AT_END_OF_SENTENCE_RE.search(sentence):
            parts = SPLIT_SPACE_QUOTATION_AT_END_OF_SENTENCE_RE.split(sentence)
            return [p.strip() for p in parts if p.strip()]
        return [sentence]
