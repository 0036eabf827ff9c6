"""Ellipses, with separate markers for the ones that end a sentence."""

from ..core.markers import (
    ELLIPSIS, ELLIPSIS_BEFORE_CAPITAL, ELLIPSIS_FOUR_BEFORE_CAPITAL,
    ELLIPSIS_SPACED, ELLIPSIS_SPACED_FOUR, ELLIPSIS_SPACED_BEFORE_CAPITAL,
    ELLIPSIS_SPACED_AFTER_WORD,
)
from ..core.rules import RuleSet
from ..core.types import Rule

# "Wait... Really?": the trailing real period ends the sentence
THREE_CONSECUTIVE_RULE = Rule.compile(
    r"(\.\.\.)\s+[A-Z]", ELLIPSIS_BEFORE_CAPITAL + ".", name="three_consecutive")

# Abbreviation period followed by an ellipsis
FOUR_CONSECUTIVE_RULE = Rule.compile(
    r"\S(\.{4})\s[A-Z]", ELLIPSIS_FOUR_BEFORE_CAPITAL + ".", name="four_consecutive")

# Must run before the three-period shapes, which match its tail
FOUR_SPACE_RULE = Rule.compile(
    r"[a-z](\. \. \. \.)(?=\n|\Z)", ELLIPSIS_SPACED_FOUR, name="four_space")

# "Wait. . . Really?"
THREE_SPACE_BEFORE_CAPITAL_RULE = Rule.compile(
    r"[a-z](\. \. \.)\s+[A-Z]", ELLIPSIS_SPACED_BEFORE_CAPITAL + ".",
    name="three_space_before_capital")

# "I wonder. . ." at line end or before a lowercase word
THREE_SPACE_AFTER_WORD_RULE = Rule.compile(
    r"[a-z](\. \. \.)(?=\s|\Z)", ELLIPSIS_SPACED_AFTER_WORD, name="three_space_after_word")

THREE_SPACE_RULE = Rule.compile(
    r"( \. \. \.)(?=\s|\Z)", ELLIPSIS_SPACED, name="three_space")

OTHER_THREE_PERIOD_RULE = Rule.compile(
    r"(\.\.\.)", ELLIPSIS, name="other_three_period")

ELLIPSIS_RULES = RuleSet("ellipsis", (
    THREE_CONSECUTIVE_RULE,
    FOUR_CONSECUTIVE_RULE,
    FOUR_SPACE_RULE,
    THREE_SPACE_BEFORE_CAPITAL_RULE,
    THREE_SPACE_AFTER_WORD_RULE,
    THREE_SPACE_RULE,
    OTHER_THREE_PERIOD_RULE,
))
