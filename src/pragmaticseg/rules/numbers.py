"""Periods that belong to decimal numbers and numbered list markers."""

from ..core.markers import PERIOD
from ..core.rules import RuleSet
from ..core.types import Rule

# 3.14 and .5
PERIOD_BEFORE_NUMBER_RULE = Rule.compile(
    r"(\.)\d", PERIOD, name="period_before_number")

# 1.a, 2.b
NUMBER_AFTER_PERIOD_BEFORE_LETTER_RULE = Rule.compile(
    r"\d(\.)\S", PERIOD, name="number_after_period_before_letter")

# "\n1. Item"
NEWLINE_NUMBER_PERIOD_SPACE_LETTER_RULE = Rule.compile(
    r"[\n\r]\d(\.)(?:[\s\S]|\))", PERIOD, name="newline_number_period")

START_LINE_NUMBER_PERIOD_RULE = Rule.compile(
    r"^\d(\.)(?:[\s\S]|\))", PERIOD, name="start_line_number_period")

START_LINE_TWO_DIGIT_NUMBER_PERIOD_RULE = Rule.compile(
    r"^\d\d(\.)(?:[\s\S]|\))", PERIOD, name="start_line_two_digit_number_period")

NUMBER_RULES = RuleSet("numbers", (
    PERIOD_BEFORE_NUMBER_RULE,
    NUMBER_AFTER_PERIOD_BEFORE_LETTER_RULE,
    NEWLINE_NUMBER_PERIOD_SPACE_LETTER_RULE,
    START_LINE_NUMBER_PERIOD_RULE,
    START_LINE_TWO_DIGIT_NUMBER_PERIOD_RULE,
))
