"""Periods that belong to abbreviations, initials and times of day."""

import re
from typing import Iterable, List, Optional, Tuple

from ..core.markers import PERIOD
from ..core.rules import RuleSet, apply_rules
from ..core.types import Rule

# Corp.'s
POSSESSIVE_ABBREVIATION_RULE = Rule.compile(
    r"(\.)'s(?:\s|$)", PERIOD, name="possessive_abbreviation")

# Co. KG
KOMMANDITGESELLSCHAFT_RULE = Rule.compile(
    r"Co(\.)\sKG", PERIOD, name="kommanditgesellschaft")

SINGLE_UPPERCASE_LETTER_AT_START_OF_LINE_RULE = Rule.compile(
    r"^[A-Z](\.)\s", PERIOD, name="single_uppercase_letter_at_start_of_line", flags=re.MULTILINE)

SINGLE_UPPERCASE_LETTER_RULE = Rule.compile(
    r"\s[A-Z](\.)\s", PERIOD, name="single_uppercase_letter")

SINGLE_LETTER_RULES = (
    SINGLE_UPPERCASE_LETTER_AT_START_OF_LINE_RULE,
    SINGLE_UPPERCASE_LETTER_RULE,
)

# A capitalized word after "P.M." most likely starts a new sentence
UPPER_CASE_PM_RULE = Rule.compile(r"P∯M(∯)\s[A-Z]", ".", name="upper_case_pm")
UPPER_CASE_AM_RULE = Rule.compile(r"A∯M(∯)\s[A-Z]", ".", name="upper_case_am")
LOWER_CASE_PM_RULE = Rule.compile(r"p∯m(∯)\s[A-Z]", ".", name="lower_case_pm")
LOWER_CASE_AM_RULE = Rule.compile(r"a∯m(∯)\s[A-Z]", ".", name="lower_case_am")

AM_PM_RULES = (
    UPPER_CASE_PM_RULE,
    UPPER_CASE_AM_RULE,
    LOWER_CASE_PM_RULE,
    LOWER_CASE_AM_RULE,
)

SENTENCE_STARTERS = (
    "A", "Being", "Did", "For", "He", "How", "However", "I", "In", "It",
    "Millions", "More", "She", "That", "The", "There", "They", "We", "What",
    "When", "Where", "Who", "Why",
)

ABBREVIATION_AS_SENTENCE_BOUNDARY_RULE = Rule.compile(
    r"(?<![\w∯])(?:U∯S∯A|U∯S|U∯K|E∯U|I∯V|i∯v|I)(∯)(?=\s(?:%s)\s)" % "|".join(SENTENCE_STARTERS),
    ".", name="abbreviation_as_sentence_boundary")

# john.doe@example.com, www.example.org
WITH_MULTIPLE_PERIODS_AND_EMAIL_RULE = Rule.compile(
    r"\w(\.)\w", PERIOD, name="with_multiple_periods_and_email")

# 40°. 5
GEO_LOCATION_RULE = Rule.compile(
    r"[a-zA-Z]°(\.)\s*\d", PERIOD, name="geo_location")

FILE_FORMAT_RULE = Rule.compile(
    r"\s(\.)(?:jpe?g|png|gif|tiff?|pdf|ps|docx?|xlsx?|svg|bmp|tga|exif|odt|html?"
    r"|txt|rtf|bat|sxw|xml|zip|exe|msi|blend|wmv|mp[34]|pptx?|flac|rb|cpp|cs|js)\s",
    PERIOD, name="file_format")

TRAILING_RULES = (
    ABBREVIATION_AS_SENTENCE_BOUNDARY_RULE,
    WITH_MULTIPLE_PERIODS_AND_EMAIL_RULE,
    GEO_LOCATION_RULE,
    FILE_FORMAT_RULE,
)

# e.g. i.e. U.S. P.M.
MULTI_PERIOD_ABBREVIATION_RE = re.compile(r"\b[a-z](?:\.[a-z])+[.]", re.IGNORECASE)

# Titles that precede a name and never end a sentence
PREPOSITIVE_ABBREVIATIONS = frozenset({
    "adm", "attys", "brig", "capt", "cmdr", "col", "cpl", "det", "dr", "gen",
    "gov", "ing", "lt", "maj", "messrs", "mr", "mrs", "ms", "mssrs", "mt",
    "ph", "prof", "rep", "reps", "rev", "sen", "sens", "sgt", "st", "supt",
    "v", "vs",
})

# Abbreviations followed by a number: No. 5, pp. 12
NUMBER_ABBREVIATIONS = frozenset({"art", "ext", "no", "nos", "p", "pp"})

ENGLISH_ABBREVIATIONS = frozenset({
    "al", "approx", "apr", "assn", "aug", "ave", "bldg", "blvd", "ca", "cf",
    "co", "corp", "dec", "dept", "dist", "est", "etc", "feb", "fig", "figs",
    "hr", "hrs", "inc", "jan", "jr", "jul", "jun", "ltd", "mar", "max", "min",
    "misc", "mos", "nov", "oct", "pl", "pres", "rd", "sep", "sept", "sq", "sr",
    "vol", "vols", "wt", "yr", "yrs",
})

def normalize_abbreviations(abbreviations: Iterable[str]) -> frozenset:
    """Lower-case abbreviations and strip surrounding periods and whitespace."""
    return frozenset(
        a.strip().strip(".").lower() for a in abbreviations if a.strip().strip(".")
    )

def _alternation(abbreviations: Iterable[str]) -> str:
    ordered = sorted(abbreviations, key=lambda a: (-len(a), a))
    return "|".join(re.escape(a) for a in ordered)

def build_abbreviation_rules(abbreviations: Iterable[str],
                             prepositive: Iterable[str] = PREPOSITIVE_ABBREVIATIONS,
                             numeric: Iterable[str] = NUMBER_ABBREVIATIONS) -> Tuple[Rule, ...]:
    """
    Build the rules that mask the period after known abbreviations.

    Prepositive titles are always masked, numeric abbreviations only before a
    number, and everything else only when the following token cannot start a
    sentence (lowercase word, digit, opening paren, "I", or punctuation).

    Args:
        abbreviations: General abbreviations, without the trailing period
        prepositive: Titles that precede a name
        numeric: Abbreviations that precede a number

    Returns:
        Tuple[Rule, ...]: Rules in application order
    """
    rules: List[Rule] = []
    prepositive = normalize_abbreviations(prepositive)
    numeric = normalize_abbreviations(numeric)
    general = normalize_abbreviations(abbreviations) - prepositive - numeric

    if prepositive:
        rules.append(Rule.compile(
            r"(?<![\w.∯])(?i:%s)(\.)(?=\s)" % _alternation(prepositive),
            PERIOD, name="prepositive_abbreviation"))
    if numeric:
        rules.append(Rule.compile(
            r"(?<![\w.∯])(?i:%s)(\.)(?=\s?\d)" % _alternation(numeric),
            PERIOD, name="number_abbreviation"))
    if general:
        rules.append(Rule.compile(
            r"(?<![\w.∯])(?i:%s)(\.)(?=[:?\-,]|\s+(?:[a-z\d(]|I\b))" % _alternation(general),
            PERIOD, name="abbreviation"))
    return tuple(rules)

def replace_multi_period_abbreviations(text: str) -> str:
    """Mask every period of dotted abbreviations such as ``e.g.`` and ``U.S.``."""
    return MULTI_PERIOD_ABBREVIATION_RE.sub(lambda m: m.group(0).replace(".", PERIOD), text)

class AbbreviationReplacer:
    """
    Abbreviation and time-of-day stage of the protection pipeline.

    Order: possessives, ``Co. KG``, single-letter initials, known
    abbreviations, dotted abbreviations, AM/PM exceptions, dotted
    abbreviations ending a sentence, e-mail/geo/file-format periods, then any
    extra rules supplied by the caller.
    """

    def __init__(self, abbreviations: Iterable[str] = ENGLISH_ABBREVIATIONS,
                 prepositive: Iterable[str] = PREPOSITIVE_ABBREVIATIONS,
                 numeric: Iterable[str] = NUMBER_ABBREVIATIONS,
                 extra_rules: Optional[Iterable[Rule]] = None):
        self.abbreviations = normalize_abbreviations(abbreviations)
        self.prepositive = normalize_abbreviations(prepositive)
        self.numeric = normalize_abbreviations(numeric)
        self.known_rules = RuleSet("known_abbreviations", build_abbreviation_rules(
            self.abbreviations, self.prepositive, self.numeric))
        self.extra_rules = RuleSet("abbreviations", extra_rules or ())

    def transform(self, text: str) -> str:
        text = apply_rules((POSSESSIVE_ABBREVIATION_RULE, KOMMANDITGESELLSCHAFT_RULE), text)
        text = apply_rules(SINGLE_LETTER_RULES, text)
        text = self.known_rules.transform(text)
        text = replace_multi_period_abbreviations(text)
        text = apply_rules(AM_PM_RULES, text)
        text = apply_rules(TRAILING_RULES, text)
        return self.extra_rules.transform(text)
