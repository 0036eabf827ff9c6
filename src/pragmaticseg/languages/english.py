"""English rule pack."""

from typing import Iterable, List, Tuple

from ..core.abc import RulePack
from ..core.rules import RuleSet
from ..core.types import Rule
from ..rules.abbreviations import (
    AbbreviationReplacer, ENGLISH_ABBREVIATIONS, PREPOSITIVE_ABBREVIATIONS, NUMBER_ABBREVIATIONS,
)
from ..rules.ellipsis import ELLIPSIS_RULES
from ..rules.numbers import NUMBER_RULES
from ..rules.punctuation import BetweenPunctuation
from ..segmenters.boundary import BoundarySplitter

class EnglishProcessor:
    """
    Protection pipeline and boundary splitter for English text.

    Stages run in a fixed order: numbers, abbreviations, ellipses, quoted
    and bracketed spans. Extra rules are appended to the stage they name.
    """

    language = "en"

    def __init__(self, *, abbreviations: Iterable[str] = (),
                 prepositive: Iterable[str] = (),
                 numeric: Iterable[str] = (),
                 number_rules: Iterable[Rule] = (),
                 abbreviation_rules: Iterable[Rule] = (),
                 ellipsis_rules: Iterable[Rule] = (),
                 min_length: int = 0):
        self.numbers = NUMBER_RULES.extend(number_rules)
        self.abbreviations = AbbreviationReplacer(
            abbreviations=ENGLISH_ABBREVIATIONS | frozenset(abbreviations),
            prepositive=PREPOSITIVE_ABBREVIATIONS | frozenset(prepositive),
            numeric=NUMBER_ABBREVIATIONS | frozenset(numeric),
            extra_rules=abbreviation_rules,
        )
        self.ellipses: RuleSet = ELLIPSIS_RULES.extend(ellipsis_rules)
        self.between_punctuation = BetweenPunctuation()
        self.splitter = BoundarySplitter(min_length=min_length)

    @property
    def stages(self) -> Tuple[RulePack, ...]:
        return (self.numbers, self.abbreviations, self.ellipses, self.between_punctuation)

    def protect(self, text: str) -> str:
        """Apply every protection stage, leaving markers in place."""
        for stage in self.stages:
            text = stage.transform(text)
        return text

    def process(self, text: str) -> List[str]:
        return self.splitter.split(self.protect(text))
