"""Pragmatic sentence segmenter: language selection plus logging around the pipeline."""

from functools import lru_cache
from typing import Dict, Iterable, List, Optional

from ..core.abc import Logger, Meter
from ..core.markers import find_markers
from ..core.rules import RuleApplicationError
from ..core.types import Rule
from ..core.util import hash_text
from ..languages import get_processor, normalize_language

class PragmaticSegmenter:
    """
    Multilingual, rule-based sentence boundary detector.

    Holds no per-call state, so one instance can be shared between threads.
    """

    def __init__(self, language: str = "en", *, min_length: int = 0,
                 abbreviations: Iterable[str] = (),
                 prepositive_abbreviations: Iterable[str] = (),
                 numeric_abbreviations: Iterable[str] = (),
                 extra_rules: Optional[Dict[str, Iterable[Rule]]] = None,
                 logger: Optional[Logger] = None, meter: Optional[Meter] = None):
        """
        Initialize segmenter.

        Args:
            language: Rule pack language id
            min_length: Minimum character length for a returned sentence
            abbreviations: Extra general abbreviations
            prepositive_abbreviations: Extra titles that precede a name
            numeric_abbreviations: Extra abbreviations that precede a number
            extra_rules: Pluggable rules keyed by stage ("numbers", "abbreviations", "ellipsis")
            logger: Optional structured logger
            meter: Optional metrics collector

        Raises:
            UnsupportedLanguageError: If the language has no rule pack
        """
        extra_rules = extra_rules or {}
        self.language = normalize_language(language)
        self.min_length = min_length
        self.processor = get_processor(
            self.language,
            abbreviations=abbreviations,
            prepositive=prepositive_abbreviations,
            numeric=numeric_abbreviations,
            number_rules=extra_rules.get("numbers", ()),
            abbreviation_rules=extra_rules.get("abbreviations", ()),
            ellipsis_rules=extra_rules.get("ellipsis", ()),
            min_length=min_length,
        )
        self.log = logger
        self.meter = meter

    @classmethod
    def from_config(cls, config, *, logger: Optional[Logger] = None,
                    meter: Optional[Meter] = None) -> "PragmaticSegmenter":
        """Build a segmenter from a validated SegmenterConfig."""
        return cls(
            config.language,
            min_length=config.min_length,
            abbreviations=config.abbreviations.extra,
            prepositive_abbreviations=config.abbreviations.prepositive,
            numeric_abbreviations=config.abbreviations.numeric,
            extra_rules=config.rules_by_stage(),
            logger=logger,
            meter=meter,
        )

    def segment(self, text: str) -> List[str]:
        """
        Split text into sentences.

        Args:
            text: Input text to segment

        Returns:
            List[str]: Sentences in input order, punctuation restored

        Raises:
            RuleApplicationError: If a rule keeps matching its own replacement
        """
        if not text or not text.strip():
            return []

        reserved = find_markers(text)
        if reserved and self.log:
            self.log.warn("reserved_marker_in_input",
                          markers=list(reserved), text_hash=hash_text(text))

        try:
            sentences = self.processor.process(text)
        except RuleApplicationError as e:
            if self.log:
                self.log.error("rule_application_failed",
                               rule=e.rule.name, language=self.language, text_hash=hash_text(text))
            raise

        if self.meter:
            self.meter.inc("pragmaticseg.texts", language=self.language)
            self.meter.inc("pragmaticseg.sentences", len(sentences), language=self.language)
            self.meter.observe("pragmaticseg.sentences_per_text", float(len(sentences)),
                               language=self.language)
        if self.log:
            self.log.info("segmented", language=self.language,
                          sentences=len(sentences), text_hash=hash_text(text))

        return sentences

@lru_cache(maxsize=None)
def default_segmenter(language: str = "en") -> PragmaticSegmenter:
    """Shared default segmenter for a normalized language id."""
    return PragmaticSegmenter(language)

def segment(text: str, language: str = "en") -> List[str]:
    """Segment text with a cached default segmenter for the language."""
    return default_segmenter(normalize_language(language)).segment(text)
