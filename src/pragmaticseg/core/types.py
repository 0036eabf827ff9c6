"""Data types shared by the rule engine and the protection stages."""

import re
from dataclasses import dataclass
from typing import Tuple, Literal

# "single" spans keep their apostrophes, every other span kind protects them
MatchType = Literal["single", "double"]

# Stages that accept pluggable rules
Stage = Literal["numbers", "abbreviations", "ellipsis"]
STAGES: Tuple[str, ...] = ("numbers", "abbreviations", "ellipsis")

@dataclass(frozen=True)
class Rule:
    """A pattern and the literal text that replaces its captured region."""
    pattern: re.Pattern
    replacement: str
    name: str = ""

    @classmethod
    def compile(cls, pattern: str, replacement: str, name: str = "", flags: int = 0) -> "Rule":
        """Build a rule from a pattern string."""
        return cls(re.compile(pattern, flags), replacement, name or pattern)

    def __repr__(self) -> str:
        return f"Rule({self.name!r}, {self.pattern.pattern!r} -> {self.replacement!r})"
