"""Pydantic schemas for YAML segmenter configuration."""

import re
from pydantic import BaseModel, Field
from typing import Dict, List, Literal, Tuple

from ..core.types import Rule, STAGES

class RuleCfg(BaseModel):
    """A pluggable protection rule."""
    name: str = Field(description="Unique rule name, used in error messages")
    stage: Literal["numbers", "abbreviations", "ellipsis"] = Field(
        default="abbreviations", description="Stage the rule is appended to")
    pattern: str = Field(description="Regex; its first capturing group is replaced")
    replacement: str = Field(default="∯", description="Literal text for the captured region")
    ignore_case: bool = Field(default=False)

    class Config:
        extra = "forbid"  # Strict validation

    def compile(self) -> Rule:
        flags = re.IGNORECASE if self.ignore_case else 0
        return Rule.compile(self.pattern, self.replacement, name=self.name, flags=flags)

class AbbreviationCfg(BaseModel):
    """Abbreviations added to the language's built-in lists."""
    extra: List[str] = Field(default_factory=list,
                             description="Masked when the next word cannot start a sentence")
    prepositive: List[str] = Field(default_factory=list,
                                   description="Titles before a name, always masked")
    numeric: List[str] = Field(default_factory=list,
                               description="Masked before a number")

    class Config:
        extra = "forbid"

class SegmenterConfig(BaseModel):
    """Complete segmenter configuration."""
    version: int = Field(default=1, description="Config schema version")
    language: str = Field(default="en", description="Rule pack language id")
    min_length: int = Field(default=0, ge=0, description="Drop sentences shorter than this")
    abbreviations: AbbreviationCfg = Field(default_factory=AbbreviationCfg)
    rules: List[RuleCfg] = Field(default_factory=list)

    class Config:
        extra = "forbid"  # Strict validation

    def validate_rules(self) -> List[str]:
        """Validate pluggable rules and return any issues."""
        issues = []

        names = [r.name for r in self.rules]
        duplicates = sorted(set(x for x in names if names.count(x) > 1))
        if duplicates:
            issues.append(f"Duplicate rule names: {duplicates}")

        for rule in self.rules:
            try:
                compiled = re.compile(rule.pattern)
            except re.error as e:
                issues.append(f"Rule '{rule.name}' has an invalid pattern: {e}")
                continue
            if compiled.groups > 1:
                issues.append(f"Rule '{rule.name}' has {compiled.groups} capturing groups, expected at most 1")
            if not rule.replacement:
                issues.append(f"Rule '{rule.name}' has an empty replacement")

        return issues

    def rules_by_stage(self) -> Dict[str, Tuple[Rule, ...]]:
        """Compiled rules grouped by stage, in declaration order."""
        grouped: Dict[str, List[Rule]] = {stage: [] for stage in STAGES}
        for rule in self.rules:
            grouped[rule.stage].append(rule.compile())
        return {stage: tuple(rules) for stage, rules in grouped.items()}
