"""Rule engine: repeated captured-region substitution."""

import re
from typing import Iterable, List, Tuple
from .types import Rule

class RuleApplicationError(RuntimeError):
    """Raised when a rule keeps matching its own output."""

    def __init__(self, rule: Rule, matches: int):
        self.rule = rule
        self.matches = matches
        super().__init__(
            f"Rule {rule.name!r} still matched after {matches} replacements; "
            f"its replacement {rule.replacement!r} must not recreate the pattern "
            f"{rule.pattern.pattern!r}"
        )

def _target_span(match: re.Match) -> Tuple[int, int]:
    # First participating group, whole match when the pattern has none
    for index in range(1, match.re.groups + 1):
        start, end = match.span(index)
        if start != -1:
            return start, end
    return match.span()

def _replace_pass(rule: Rule, text: str) -> Tuple[str, int]:
    # One left-to-right sweep over the non-overlapping matches
    pieces: List[str] = []
    last = 0
    count = 0
    for match in rule.pattern.finditer(text):
        start, end = _target_span(match)
        pieces.append(text[last:start])
        pieces.append(rule.replacement)
        last = end
        count += 1
    if not count:
        return text, 0
    pieces.append(text[last:])
    return "".join(pieces), count

def apply_rule(rule: Rule, text: str) -> str:
    """
    Replace the captured region of ``rule.pattern`` until it no longer matches.

    Each sweep replaces every non-overlapping match in one left-to-right pass,
    then the result is searched again, so a replacement can still expose a
    new match next to it. Sweeps repeat until nothing matches. A well-formed
    rule makes at most one replacement per character of the input.

    Args:
        rule: Rule to apply
        text: Input text

    Returns:
        str: Text with every match replaced

    Raises:
        RuleApplicationError: If the rule matches more times than the input has characters
    """
    limit = len(text)
    total = 0
    while True:
        text, count = _replace_pass(rule, text)
        if not count:
            return text
        total += count
        if total > limit:
            raise RuleApplicationError(rule, total)

def apply_rules(rules: Iterable[Rule], text: str) -> str:
    """Apply rules one after another."""
    for rule in rules:
        text = apply_rule(rule, text)
    return text

class RuleSet:
    """
    Immutable, ordered collection of rules forming one pipeline stage.
    """

    def __init__(self, name: str, rules: Iterable[Rule]):
        self._name = name
        self._rules = tuple(rules)

    @property
    def name(self) -> str:
        return self._name

    @property
    def rules(self) -> Tuple[Rule, ...]:
        return self._rules

    def extend(self, rules: Iterable[Rule]) -> "RuleSet":
        """Return a new set with ``rules`` appended."""
        return RuleSet(self._name, self._rules + tuple(rules))

    def transform(self, text: str) -> str:
        return apply_rules(self._rules, text)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({self._name!r}, {len(self._rules)} rules)"
