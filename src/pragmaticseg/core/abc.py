"""Protocol interfaces for rule packs, language processors and host-injected services."""

from typing import Protocol, List, Any

class RulePack(Protocol):
    """One stage of the protection pipeline (numbers, abbreviations, ellipses, spans)."""

    def transform(self, text: str) -> str:
        """
        Mask the punctuation this stage is responsible for.

        Args:
            text: Text produced by the previous stage

        Returns:
            str: Text with this stage's markers applied
        """
        ...

class LanguageProcessor(Protocol):
    """Language-specific pipeline composed from rule packs and a boundary splitter."""

    def process(self, text: str) -> List[str]:
        """
        Split text into sentences with every marker restored.

        Args:
            text: Raw input text

        Returns:
            List[str]: Sentences in input order
        """
        ...

class Segmenter(Protocol):
    """Anything that can turn text into sentences."""

    def segment(self, text: str) -> List[str]:
        ...

class Logger(Protocol):
    """Optional structured logging interface."""

    def info(self, msg: str, **kv: Any) -> None:
        """Log info level message with optional key-value context."""
        ...

    def warn(self, msg: str, **kv: Any) -> None:
        """Log warning level message with optional key-value context."""
        ...

    def error(self, msg: str, **kv: Any) -> None:
        """Log error level message with optional key-value context."""
        ...

class Meter(Protocol):
    """Optional metrics collection interface."""

    def inc(self, name: str, amount: int = 1, **tags: str) -> None:
        """Increment a counter metric with optional tags."""
        ...

    def observe(self, name: str, value: float, **tags: str) -> None:
        """Record an observation metric with optional tags."""
        ...
