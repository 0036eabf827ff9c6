"""
pragmaticseg - Rule-based sentence boundary detection.

Punctuation that only looks like a sentence terminator is masked with
reserved markers, the unambiguous text is split, and the markers are
restored inside every sentence.
"""

__version__ = "0.1.0"

from .segmenters.sentence import PragmaticSegmenter, segment

__all__ = ["PragmaticSegmenter", "segment", "__version__"]
