"""Small utility functions."""

import hashlib

def hash_text(text: str) -> str:
    """Create a stable short fingerprint of text for log context."""
    return hashlib.sha256(text.encode('utf-8')).hexdigest()[:16]
