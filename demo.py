#!/usr/bin/env python3
"""
pragmaticseg Demo - Shows sentence segmentation on tricky punctuation.
"""

import sys
from pathlib import Path

# Add src to path so we can import pragmaticseg
sys.path.insert(0, str(Path(__file__).parent / "src"))

from pragmaticseg.config.loader import load_config
from pragmaticseg.segmenters.sentence import PragmaticSegmenter

class SimpleLogger:
    """Simple console logger for demo."""

    def info(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"INFO: {msg} {details}")

    def warn(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"WARN: {msg} {details}")

    def error(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"ERROR: {msg} {details}")

SAMPLES = [
    "The value is 3.14 today. It was 2.72 yesterday.",
    'He said, "Stop. Go." Then left.',
    "He arrived at 5 P.M. Then he left.",
    "Wait... Really?",
    "1. First item\n2. Second item",
    "Mr. Smith bought cheapsite.com for 1.5 million dollars, i.e. he paid a lot for it.",
    "Hello!!! Is anyone there?! I'm here (mostly. sort of.) and ready.",
]

def run_demo():
    """Run the segmentation demo."""
    print("✂️  pragmaticseg Demo - Sentence Boundaries")
    print("=" * 50)

    try:
        config_path = Path(__file__).parent / "examples" / "segmenter_config.yaml"
        print(f"📋 Loading config from {config_path.name}...")
        config = load_config(config_path)
        print(f"✅ Loaded config for language '{config.language}' with {len(config.rules)} extra rules")

        segmenter = PragmaticSegmenter.from_config(config, logger=SimpleLogger())

        for i, text in enumerate(SAMPLES, 1):
            print(f"\n{i}. Text: {text!r}")
            for sentence in segmenter.segment(text):
                print(f"   -> {sentence!r}")

        print("\n🎉 Demo completed successfully!")

    except Exception as e:
        print(f"❌ Demo failed: {e}")
        import traceback
        traceback.print_exc()
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(run_demo())
