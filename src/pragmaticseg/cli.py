"""Command-line interface for pragmaticseg."""

import argparse
import sys
import json
from pathlib import Path

from pragmaticseg.config.loader import load_config, ConfigLoadError
from pragmaticseg.core.rules import RuleApplicationError
from pragmaticseg.languages import UnsupportedLanguageError, supported_languages
from pragmaticseg.segmenters.sentence import PragmaticSegmenter


def _read_input(args):
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def segment_command(args):
    """Split text into sentences, one per line or as JSON."""
    try:
        if args.config:
            config = load_config(args.config)
            if args.language:
                config = config.model_copy(update={"language": args.language})
            segmenter = PragmaticSegmenter.from_config(config)
        else:
            segmenter = PragmaticSegmenter(args.language or "en")

        sentences = segmenter.segment(_read_input(args))

        if args.json:
            print(json.dumps(sentences, ensure_ascii=False, indent=2))
        else:
            for sentence in sentences:
                print(sentence)
        return 0

    except ConfigLoadError as e:
        print(f"❌ Config error: {e}")
        return 1
    except UnsupportedLanguageError as e:
        print(f"❌ {e}")
        return 1
    except RuleApplicationError as e:
        print(f"❌ Rule error: {e}")
        return 1
    except OSError as e:
        print(f"❌ Cannot read input: {e}")
        return 1


def validate_config_command(args):
    """Validate a segmenter config file."""
    config_path = Path(args.config_file)
    if not config_path.exists():
        print(f"Error: Config file not found: {config_path}")
        return 1

    try:
        print(f"Validating config: {config_path}")
        config = load_config(config_path)
        PragmaticSegmenter.from_config(config)
    except ConfigLoadError as e:
        print(f"❌ Config validation failed: {e}")
        return 1
    except UnsupportedLanguageError as e:
        print(f"❌ Config validation failed: {e}")
        return 1

    print("✅ Config validation successful!")
    print(f"   Version: {config.version}")
    print(f"   Language: {config.language}")
    print(f"   Min length: {config.min_length}")
    print(f"   Extra abbreviations: {len(config.abbreviations.extra)}")
    print(f"   Rules: {len(config.rules)}")

    if args.verbose:
        print("\nRules:")
        for rule in config.rules:
            print(f"   {rule.name} [{rule.stage}]: {rule.pattern} -> {rule.replacement}")

    return 0


def info_command(args):
    """Display version and supported languages."""
    print("pragmaticseg CLI")
    print("=" * 50)

    try:
        import importlib.metadata
        version = importlib.metadata.version("pragmaticseg")
        print(f"Version: {version}")
    except importlib.metadata.PackageNotFoundError:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")
    print(f"Languages: {', '.join(supported_languages())}")

    print("\nOptional dependencies:")
    try:
        import langchain_core
        print(f"   ✅ langchain-core: {langchain_core.__version__}")
    except ImportError:
        print("   ❌ langchain-core: not installed")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pragmaticseg",
        description="Rule-based sentence boundary detection"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Segment command
    segment_parser = subparsers.add_parser(
        "segment",
        help="Split text into sentences"
    )
    segment_parser.add_argument(
        "text",
        nargs="?",
        help="Text to segment (default: read stdin)"
    )
    segment_parser.add_argument(
        "-f", "--file",
        help="Read text from a UTF-8 file"
    )
    segment_parser.add_argument(
        "-l", "--language",
        help="Language id (default: en, or the config's language)"
    )
    segment_parser.add_argument(
        "-c", "--config",
        help="Path to a segmenter config YAML file"
    )
    segment_parser.add_argument(
        "--json",
        action="store_true",
        help="Print sentences as a JSON array"
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a segmenter config file"
    )
    validate_parser.add_argument(
        "config_file",
        help="Path to the config YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="List the configured rules"
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and supported languages"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "segment":
        return segment_command(args)
    elif args.command == "validate":
        return validate_config_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
