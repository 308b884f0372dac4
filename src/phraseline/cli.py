"""Command-line interface for phraseline segmentation and model management."""

import argparse
import importlib.metadata
import sys
from pathlib import Path

from phraseline.core.features import FEATURE_GROUPS
from phraseline.core.util import ConsoleLogger, hash_table, safe_json
from phraseline.model.loader import load_config, load_model, ModelLoadError
from phraseline.model.registry import ModelRegistry
from phraseline.model.schema import Language, SegmenterConfig, UnsupportedLanguageError
from phraseline.runtime.parser import Parser


def parse_command(args):
    """Segment text and print the chunks."""
    logger = ConsoleLogger() if args.verbose else None
    try:
        config = load_config(args.config) if args.config else SegmenterConfig()

        if args.model:
            parser = Parser(load_model(args.model, logger=logger))
        else:
            language = Language.from_tag(args.lang) if args.lang else config.language
            models_dir = args.models_dir or config.models_dir
            registry = ModelRegistry(models_dir=models_dir, logger=logger)
            parser = registry.create_parser(language)

    except (ModelLoadError, UnsupportedLanguageError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    text = args.text if args.text is not None else sys.stdin.read()
    result = parser.segment(text.strip())

    if args.json:
        print(safe_json(result))
    else:
        delimiter = args.delim if args.delim is not None else config.delimiter
        print(delimiter.join(result.chunks))

    return 0


def validate_model_command(args):
    """Validate a weight table file."""
    model_path = Path(args.model_file)
    if not model_path.exists():
        print(f"Error: Model file not found: {model_path}")
        return 1

    logger = ConsoleLogger(stream=sys.stdout) if args.verbose else None

    try:
        print(f"Validating model: {model_path}")
        table = load_model(model_path, logger=logger)
    except ModelLoadError as e:
        print(f"❌ Model validation failed: {e}")
        return 1

    parser = Parser(table)
    total = sum(w for ngrams in table.values() for w in ngrams.values())

    print("✅ Model validation successful!")
    print(f"   Groups: {len(table)}")
    print(f"   Entries: {sum(len(ngrams) for ngrams in table.values())}")
    print(f"   Total weight: {total}")
    print(f"   Base score: {parser.base_score}")
    print(f"   Fingerprint: {hash_table(table)}")

    if args.verbose:
        print("\nGroups:")
        for group in FEATURE_GROUPS:
            print(f"   {group}: {len(table.get(group, {}))} n-grams")

    return 0


def info_command(args):
    """Display phraseline version and system information."""
    print("phraseline CLI")
    print("=" * 50)

    try:
        version = importlib.metadata.version("phraseline")
        print(f"Version: {version}")
    except importlib.metadata.PackageNotFoundError:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")
    print(f"Languages: {', '.join(Language.tags())}")

    print("\nOptional dependencies:")

    try:
        print(f"   ✅ budoux (bundled models): {importlib.metadata.version('budoux')}")
    except importlib.metadata.PackageNotFoundError:
        print("   ❌ budoux (bundled models): not installed")

    try:
        import langchain_core
        print(f"   ✅ langchain-core: {langchain_core.__version__}")
    except ImportError:
        print("   ❌ langchain-core: not installed")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="phraseline",
        description="Phrase segmentation for Japanese, Chinese and Thai text"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Parse command
    parse_parser = subparsers.add_parser(
        "parse",
        help="Split text into phrase chunks"
    )
    parse_parser.add_argument(
        "text",
        nargs="?",
        help="Text to segment (default: read from stdin)"
    )
    parse_parser.add_argument(
        "-l", "--lang",
        choices=Language.tags(),
        help="Built-in model to use (default: from config, else ja)"
    )
    parse_parser.add_argument(
        "-m", "--model",
        help="Path to a JSON/YAML weight table; overrides --lang"
    )
    parse_parser.add_argument(
        "--models-dir",
        help="Directory holding <tag>.json model files"
    )
    parse_parser.add_argument(
        "-c", "--config",
        help="Path to a YAML config file"
    )
    parse_parser.add_argument(
        "-d", "--delim",
        help="Output delimiter between chunks (default: newline)"
    )
    parse_parser.add_argument(
        "--json",
        action="store_true",
        help="Print chunks and boundaries as JSON"
    )
    parse_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log model loading to stderr"
    )

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a weight table file"
    )
    validate_parser.add_argument(
        "model_file",
        help="Path to the model JSON/YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show per-group counts and validation warnings"
    )

    # Info command
    subparsers.add_parser(
        "info",
        help="Display version and system information"
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "parse":
        return parse_command(args)
    elif args.command == "validate":
        return validate_model_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
