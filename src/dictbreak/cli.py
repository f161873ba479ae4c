"""Command-line interface for dictbreak configuration and segmentation."""

import argparse
import sys
from pathlib import Path

from dictbreak.config.loader import load_config, ConfigLoadError
from dictbreak.core.util import ConsoleLogger, safe_json
from dictbreak.dictionary.loader import DictionaryLoadError


def validate_config_command(args):
    """Validate a dictbreak configuration file."""
    try:
        config_path = Path(args.config_file)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}")
            return 1

        print(f"Validating config: {config_path}")
        config = load_config(config_path)

        print("✅ Config validation successful!")
        print(f"   Version: {config.version}")
        print(f"   Dictionaries: {len(config.dictionaries)}")
        print(f"   Thresholds: root_combine={config.thresholds.root_combine}, "
              f"prefix_combine={config.thresholds.prefix_combine}, "
              f"min_word={config.thresholds.min_word}")

        if args.verbose:
            print("\nDictionaries:")
            for source in config.dictionaries:
                status = "found" if Path(source.path).exists() else "missing"
                print(f"   {source.script}: {source.path} ({status})")

        return 0

    except ConfigLoadError as e:
        print(f"❌ Config validation failed: {e}")
        return 1


def segment_command(args):
    """Segment Burmese text with the dictionary named in a config file."""
    from dictbreak.runtime.burmese import BurmeseBreakEngine
    from dictbreak.segmenters.word import WordSegmenter

    logger = ConsoleLogger() if args.verbose else None

    try:
        config = load_config(args.config_file)
        engine = BurmeseBreakEngine(config=config, logger=logger)
    except ConfigLoadError as e:
        print(f"❌ Config error: {e}", file=sys.stderr)
        return 1
    except DictionaryLoadError as e:
        print(f"❌ Dictionary error: {e}", file=sys.stderr)
        return 1

    text = args.text if args.text is not None else sys.stdin.read()
    segmenter = WordSegmenter(engine, keep_whitespace=not args.drop_whitespace, logger=logger)

    if args.json:
        print(safe_json(segmenter.boundaries(text.rstrip("\n"))))
        return 0

    for line in text.splitlines():
        print(args.separator.join(segmenter.segment(line)))
    return 0


def info_command(args):
    """Display dictbreak version and system information."""
    print("dictbreak CLI")
    print("=" * 50)

    # Try to get version from package
    try:
        import importlib.metadata
        version = importlib.metadata.version("dictbreak")
        print(f"Version: {version}")
    except importlib.metadata.PackageNotFoundError:
        print("Version: development")

    print(f"Python: {sys.version.split()[0]}")

    print("\nDependencies:")
    for module_name, dist_name in (("numpy", "numpy"), ("pydantic", "pydantic"), ("yaml", "PyYAML")):
        try:
            module = __import__(module_name)
            print(f"   ✅ {dist_name}: {getattr(module, '__version__', 'installed')}")
        except ImportError:
            print(f"   ❌ {dist_name}: not installed")

    import unicodedata
    print(f"\nUnicode data: {unicodedata.unidata_version}")

    return 0


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dictbreak",
        description="Dictionary-based word segmentation for Burmese text"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a dictbreak config file"
    )
    validate_parser.add_argument(
        "config_file",
        help="Path to the config YAML file"
    )
    validate_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show configured dictionaries"
    )

    # Segment command
    segment_parser = subparsers.add_parser(
        "segment",
        help="Segment text into words"
    )
    segment_parser.add_argument(
        "config_file",
        help="Path to the config YAML file"
    )
    segment_parser.add_argument(
        "-t", "--text",
        help="Text to segment (default: read stdin)"
    )
    segment_parser.add_argument(
        "-s", "--separator",
        default="|",
        help="Separator printed between segments (default: '|')"
    )
    segment_parser.add_argument(
        "--json",
        action="store_true",
        help="Print segments and boundaries as JSON"
    )
    segment_parser.add_argument(
        "--drop-whitespace",
        action="store_true",
        help="Leave whitespace-only segments out of the output"
    )
    segment_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log dictionary loading to stderr"
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

    if args.command == "validate":
        return validate_config_command(args)
    elif args.command == "segment":
        return segment_command(args)
    elif args.command == "info":
        return info_command(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
