#!/usr/bin/env python3
"""
Startup Idea Generator - command-line entry point.

Runs the JSON API server, or generates a single idea from the terminal:
  - Serve the /api endpoints with an in-memory idea store
  - Generate one idea for a topic and print it as JSON
  - Print the effective configuration

Usage:
    python main.py                         # Run the API server
    python main.py --port 8080             # Run on another port
    python main.py --generate "pets"       # Generate one idea and exit
    python main.py --show-config           # Show configuration and exit

Examples:
    # Local development with debug logging
    python main.py --verbose

    # Try the generator without starting the server
    python main.py --generate "fitness in Tokyo"
"""

import argparse
import json
import logging
import sys

from ideagen.config import (
    DEBUG,
    HOST,
    PORT,
    is_production,
    print_config_summary,
    validate_config,
)
from ideagen.exceptions import GenerationError
from ideagen.services.idea_generator import IdeaGenerator


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="idea-generator",
        description="Generate startup ideas and serve the saved-ideas API.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                             Run the API server with defaults
  %(prog)s --host 127.0.0.1 -p 8080    Bind to localhost on port 8080
  %(prog)s --generate "pets"           Generate one idea and print it
  %(prog)s --show-config               Show configuration and exit
        """,
    )

    # Server options
    parser.add_argument(
        "--host",
        default=None,
        help=f"Bind address (default: {HOST})",
    )

    parser.add_argument(
        "--port", "-p",
        type=int,
        default=None,
        metavar="N",
        help=f"Listen port (default: {PORT})",
    )

    # One-shot generation
    parser.add_argument(
        "--generate", "-g",
        metavar="TOPIC",
        help="Generate a single idea for TOPIC, print it as JSON, and exit",
    )

    # Output options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )

    # Info options
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Show current configuration and exit",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 1.0.0",
    )

    return parser


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging for the process."""
    logging.basicConfig(
        level=logging.DEBUG if (verbose or DEBUG) else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def show_config() -> bool:
    """Display current configuration. Returns True when it is valid."""
    print("=" * 60)
    print("Startup Idea Generator Configuration")
    print("=" * 60)
    print_config_summary()

    errors = validate_config()
    if errors:
        print("\nConfiguration problems:")
        for error in errors:
            print(f"  ⚠️  {error}")
    else:
        print("\n✓ Configuration valid")
    print("=" * 60)
    return not errors


def generate_once(topic: str, generator: IdeaGenerator = None) -> int:
    """Generate one idea and print it as JSON. Returns an exit code."""
    if not topic or not topic.strip():
        print("❌ Topic is required")
        return 1

    generator = generator or IdeaGenerator()

    try:
        draft = generator.generate(topic)
    except GenerationError as e:
        print(f"❌ {e.message}")
        return 1

    print(json.dumps(draft.to_dict(), indent=2))
    return 0


def main(argv: list = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).

    Returns:
        Exit code (0 = success, 1 = error).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    # Handle --show-config
    if args.show_config:
        return 0 if show_config() else 1

    if args.generate is not None:
        return generate_once(args.generate)

    errors = validate_config()
    if errors and is_production():
        print("❌ Refusing to start with invalid configuration:")
        for error in errors:
            print(f"  - {error}")
        return 1

    # Imported here so --generate and --show-config do not need Flask
    from web.app import serve

    try:
        serve(host=args.host, port=args.port)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
