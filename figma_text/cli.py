"""
Command-line interface for figma-text.

Usage:
    figma-text file.json
    figma-text file.json --output rewritten.json
    figma-text file.json --all --indent 0
    figma-text file.json --config figma_text.json
"""

import argparse
import codecs
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from figma_text import LOG_LEVEL_ENV, LOGGER_NAMESPACE, __version__, get_logger, load_config
from figma_text.exceptions import RichTextError
from figma_text.preprocess import apply_rich_text

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="figma-text",
        description="Replace design-document text node characters with rich-text markup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  figma-text file.json
  figma-text file.json -o rewritten.json
  figma-text file.json --all
        """,
    )
    parser.add_argument("input", help="Design document JSON file")
    parser.add_argument("-o", "--output", help="Output JSON file (default: stdout)")
    parser.add_argument(
        "--all",
        action="store_true",
        help="Rewrite every TEXT node, not only nodes with lists or style overrides",
    )
    parser.add_argument("--config", help="Configuration file (default: figma_text.json)")
    parser.add_argument("--indent", type=int, help="JSON indentation of the output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point; returns the process exit code."""
    args = create_parser().parse_args(argv)

    config = load_config(Path(args.config) if args.config else None)
    if LOG_LEVEL_ENV not in os.environ:
        level = logging.getLevelName(str(config["log_level"]).upper())
        if isinstance(level, int):
            logging.getLogger(LOGGER_NAMESPACE).setLevel(level)
        else:
            logger.warning("Unknown log_level %r in configuration", config["log_level"])
    only_needed = bool(config["only_needed"]) and not args.all
    indent = args.indent if args.indent is not None else config["json_indent"]
    encoding = config["output_encoding"]
    try:
        codecs.lookup(encoding)
    except (LookupError, TypeError):
        logger.error("Unknown output_encoding %r in configuration", encoding)
        return 1

    input_path = Path(args.input)
    try:
        with open(input_path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except OSError as e:
        logger.error("Could not read %s: %s", input_path, e)
        return 1
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in %s at line %d, column %d", input_path, e.lineno, e.colno)
        return 1
    except UnicodeDecodeError as e:
        logger.error("%s is not valid UTF-8: %s", input_path, e)
        return 1

    if not isinstance(document, dict):
        logger.error("%s must contain a JSON object, got %s", input_path, type(document).__name__)
        return 1

    try:
        rewritten = apply_rich_text(document, only_needed=only_needed)
    except RichTextError as e:
        logger.error("Rich text preprocessing failed: %s", e)
        return 1

    payload = json.dumps(document, ensure_ascii=False, indent=indent or None)

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(payload + "\n", encoding=encoding)
        except (OSError, UnicodeEncodeError) as e:
            logger.error("Could not write %s: %s", output_path, e)
            return 1
        logger.info("Wrote %s (%d text node(s) rewritten)", output_path, rewritten)
    else:
        sys.stdout.write(payload + "\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
