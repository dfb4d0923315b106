"""
godecl Command Line

Usage:
    godecl FILE [--debug] [--log-file PATH] [--config PATH] [--output PATH]

Writes the JSON array of FILE's top-level declarations to stdout (or
--output). Exit status is 0 on success and 1 on any fatal error; argparse
usage errors exit 2.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from godecl.configs import get_full_config, get_logger, setup_logging
from godecl.engine import render_path
from godecl.exceptions import ConfigurationError, GodeclError, SourceError, TranslationError
from godecl.version import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="godecl",
        description="Create JSON with declarations from a Go source file.",
    )
    parser.add_argument("source", help="Go source file")
    parser.add_argument(
        "-o",
        "--output",
        help="Write JSON to this file instead of stdout",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Enable debug logging (also GODECL_DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log records to this file (also GODECL_LOG_FILE)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML config file (default: ~/.godecl/config.yaml, or GODECL_CONFIG)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    args = build_parser().parse_args(argv)

    try:
        config = get_full_config(
            config_path=args.config,
            overrides={"debug": args.debug, "log_file": args.log_file},
        )
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(debug=config["debug"], log_file=config["log_file"])
    logger = get_logger("cli")

    try:
        document = render_path(args.source)
    except TranslationError as e:
        logger.error(f"Translation failed: {e}")
        return 1
    except SourceError as e:
        logger.error(str(e))
        return 1
    except GodeclError as e:
        logger.error(f"Unexpected error: {e}")
        return 1

    if args.output:
        try:
            Path(args.output).write_text(document, encoding="utf-8")
        except OSError as e:
            logger.error(f"Could not write {args.output}: {e}")
            return 1
        logger.info(f"Wrote {args.output}")
    else:
        sys.stdout.write(document)

    return 0


def run() -> None:
    """Console-script wrapper."""
    sys.exit(main())


if __name__ == "__main__":
    run()
