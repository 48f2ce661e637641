"""
Bowling - Console scoring for variant bowling games

Entry point for the application.
"""

import argparse
import sys

from config import init_config, APP_NAME, APP_VERSION, LOG_SETTINGS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description="Score a bowling game interactively.")
    parser.add_argument(
        "--log-level",
        default=LOG_SETTINGS.default_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Log level for messages written to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser


def main(argv=None) -> int:
    """Main entry point for the bowling console."""
    args = build_parser().parse_args(argv)

    # Initialize configuration and logging
    init_config(args.log_level)

    from app import BowlingApp
    return BowlingApp(sys.stdin, sys.stdout).run()


if __name__ == "__main__":
    sys.exit(main())
