"""Module to run using cli interface.

Example:
    poetry run python scripts/run_cli.py --secrets streaming_assets/secrets.json -v
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from gemini_chat.cli.runner import run_cli
from gemini_chat.core.settings import settings
from gemini_chat.helpers.logging_helpers import add_console_sink, configure_logger


def main() -> None:
    """Main entrypoint for running the CLI."""
    parser = argparse.ArgumentParser(description="CLI runner entrypoint")
    parser.add_argument(
        "--secrets",
        type=Path,
        default=None,
        help="Path to the secrets JSON file holding the apiKey.",
    )
    parser.add_argument(
        "--theme",
        type=str,
        default=None,
        help="Path to a YAML file with a 'theme' mapping of rich styles.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show info logs (-v) or debug (-vv) to console",
    )

    args = parser.parse_args()

    try:
        configure_logger(source="cli")
    except Exception as e:
        logger.warning(f"Failed to configure logger: {e}")

    add_console_sink(args.verbose)
    logger.info("Starting CLI.")

    run_settings = settings
    if args.secrets is not None:
        run_settings = settings.model_copy(update={"secrets_path": args.secrets})

    code = 0
    try:
        run_cli(settings=run_settings, custom_theme_path=args.theme)
    except KeyboardInterrupt:
        logger.info("Received interrupt. Shutting down...")
        code = 130
    except Exception as e:
        logger.exception(f"Exception occurred while running the CLI: {e}")
        print("Error occurred while running the CLI. Stopping. Check logs for details.")
        code = 1
    finally:
        logger.info("CLI exited.")
    sys.exit(code)


if __name__ == "__main__":
    main()
