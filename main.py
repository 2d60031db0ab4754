"""adu-manifest - Extract and validate the update manifest from an update action."""

import argparse
import json
import sys
from pathlib import Path

import httpx

from action import load_action_document
from config import Config
from errors import ManifestError
from extract import get_files, get_update_id
from logging_setup import get_logger, setup_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract and validate the update manifest from an update action",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to config file (default: config.toml)",
    )
    parser.add_argument(
        "-a", "--action",
        type=str,
        default=None,
        help="Override update action path or URL from config",
    )
    parser.add_argument(
        "-t", "--timeout",
        type=float,
        default=None,
        help="HTTP timeout in seconds when fetching the update action",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=None,
        help="Print the extracted manifest as JSON",
    )

    # Logging verbosity (mutually exclusive)
    verbosity_group = parser.add_mutually_exclusive_group()
    verbosity_group.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output (DEBUG level)",
    )
    verbosity_group.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only warnings and errors)",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write logs to file (always DEBUG level)",
    )

    return parser.parse_args()


def main() -> int:
    args = parse_args()

    verbosity = 1 if args.verbose else (-1 if args.quiet else 0)
    setup_logging(verbosity=verbosity, log_file=args.log_file)
    logger = get_logger()

    logger.debug("Loading configuration...")
    config = Config.load(
        config_path=args.config,
        action_override=args.action,
        timeout_override=args.timeout,
        output_json_override=args.json,
    )

    logger.debug("Loading update action from %s", config.action_source)
    try:
        action = load_action_document(config.action_source, timeout=config.request_timeout)
    except (httpx.HTTPError, OSError, ManifestError) as e:
        logger.error("Error loading update action: %s", e)
        return 1

    try:
        update_id = get_update_id(action)
        files = get_files(action)
    except ManifestError as e:
        logger.error("Invalid update manifest: %s", e)
        return 1

    if config.output_json:
        print(json.dumps(
            {
                "updateId": update_id.to_dict(),
                "files": [f.to_dict() for f in files],
            },
            indent=2,
        ))
        return 0

    logger.info("Update: %s", update_id)
    logger.info("Files: %d", len(files))
    for entity in files:
        logger.info(
            "  [%s] %s (%d bytes) %s",
            entity.file_id,
            entity.target_filename,
            entity.declared_size,
            entity.download_uri or "<no download uri>",
        )
        for h in entity.hashes:
            logger.debug("    %s: %s", h.type, h.value)
        if entity.arguments is not None:
            logger.debug("    arguments: %s", entity.arguments)

    return 0


if __name__ == "__main__":
    sys.exit(main())
