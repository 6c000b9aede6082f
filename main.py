#!/usr/bin/env python3
"""
Infinite Paper demo - Main entry point
"""
import argparse
import logging
import sys
from pathlib import Path

from infinite_paper.config import load_config
from infinite_paper.errors import ConfigError
from infinite_paper.ui.app import PaperApp

logger = logging.getLogger("infinite_paper.main")


def setup_logging_config(log_level_str: str, log_file_path: Path):
    # The terminal belongs to the TUI, so logs only go to a file
    numeric_log_level = getattr(logging, log_level_str.upper(), logging.INFO)
    log_file_path.parent.mkdir(parents=True, exist_ok=True)
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(
        level=numeric_log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.FileHandler(log_file_path, mode='w')]
    )
    logger.info(f"Logging configured. Level: {log_level_str}. File: {log_file_path}")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse a paginated dataset as one endless list.")
    parser.add_argument("--config", type=Path, help="Path to a JSON config file")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    parser.add_argument("--total-items", type=int, help="Number of items in the demo dataset")
    parser.add_argument("--page-size", type=int, help="Items per page")
    parser.add_argument("--window-size", type=int, help="Pages kept in memory")
    parser.add_argument("--latency", type=float, help="Simulated fetch latency in seconds")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    paper = config["paper"]
    if args.page_size is not None:
        paper["page_size"] = args.page_size
    if args.window_size is not None:
        paper["window_size"] = args.window_size
    if args.total_items is not None:
        page_size = max(1, paper["page_size"])
        paper["total_pages"] = (args.total_items + page_size - 1) // page_size
    if args.latency is not None:
        config["demo"]["latency"] = args.latency
    if args.log_level:
        config["logging"]["level"] = args.log_level

    setup_logging_config(config["logging"]["level"], Path(config["logging"]["file"]))
    logger.info("Starting Infinite Paper demo...")

    try:
        app = PaperApp(config)
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    app.run()
    return 0

if __name__ == "__main__":
    sys.exit(main())
