"""
Command line interface for txflow.

The ``export`` subcommand reads a saved snapshot of the Achieva
transaction page (the HTML the browser rendered after every panel the
user cared about was expanded), extracts the transactions and writes
the CSV into an output directory.  The filename carries the run time
and the earliest/latest transaction dates, e.g.
``achieva_full_2025-03-15_201314_2020-06-02_to_2025-03-13.csv``.

Settings can come from a YAML file (``--config``); flags given on the
command line take precedence.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from typing import List

from .config import LOG_LEVELS, load_config
from .errors import TxflowError
from .export.pipeline import run_export
from .export.write_csv import DirectorySaver

logger = logging.getLogger("txflow.cli")


def cmd_export(args: argparse.Namespace) -> int:
    """Export transactions from an HTML snapshot to CSV."""
    try:
        cfg = load_config(args.config)
        with open(args.html, "r", encoding="utf-8") as f:
            html = f.read()
    except (TxflowError, OSError) as exc:
        logger.error("%s", exc)
        return 1
    if args.log_level is None:
        logging.getLogger().setLevel(cfg.log_level)
    out_dir = args.out_dir or cfg.out_dir
    strip = cfg.strip_images if args.strip_images is None else args.strip_images
    saver = DirectorySaver(out_dir)
    try:
        result = run_export(
            html,
            now=datetime.now(),
            saver=saver,
            selectors=cfg.selectors,
            strip_images=strip,
        )
    except OSError as exc:
        logger.error("Could not write CSV to %s: %s", out_dir, exc)
        return 1
    if args.echo:
        sys.stdout.write(result.payload)
    return 0


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="txflow", description="Achieva transaction exporter")
    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    export_cmd = subparsers.add_parser("export", help="Export transactions from a saved HTML page")
    export_cmd.add_argument("--html", required=True, help="Path to the saved transaction page")
    export_cmd.add_argument("--out-dir", dest="out_dir", default=None, help="Directory for the CSV")
    export_cmd.add_argument("--config", default=None, help="Optional YAML config file")
    # Image stripping flags: --strip-images (config default) and --no-strip-images
    img_group = export_cmd.add_mutually_exclusive_group()
    img_group.add_argument(
        "--strip-images",
        dest="strip_images",
        action="store_true",
        default=None,
        help="Remove <img> elements from the grid before extraction (default)",
    )
    img_group.add_argument(
        "--no-strip-images",
        dest="strip_images",
        action="store_false",
        help="Leave images in place",
    )
    export_cmd.add_argument("--echo", action="store_true", help="Also print the CSV to stdout")
    export_cmd.set_defaults(func=cmd_export)

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level or "INFO", format="[%(levelname)s] %(message)s")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
