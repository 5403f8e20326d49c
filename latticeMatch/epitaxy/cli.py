"""Command-line lattice match calculator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from latticeMatch.circular.ordering import ConfigurationError, SortMode
from latticeMatch.epitaxy.matcher import LatticeMatcher
from latticeMatch.epitaxy.model import PARAMETER_NAMES, sanitize_parameters
from latticeMatch.epitaxy.report import export_csv, format_report, plot_ranges
from latticeMatch.epitaxy.utils import configure_logging, load_lattice_match_config

DEFAULT_CONFIG_PATH = Path("configs/lattice_match_config.yml")


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Returns:
        ArgumentParser instance.
    """

    parser = argparse.ArgumentParser(
        description=(
            "Determine rotation ranges of an adlayer on a substrate that allow a "
            "coincident or commensurate lattice match. Please input angles in degrees."
        )
    )
    for name in PARAMETER_NAMES:
        parser.add_argument(name, type=float, help=f"{name} (lengths or degrees)")
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help="Path to lattice match config.",
    )
    parser.add_argument(
        "--sort",
        choices=[mode.value for mode in SortMode],
        default=None,
        help="Order of the reported ranges (overrides the config).",
    )
    parser.add_argument(
        "--csv-dir",
        type=Path,
        default=None,
        help="Directory for CSV exports of the result ranges.",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        default=None,
        help="Path for a polar PNG plot of the result ranges.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Run the lattice match calculator."""

    args = build_arg_parser().parse_args(argv)
    try:
        config, config_missing = load_lattice_match_config(args.config)
    except ConfigurationError as exc:
        raise SystemExit(f"Error: {exc}") from exc
    configure_logging(args.debug, config["logging"])
    logger = logging.getLogger(__name__)
    if config_missing:
        logger.warning("Config file %s not found; using defaults.", args.config)
    values = [getattr(args, name) for name in PARAMETER_NAMES]
    try:
        params = sanitize_parameters(values, logger)
        matcher = LatticeMatcher(params, args.sort or config.get("sort_mode"), logger)
    except (ConfigurationError, ValueError) as exc:
        raise SystemExit(f"Error: {exc}") from exc
    result = matcher.run()
    precision = int(config["report"].get("precision", 6))
    sys.stdout.write(format_report(result, precision))
    if args.csv_dir:
        export_csv(result, args.csv_dir, logger)
    if args.plot:
        plot_ranges(result, args.plot, logger)


if __name__ == "__main__":
    main()
