# Copyright (c) 2025
# MIT License
"""argparse entry point: lbnet <Time> <M> <P1..PM> <Lambda> <Q1..QM> <Mu1..MuM>."""

import argparse
import logging
import sys

from lbnet.config import USAGE, ConfigError, cfg_from_args, load_cfg, validate_cfg
from lbnet.metrics import format_station_table, format_summary
from lbnet.simulation import Simulation


def build_parser() -> argparse.ArgumentParser:
    """Build the ArgumentParser."""
    parser = argparse.ArgumentParser(
        prog="lbnet",
        usage=f"%(prog)s [options] {USAGE}",
        description="Discrete-event simulator of a probabilistic load-balancing network",
    )
    parser.add_argument("values", nargs="*", help="positional simulation parameters")
    parser.add_argument("--config", default=None, help="YAML config instead of positional values")
    parser.add_argument("--seed", type=int, default=None, help="fix the random seed")
    parser.add_argument(
        "--stations", action="store_true", help="also print a per-station table"
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="-v info, -vv debug (stderr)"
    )
    return parser


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="[%(levelname)s] %(name)s: %(message)s",
    )


def _load(args: argparse.Namespace) -> dict:
    if args.config is not None:
        if args.values:
            raise ConfigError("give either --config or positional values, not both")
        cfg = load_cfg(args.config)
    else:
        cfg = cfg_from_args(args.values)
    cfg = validate_cfg(cfg)
    if args.seed is not None:
        cfg["sim"]["seed"] = args.seed
    return cfg


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    _setup_logging(args.verbose)

    try:
        cfg = _load(args)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    sim = Simulation(cfg)
    summary = sim.run()
    print(format_summary(summary))
    if args.stations:
        for line in format_station_table(summary):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
