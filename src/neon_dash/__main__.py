from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .app import run_auto, run_gui, run_headless
from .errors import ConfigError
from .logging_config import configure_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="neon-dash",
        description="Neon Dash - jump over the obstacles",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--gui", action="store_true", help="Force GUI mode (Arcade)")
    mode.add_argument("--headless", action="store_true", help="Force headless mode (autopilot)")
    parser.add_argument("--max-steps", type=int, default=None, help="Stop after N frames")
    parser.add_argument("--tick-rate", type=float, default=60.0, help="Target tick rate (Hz); 0 = unthrottled")
    parser.add_argument("--seed", type=int, default=None, help="Seed for obstacle generation")
    parser.add_argument("--config", type=Path, default=None, help="YAML file with tuning overrides")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    kwargs = dict(max_steps=args.max_steps, tick_rate=args.tick_rate, seed=args.seed, config_path=args.config)
    try:
        if args.gui:
            return run_gui(**kwargs)
        if args.headless:
            return run_headless(**kwargs)
        return run_auto(**kwargs)
    except ConfigError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
