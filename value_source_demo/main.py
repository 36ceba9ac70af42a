#!/usr/bin/env python3
"""Value source demo - entry point."""

import argparse
import logging
import sys

from value_source_demo.config import load_config
from value_source_demo.simulation import Simulation

log = logging.getLogger("value-source-demo")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Value source demo")
    parser.add_argument("--config", default="config.yaml", help="Config file path")
    parser.add_argument("--verbose", action="store_true", help="Log per-tick detail")
    args = parser.parse_args(argv)

    config = load_config(args.config)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, config.log_level.upper()),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    log.info(f"Config: {args.config} (dt={config.simulation.dt}, end_time={config.simulation.end_time})")

    sim = Simulation(config)
    try:
        sim.run()
    except KeyboardInterrupt:
        log.info("Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
