#!/usr/bin/env python3


import argparse
import logging
import os
import sys

from seqlab.config import load_config
from seqlab.experiments.runner import ExperimentRunner
from seqlab.experiments.suite import run_suite
from seqlab.pas import PeerActionSequenceEngine, RandomActionSource

logger = logging.getLogger("seqlab")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Peer-action sequence benchmark (config only)")
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to the YAML configuration file",
    )
    args = parser.parse_args(argv)

    if not os.path.isfile(args.config):
        raise FileNotFoundError(f"Config file not found: {args.config}")
    config = load_config(args.config)

    logging.basicConfig(
        level=getattr(logging, str(config.log_level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    runner = ExperimentRunner(
        engine=PeerActionSequenceEngine(),
        action_source=RandomActionSource(),
        config=config,
    )
    try:
        written = run_suite(runner)
    except OSError as e:
        logger.critical("Failed to write benchmark results: %s", e)
        return 1
    for name, path in written.items():
        logger.info("%s -> %s", name, path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
