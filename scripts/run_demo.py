"""Command-line interface to run the reference monadic pipelines."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys
from typing import Any, Dict, List, Optional, Sequence

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from monadic import config as app_config
from monadic.multivalue import compose_multi, digit_list, first_three_multiples
from monadic.utils.logging import setup_logging
from monadic.writer import add_five, compose_debug, square

logger = logging.getLogger("monadic.demo")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=Path, default=PROJECT_ROOT / "configs" / "defaults.yaml")
    parser.add_argument("--log-level", default=None, help="override the configured log level")
    return parser.parse_args(argv)


def run_pipelines(demo: app_config.DemoConfig) -> List[Dict[str, Any]]:
    """Run both reference pipelines over the configured inputs."""

    records: List[Dict[str, Any]] = []

    debug_pipeline = compose_debug(add_five, square)
    for x in demo.debug_inputs:
        value, message = debug_pipeline(x)
        logger.info("debug %s -> %s (%s)", x, value, message)
        records.append({"pipeline": "debug", "input": x, "output": value, "message": message})

    multi_pipeline = compose_multi(digit_list, first_three_multiples)
    for x in demo.multi_inputs:
        values = multi_pipeline(x)
        logger.info("multi %s -> %s", x, values)
        records.append({"pipeline": "multi", "input": x, "output": values, "message": ""})

    return records


def main(argv: Optional[Sequence[str]] = None) -> List[Dict[str, Any]]:
    args = parse_args(argv)
    config = app_config.load_app_config(args.config)
    if args.log_level is not None:
        config.logging.level = args.log_level

    setup_logging(level=config.logging.level, rich_tracebacks=config.logging.rich_tracebacks)
    return run_pipelines(config.demo)


if __name__ == "__main__":
    main()
