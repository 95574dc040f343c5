#!/usr/bin/env python3
"""Compute sample payment schedules.

Computes the reference scenario (or a batch of random requests) and prints
the schedules to the console or writes them as JSON files.

Examples::

    python scripts/generate_sample_schedule.py
    python scripts/generate_sample_schedule.py --random 5 --seed 42 --output json
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from credit_schedule.config import CreditScheduleConfig
from credit_schedule.exceptions import CreditScheduleError
from credit_schedule.generators import ScheduleRequestGenerator, sample_schedule_request
from credit_schedule.logging import setup_logging
from credit_schedule.services import CreditService
from credit_schedule.sinks import ConsoleSink, JsonFileSink

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Compute sample payment schedules")
    parser.add_argument(
        "--random",
        type=int,
        default=0,
        help="Number of random requests to compute instead of the reference scenario",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: SEED env)")
    parser.add_argument("--cok", type=float, default=15.0, help="Annual COK for the reference scenario")
    parser.add_argument(
        "--output",
        choices=["console", "json"],
        default="console",
        help="Where to send the schedules (default: console)",
    )
    parser.add_argument(
        "--max-periods",
        type=int,
        default=12,
        help="Periods to print per schedule on the console (default: 12, 0 for all)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the script."""
    args = parse_args(argv)
    config = CreditScheduleConfig.from_env()
    setup_logging(level=config.log_level, format_type=config.log_format)

    seed = args.seed if args.seed is not None else config.seed
    service = CreditService(config=config)

    if args.random > 0:
        generator = ScheduleRequestGenerator(seed=seed)
        requests = {f"request_{i + 1:03d}": r for i, r in enumerate(generator.generate_batch(args.random))}
    else:
        requests = {"reference": sample_schedule_request(cok_rate=args.cok)}

    if args.output == "json":
        sink = JsonFileSink(config.output.json_output_dir, pretty=config.output.pretty_json)
    else:
        sink = ConsoleSink(max_periods=args.max_periods or None)

    failures = 0
    for name, request in requests.items():
        try:
            result = service.compute_schedule(request)
        except CreditScheduleError as e:
            logger.error("Schedule %s failed: %s", name, e)
            failures += 1
            continue
        sink.write_schedule(name, result)

    sink.close()
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
