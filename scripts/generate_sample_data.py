#!/usr/bin/env python3
"""Generate sample ATM customers and print them to the console.

Customers are generated with a card and an account, registered in a
strict ``CustomerRegistry`` and dumped as JSON for manual inspection.
PINs are masked unless ``--show-pins`` is given.
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from atm_model.config import AtmModelConfig
from atm_model.exceptions import AtmModelError
from atm_model.generators.banking import CustomerGenerator
from atm_model.logging import setup_logging_from_config
from atm_model.sinks import ConsoleSink
from atm_model.store import CustomerRegistry

logger = logging.getLogger("generate_sample_data")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Generate sample ATM customers and print them as JSON"
    )
    parser.add_argument(
        "--customers",
        type=int,
        default=5,
        help="Number of customers to generate (default: 5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (default: SEED env var)",
    )
    parser.add_argument(
        "--locale",
        type=str,
        default=None,
        help="Faker locale (default: FAKER_LOCALE env var or en_US)",
    )
    parser.add_argument(
        "--show-pins",
        action="store_true",
        help="Print PINs instead of masking them",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Generate, register and print sample customers."""
    args = parse_args(argv)
    config = AtmModelConfig.from_env()
    setup_logging_from_config(config)

    seed = args.seed if args.seed is not None else config.generator.seed
    locale = args.locale or config.generator.locale

    generator = CustomerGenerator(
        seed=seed,
        locale=locale,
        pin_length=config.validation.pin_length,
    )
    registry = CustomerRegistry(
        strict=config.validation.strict,
        pin_length=config.validation.pin_length,
    )

    try:
        for customer in generator.generate_batch(args.customers):
            registry.add_customer(customer)
    except AtmModelError:
        logger.exception("Failed to register generated customers")
        return 1

    logger.info("Registry summary: %s", registry.summary())

    sink = ConsoleSink(
        pretty=config.output.pretty_json,
        max_records=config.output.max_records,
        include_secrets=args.show_pins,
    )
    sink.write_batch("customers", list(registry))
    sink.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
