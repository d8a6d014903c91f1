"""Print the grouped trip list to the terminal."""

from __future__ import annotations

import argparse
import sys

from src.config import build_client, load_config
from src.data.trip_client import FixtureTripClient
from src.logging_setup import configure_logging
from src.logic.rides import LoadState, RidesViewModel


def _print_rides(view_model: RidesViewModel) -> None:
    for section in range(view_model.number_of_sections()):
        print(
            f"{view_model.trip_date(section)}  "
            f"{view_model.trip_group_time(section)}  "
            f"{view_model.total_estimated_earnings(section)}"
        )
        for row in range(view_model.number_of_rows(section)):
            print(
                f"  {view_model.trip_time(section, row)} "
                f"{view_model.trip_riders(section, row)}  "
                f"{view_model.estimated_earnings(section, row)}"
            )
            for address in view_model.trip_addresses(section, row):
                print(f"    {address}")


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", default="config/config.yaml", help="Path to config YAML")
    parser.add_argument("--fixture", action="store_true", help="Use the built-in fixture trips")
    args = parser.parse_args()

    config = load_config(args.config)
    configure_logging(config.log)

    client = FixtureTripClient() if args.fixture else build_client(config)
    view_model = RidesViewModel(client, tz=config.display.tz)
    view_model.load_trips()

    if view_model.state is LoadState.FAILED:
        print(view_model.error_message, file=sys.stderr)
        return 1

    _print_rides(view_model)
    return 0


if __name__ == "__main__":
    sys.exit(main())
