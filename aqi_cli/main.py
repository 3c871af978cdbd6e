# file: aqi_cli/main.py

import argparse
import logging
import sys
from typing import Callable, List, Optional

from aqi_cli.aqi_api import fetch_air_quality
from aqi_cli.config import AQI_API_URL, get_log_level
from aqi_cli.errors import AqiError
from aqi_cli.models import ApiResponse, Station, StationSummary
from aqi_cli.query import build_url, location_from_flags
from aqi_cli.ui_elements import display_station


def build_parser() -> argparse.ArgumentParser :
    parser = argparse.ArgumentParser(prog = "aqi", description = "Air Quality Index in your terminal.")
    subparsers = parser.add_subparsers(dest = "command", required = True)

    get = subparsers.add_parser(
        "get",
        help = "Get the Air Quality Index",
        description = "Get will fetch the Air Quality Index of a geographical location, "
                      "given by city, by postal code and country, or by latitude and longitude.")
    get.add_argument("-c", "--city", help = "--city=<city name> or -c <city name>")
    get.add_argument("-p", "--postal", help = "--postal=<postal code> or -p <postal code>")
    get.add_argument("-o", "--country", help = "--country=<country name> or -o <country name>")
    get.add_argument("-l", "--latitude", help = "--latitude=<latitude> or -l <latitude>")
    get.add_argument("-g", "--longitude", help = "--longitude=<longitude> or -g <longitude>")
    get.add_argument("--url", default = AQI_API_URL, help = f"Service url (default: {AQI_API_URL})")
    get.set_defaults(handler = get_aqi)
    return parser


def report_stations(response: ApiResponse, view: Optional[Callable[[Station], None]] = None) -> None :
    """Log a summary of each station, then show it; one station at a time, in response order."""
    view = view or display_station
    for station in response.stations :
        logging.info(StationSummary.from_station(station).to_json())
        view(station)


def get_aqi(args: argparse.Namespace) -> None :
    location = location_from_flags(args.city, args.postal, args.country, args.latitude, args.longitude)
    url = build_url(location, args.url)
    response = fetch_air_quality(url)
    report_stations(response)


def main(argv: Optional[List[str]] = None) -> int :
    logging.basicConfig(level = logging.INFO, format = '%(asctime)s - %(levelname)s - %(message)s')
    args = build_parser().parse_args(argv)
    try :
        logging.getLogger().setLevel(get_log_level())
        args.handler(args)
    except AqiError as e :
        logging.error(e)
        return 1
    return 0


if __name__ == "__main__" :
    sys.exit(main())
