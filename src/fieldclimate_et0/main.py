"""
Main entry point for the FieldClimate ET0 proxy.

Runs one client action from the command line and prints the JSON payload.
"""

import json
import sys
from datetime import datetime
from typing import Dict, Any, List, Optional, Tuple

from .core import Config, setup_logger
from .services import ActionHandler


STATIONLESS_ACTIONS = ("testConnection", "getUserInfo", "getStations")


class FieldClimateET0App:
    """Command-line front end over the action handler."""

    def __init__(self, config_file: Optional[str] = None, log_level: Optional[str] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
            log_level: Logging level (LOG_LEVEL env var or INFO when None)
        """
        self.config = Config(config_file)

        self.logger = setup_logger(
            log_level=log_level,
            secrets=(self.config.public_key, self.config.private_key)
        )
        self.logger.info("=" * 60)
        self.logger.info("FieldClimate ET0 Proxy")
        self.logger.info("=" * 60)
        self.logger.info(f"Configuration: {self.config}")

        self.handler = ActionHandler(self.config, logger=self.logger)

    def run(self, body: Dict[str, Any]) -> Tuple[int, Dict[str, Any]]:
        """
        Execute one action.

        Args:
            body: Request body as a client would send it

        Returns:
            (status, payload)
        """
        if body.get("action") not in STATIONLESS_ACTIONS:
            body.setdefault("stationId", self.config.default_station_id)

        status, payload = self.handler.handle(body)
        self.logger.info(f"Action {body.get('action')} finished with status {status}")
        return status, payload


def build_body(args) -> Dict[str, Any]:
    """Translate parsed CLI arguments into a request body."""
    body: Dict[str, Any] = {"action": args.action}
    if args.station_id:
        body["stationId"] = args.station_id
    if args.hours_back is not None:
        body["hoursBack"] = args.hours_back
    if args.days_back is not None:
        body["daysBack"] = args.days_back
    if args.date:
        body["date"] = args.date
    return body


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="FieldClimate ET0 Proxy"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--action",
        type=str,
        default="calculateET0",
        choices=ActionHandler.ACTIONS,
        help="Action to run. Default: calculateET0"
    )
    parser.add_argument(
        "--station-id",
        type=str,
        default=None,
        help="FieldClimate station identifier. Default: stations.default_id"
    )
    parser.add_argument(
        "--hours-back",
        type=float,
        default=None,
        help="Hours of readings to aggregate. Default: processing.hours_back"
    )
    parser.add_argument(
        "--days-back",
        type=int,
        default=None,
        help="Days of readings for calculateHistoricalET0. Default: 7"
    )
    parser.add_argument(
        "--date",
        type=str,
        default=None,
        help="Date label for calculateET0 (YYYY-MM-DD). Default: today"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level. Default: LOG_LEVEL env var or INFO"
    )

    args = parser.parse_args(argv)

    if args.date:
        try:
            datetime.strptime(args.date, "%Y-%m-%d")
        except ValueError:
            print(f"Invalid date format: {args.date}. Use YYYY-MM-DD")
            sys.exit(1)

    try:
        app = FieldClimateET0App(config_file=args.config, log_level=args.log_level)
        status, payload = app.run(build_body(args))
    except Exception as e:
        print(f"Application failed: {e}")
        sys.exit(1)

    print(json.dumps(payload, ensure_ascii=False, indent=2))
    if status != 200:
        sys.exit(1)


if __name__ == "__main__":
    main()
