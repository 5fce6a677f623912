#!/usr/bin/env python3
"""
Print ESPN scoreboard URLs for a league.

Either every scoreboard of a season, or the current one(s) shifted by an
optional offset (days for date leagues, weeks for football).

Usage:
    python scripts/scoreboard_urls.py nfl --season 2019
    python scripts/scoreboard_urls.py ncb --current --offset 5
    python scripts/scoreboard_urls.py nba --standings 2004
"""

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from espn_scraper.config import settings
from espn_scraper.errors import EspnScraperError
from espn_scraper.leagues import LEAGUES
from espn_scraper.scrape import EspnScraper

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Print ESPN scoreboard URLs")
    parser.add_argument("league", choices=sorted(LEAGUES), help="League code")
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--season", type=int, help="Print every scoreboard URL of this season")
    mode.add_argument("--current", action="store_true", help="Print the current scoreboard URL(s)")
    mode.add_argument("--standings", type=int, metavar="SEASON", help="Print standings of this season as JSON")
    parser.add_argument("--offset", type=int, default=0, help="Days (date leagues) or weeks (football) from now")
    parser.add_argument("--division", default=None, help="College division for --standings (fbs, fcs, d2, d3)")
    args = parser.parse_args()

    try:
        with EspnScraper() as scraper:
            if args.standings is not None:
                standings = scraper.get_standings(args.league, args.standings, college_division=args.division)
                print(json.dumps(standings.to_dict(), indent=2))
                return 0

            if args.current:
                urls = scraper.get_current_scoreboard_urls(args.league, args.offset)
            else:
                urls = scraper.get_all_scoreboard_urls(args.league, args.season)
    except EspnScraperError as e:
        logger.error(f"{e} {e.context}")
        return 1

    for url in urls:
        print(url)
    logger.info(f"{len(urls)} scoreboard URLs for {args.league}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
