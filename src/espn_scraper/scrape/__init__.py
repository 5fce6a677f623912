"""
Web scraping module for ESPN Scraper.

Key components:
- EspnScraper: Facade for teams, standings, URL fetching and scoreboard URLs
- HttpClient: requests-based transport with retry and exponential backoff
- SeasonWalker: Whole-season and current-period scoreboard URL enumeration
- urls: Pure URL builders and URL introspection helpers

The scraping architecture uses:
- requests for HTTP (one request at a time)
- BeautifulSoup (lxml) for HTML parsing
- Retry logic with exponential backoff and jitter for reliability
"""

from espn_scraper.scrape.base import (
    CalendarEntry,
    Conference,
    Division,
    SeasonType,
    Standings,
    Team,
    TeamStanding,
)
from espn_scraper.scrape.http import HttpClient, HttpClientConfig
from espn_scraper.scrape.scraper import EspnScraper
from espn_scraper.scrape.season import SeasonWalker

__all__ = [
    "CalendarEntry",
    "Conference",
    "Division",
    "EspnScraper",
    "HttpClient",
    "HttpClientConfig",
    "SeasonType",
    "SeasonWalker",
    "Standings",
    "Team",
    "TeamStanding",
]
