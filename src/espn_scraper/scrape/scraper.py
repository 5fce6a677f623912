"""
ESPN scraper facade.

Single entry point composing URL building, fetching and parsing:
- Teams per league (college football across FBS and FCS)
- Standings per league season (optionally per college division)
- Any ESPN game/scoreboard URL, auto-parsed as JSON or HTML
- Season calendars and scoreboard URL sets (whole season or current period)

Requests run one at a time; nothing is cached between calls.
"""

import logging
from datetime import datetime
from typing import Any, Callable, Mapping, Optional, Union

from bs4 import BeautifulSoup

from espn_scraper.config import Settings, settings as default_settings
from espn_scraper.errors import UnsupportedOperationError
from espn_scraper.leagues import LEAGUES, get_league, get_sport
from espn_scraper.scrape import urls
from espn_scraper.scrape.base import Standings, Team
from espn_scraper.scrape.http import HttpClient, HttpClientConfig
from espn_scraper.scrape.parsers.standings import extract_standings
from espn_scraper.scrape.parsers.teams import extract_college_teams, extract_teams
from espn_scraper.scrape.season import SeasonWalker, utc_now

logger = logging.getLogger(__name__)


class EspnScraper:
    """
    Scraper for espn.com.

    Usage:
        with EspnScraper() as scraper:
            teams = scraper.get_teams("nfl")
            standings = scraper.get_standings("nba", 2004)
            for url in scraper.get_current_scoreboard_urls("ncb"):
                scoreboard = scraper.get_url(url)

    Args:
        client: HTTP client to use; built from settings (plus ``headers``)
            when omitted
        headers: Extra request headers for the default client
        now: Clock for the "current" scoreboard lookups
        settings: Settings to read defaults from
    """

    def __init__(
        self,
        client: Optional[HttpClient] = None,
        headers: Optional[Mapping[str, str]] = None,
        now: Callable[[], datetime] = utc_now,
        settings: Optional[Settings] = None,
    ):
        settings = settings or default_settings
        self.client = client or HttpClient(HttpClientConfig.from_settings(settings, headers=headers))
        self.season = SeasonWalker(self.get_url, now=now, local_timezone=settings.local_timezone)

    def __enter__(self) -> "EspnScraper":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        self.client.close()

    # =========================================================================
    # URL builders
    # =========================================================================

    game_url = staticmethod(urls.game_url)
    teams_url = staticmethod(urls.teams_url)
    standings_url = staticmethod(urls.standings_url)
    date_scoreboard_url = staticmethod(urls.date_scoreboard_url)
    week_scoreboard_url = staticmethod(urls.week_scoreboard_url)
    sportscenter_api_url = staticmethod(urls.sportscenter_api_url)
    get_league_from_url = staticmethod(urls.get_league_from_url)
    get_data_type_from_url = staticmethod(urls.get_data_type_from_url)
    get_date_from_scoreboard_url = staticmethod(urls.get_date_from_scoreboard_url)

    # =========================================================================
    # Teams and standings
    # =========================================================================

    def get_teams(self, league: str) -> list[Team]:
        """
        Return the teams of a league with their ESPN ids and names.

        College football teams are collected from the FBS and FCS standings
        views and tagged with their division.
        """
        get_league(league)

        if league == "ncf":
            teams: list[Team] = []
            for division, url in urls.college_football_teams_urls():
                logger.debug("Scraping %s teams for division %s", league, division)
                teams.extend(extract_college_teams(self.client.get_html(url), division))
            return teams

        return extract_teams(self.client.get_html(urls.teams_url(league)), league)

    def get_standings(
        self,
        league: str,
        season_year: Union[int, str],
        college_division: Optional[str] = None,
    ) -> Standings:
        """
        Return the conference -> division -> team standings for a season.

        Unknown leagues get an empty Standings rather than an error; an
        unknown college division raises InvalidArgumentError.
        """
        if league not in LEAGUES:
            logger.debug("No standings for unsupported league %s", league)
            return Standings()

        url = urls.standings_url(league, season_year, college_division)
        return extract_standings(self.client.get_html(url), league)

    # =========================================================================
    # Generic fetch
    # =========================================================================

    def get_url(self, url: str, cache: bool = False) -> Union[Any, BeautifulSoup]:
        """
        Fetch an ESPN URL and return its parsed content.

        Scoreboards of leagues without scoreboard JSON are fetched from the
        sportscenter events API instead. Box scores of HTML-only leagues come
        back as BeautifulSoup; everything else as decoded JSON.

        Raises:
            UnsupportedOperationError: if ``cache`` is requested
        """
        data_type = urls.get_data_type_from_url(url)
        league = urls.get_league_from_url(url)

        info = LEAGUES.get(league)
        if data_type == "scoreboard" and info is not None and not info.scoreboard_json:
            logger.debug("Scoreboard of %s has no JSON, using sportscenter API", league)
            url = urls.sportscenter_api_url(get_sport(league), league, urls.get_date_from_scoreboard_url(url))

        logger.debug("Getting data from %s (data_type=%s, league=%s, cache=%s)", url, data_type, league, cache)

        if cache:
            raise UnsupportedOperationError("Caching of ESPN pages is not implemented", context={"url": url})

        if urls.expected_response_format(league, data_type) == "html":
            return self.client.get_html(url)
        return self.client.get_json(url)

    # =========================================================================
    # Calendars and scoreboards
    # =========================================================================

    def get_calendar(self, league: str, date_or_season_year: Union[int, str]) -> list:
        return self.season.get_calendar(league, date_or_season_year)

    def get_season_start_end_datetimes(self, league: str, season_year: int) -> tuple[datetime, datetime]:
        return self.season.get_season_start_end_datetimes(league, season_year)

    def get_current_scoreboard_urls(self, league: str, offset: int = 0) -> list[str]:
        """Current scoreboard URLs; ``offset`` is in days (date leagues) or weeks (football)."""
        return self.season.get_current_scoreboard_urls(league, offset)

    def get_all_scoreboard_urls(self, league: str, season_year: int) -> list[str]:
        return self.season.get_all_scoreboard_urls(league, season_year)
