"""
Season and "current period" scoreboard URL enumeration.

Date leagues (basketball, baseball, hockey) have one scoreboard per day, so a
season is walked day by day between its start and end datetimes. Week leagues
(football) have one scoreboard per calendar entry (week), read from the
season calendar served with any scoreboard of that season.

College leagues split each scoreboard by division group, so every day or week
yields one URL per group.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Union
from zoneinfo import ZoneInfo

from espn_scraper.errors import InvalidArgumentError
from espn_scraper.leagues import DATE_LEAGUES, LEAGUES, League, MonthDay
from espn_scraper.scrape.parsers.calendar import (
    extract_calendar,
    extract_season_window,
    find_entry,
    parse_season_types,
)
from espn_scraper.scrape.urls import DateLike, date_scoreboard_url, week_scoreboard_url

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def guess_season_year(moment: datetime) -> int:
    """Football seasons run into January/February, which belong to the prior year."""
    return moment.year if moment.month > 2 else moment.year - 1


def _require_league(league: str, operation: str) -> League:
    info = LEAGUES.get(league)
    if info is None:
        message = f"Unknown league '{league}' for {operation}"
        logger.error(message)
        raise InvalidArgumentError(message, context={"league": league})
    return info


class SeasonWalker:
    """
    Builds scoreboard URL sets for whole seasons or the current period.

    Args:
        get_url: Fetches a URL and returns its parsed content (JSON for
            scoreboards). Usually EspnScraper.get_url.
        now: Clock returning an aware datetime; injectable for tests.
        local_timezone: Timezone ESPN keys scoreboard dates to.
    """

    def __init__(
        self,
        get_url: Callable[[str], Any],
        now: Callable[[], datetime] = utc_now,
        local_timezone: str = "America/New_York",
    ):
        self._get_url = get_url
        self._now = now
        self.tz = ZoneInfo(local_timezone)

    # =========================================================================
    # Calendars and season windows
    # =========================================================================

    def get_calendar(self, league: str, date_or_season_year: Union[int, DateLike]) -> list:
        """
        Return the raw season calendar for a league.

        Week leagues take a season year (the week 1 regular season scoreboard
        is probed); date leagues take a YYYYMMDD date.
        """
        logger.debug("Getting calendar for %s %s", league, date_or_season_year)

        info = _require_league(league, "get_calendar")
        if info.scoreboard == "week":
            url = week_scoreboard_url(league, date_or_season_year, 2, 1)
        else:
            url = date_scoreboard_url(league, date_or_season_year)

        return extract_calendar(self._get_url(url))

    def _local_midnight(self, month_day: MonthDay, season_year: int) -> datetime:
        local = datetime(season_year + month_day.year_offset, month_day.month, month_day.day, tzinfo=self.tz)
        return local.astimezone(timezone.utc)

    def get_season_start_end_datetimes(self, league: str, season_year: int) -> tuple[datetime, datetime]:
        """
        Return the (start, end) datetimes of a date-league season, in UTC.

        Hardcoded windows are used where the league has one; otherwise a day
        known to fall inside the season is fetched and its calendar bounds read.
        """
        info = LEAGUES.get(league)
        if info is None or info.season_window is None:
            message = f"League must be one of '{', '.join(DATE_LEAGUES)}' to get season start and end datetimes"
            logger.error(message)
            raise InvalidArgumentError(message, context={"league": league})

        rule = info.season_window
        season_year = int(season_year)
        if rule.is_fixed:
            return self._local_midnight(rule.start, season_year), self._local_midnight(rule.end, season_year)

        probe_url = date_scoreboard_url(league, rule.probe.as_date_string(season_year))
        return extract_season_window(self._get_url(probe_url))

    # =========================================================================
    # URL sets
    # =========================================================================

    def _date_urls(self, info: League, day: str) -> list[str]:
        if info.groups:
            return [date_scoreboard_url(info.code, day, group) for group in info.groups]
        return [date_scoreboard_url(info.code, day)]

    def _week_urls(self, info: League, season_year: int, season_type: str, week: str) -> list[str]:
        if info.groups:
            return [
                week_scoreboard_url(info.code, season_year, season_type, week, group)
                for group in info.groups
            ]
        return [week_scoreboard_url(info.code, season_year, season_type, week)]

    def get_all_scoreboard_urls(self, league: str, season_year: int) -> list[str]:
        """Return every scoreboard URL of a season, in chronological order."""
        info = _require_league(league, "get_all_scoreboard_urls")
        urls: list[str] = []

        if info.scoreboard == "date":
            logger.debug("Date league detected: %s", league)
            start_date, end_date = self.get_season_start_end_datetimes(league, season_year)
            logger.debug("Season window for %s %s: %s -> %s", league, season_year, start_date, end_date)

            day = start_date
            while day < end_date:
                urls.extend(self._date_urls(info, day.strftime("%Y%m%d")))
                day += timedelta(days=1)
            return urls

        logger.debug("Week league detected: %s", league)
        for season_type in parse_season_types(self.get_calendar(league, season_year)):
            for entry in season_type.entries:
                urls.extend(self._week_urls(info, season_year, season_type.value, entry.value))
        return urls

    def get_current_scoreboard_urls(self, league: str, offset: int = 0) -> list[str]:
        """
        Return the scoreboard URLs for "now".

        ``offset`` shifts now by days for date leagues and by weeks for week
        leagues. Week leagues return an empty list when no calendar entry
        covers the moment (between seasons).
        """
        info = _require_league(league, "get_current_scoreboard_urls")

        if info.scoreboard == "date":
            moment = self._now().astimezone(self.tz) + timedelta(days=offset)
            day = moment.strftime("%Y%m%d")
            logger.debug("Date league detected: %s, date %s", league, day)
            return self._date_urls(info, day)

        moment = self._now().astimezone(timezone.utc) + timedelta(weeks=offset)
        season_year = guess_season_year(moment)
        logger.debug("Week league detected: %s, moment %s, guessed season %s", league, moment, season_year)

        season_types = parse_season_types(self.get_calendar(league, season_year))
        entry = find_entry(season_types, moment)
        if entry is None:
            logger.debug("No %s calendar entry covers %s", league, moment)
            return []
        return self._week_urls(info, season_year, entry.season_type, entry.value)
